"""数据结构模块

定义所有 Pydantic 模型（实体、快照、命令、报表行）
"""

from .user import User, UserRole
from .item import Item
from .defect_type import DefectType
from .work_order import WorkOrder, WorkOrderStatus
from .production_log import DefectEntry, ProductionLog
from .snapshot import Snapshot, seed_snapshot
from .commands import (
    Command,
    CreateDefectType,
    CreateItem,
    CreateUser,
    CreateWorkOrder,
    DefectInput,
    DefectTypeChanges,
    DeleteRecord,
    ItemChanges,
    ProductionLogChanges,
    RecordKind,
    SelectOperator,
    SubmitProductionLog,
    UpdateDefectType,
    UpdateItem,
    UpdateProductionLog,
    UpdateUser,
    UpdateWorkOrder,
    UserChanges,
    WorkOrderChanges,
)
from .report import ReportDimension, ReportRow, DefectReportRow, ReportExport

__all__ = [
    "User",
    "UserRole",
    "Item",
    "DefectType",
    "WorkOrder",
    "WorkOrderStatus",
    "DefectEntry",
    "ProductionLog",
    "Snapshot",
    "seed_snapshot",
    "Command",
    "CreateDefectType",
    "CreateItem",
    "CreateUser",
    "CreateWorkOrder",
    "DefectInput",
    "DefectTypeChanges",
    "DeleteRecord",
    "ItemChanges",
    "ProductionLogChanges",
    "RecordKind",
    "SelectOperator",
    "SubmitProductionLog",
    "UpdateDefectType",
    "UpdateItem",
    "UpdateProductionLog",
    "UpdateUser",
    "UpdateWorkOrder",
    "UserChanges",
    "WorkOrderChanges",
    "ReportDimension",
    "ReportRow",
    "DefectReportRow",
    "ReportExport",
]
