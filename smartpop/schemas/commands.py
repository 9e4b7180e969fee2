"""编辑命令定义

所有对快照的修改都通过命令表达，由 core.reducer.apply 执行。
create 命令的 id 可省略，省略时由 reducer 生成；update 命令只修改显式传入的字段。
*Changes 模型是更新接口的请求体，Update* 命令在其基础上加上目标 id。
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from .base import CommandModel, NonBlankStr
from .user import UserRole
from .work_order import WorkOrderStatus

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class RecordKind(str, Enum):
    USER = "USER"
    ITEM = "ITEM"
    DEFECT_TYPE = "DEFECT_TYPE"
    WORK_ORDER = "WORK_ORDER"
    PRODUCTION_LOG = "PRODUCTION_LOG"


class CreateItem(CommandModel):
    id: Optional[str] = None
    code: NonBlankStr
    name: NonBlankStr
    unit: str = "EA"


class ItemChanges(CommandModel):
    code: Optional[NonBlankStr] = None
    name: Optional[NonBlankStr] = None
    unit: Optional[str] = None


class UpdateItem(ItemChanges):
    id: str


class CreateDefectType(CommandModel):
    id: Optional[str] = None
    name: NonBlankStr


class DefectTypeChanges(CommandModel):
    name: Optional[NonBlankStr] = None


class UpdateDefectType(DefectTypeChanges):
    id: str


class CreateUser(CommandModel):
    id: Optional[str] = None
    username: NonBlankStr
    name: NonBlankStr
    role: UserRole = UserRole.WORKER


class UserChanges(CommandModel):
    username: Optional[NonBlankStr] = None
    name: Optional[NonBlankStr] = None
    role: Optional[UserRole] = None


class UpdateUser(UserChanges):
    id: str


class CreateWorkOrder(CommandModel):
    id: Optional[str] = None
    date: str = Field(pattern=DATE_PATTERN)
    item_id: str
    worker_id: str
    target_quantity: int = Field(default=100, ge=0)
    status: WorkOrderStatus = WorkOrderStatus.PENDING


class WorkOrderChanges(CommandModel):
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    item_id: Optional[str] = None
    worker_id: Optional[str] = None
    target_quantity: Optional[int] = Field(default=None, ge=0)
    status: Optional[WorkOrderStatus] = None


class UpdateWorkOrder(WorkOrderChanges):
    id: str


class DefectInput(CommandModel):
    """录入时的不良数量，0 表示未发生，保存前会被丢弃"""
    defect_type_id: str
    quantity: int = Field(default=0, ge=0)


class SubmitProductionLog(CommandModel):
    """报告生产实绩：作业员取自作业指示，作业指示状态变为 COMPLETED"""
    id: Optional[str] = None
    work_order_id: str
    good_quantity: int = Field(default=0, ge=0)
    defects: List[DefectInput] = []
    comment: str = ""
    timestamp: Optional[str] = None


class ProductionLogChanges(CommandModel):
    work_order_id: Optional[str] = None
    good_quantity: Optional[int] = Field(default=None, ge=0)
    defects: Optional[List[DefectInput]] = None
    comment: Optional[str] = None


class UpdateProductionLog(ProductionLogChanges):
    id: str


class DeleteRecord(CommandModel):
    kind: RecordKind
    id: str


class SelectOperator(CommandModel):
    """切换当前操作者，user_id 为 None 表示登出"""
    user_id: Optional[str] = None


Command = Union[
    CreateItem,
    UpdateItem,
    CreateDefectType,
    UpdateDefectType,
    CreateUser,
    UpdateUser,
    CreateWorkOrder,
    UpdateWorkOrder,
    SubmitProductionLog,
    UpdateProductionLog,
    DeleteRecord,
    SelectOperator,
]
