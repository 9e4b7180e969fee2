"""全量快照

快照是唯一的持久化单位：每次编辑都会生成一个新的快照对象。
"""

from typing import Optional, Tuple

from .base import RecordModel
from .user import User, UserRole
from .item import Item
from .defect_type import DefectType
from .work_order import WorkOrder, WorkOrderStatus
from .production_log import ProductionLog


class Snapshot(RecordModel):
    users: Tuple[User, ...] = ()
    items: Tuple[Item, ...] = ()
    defect_types: Tuple[DefectType, ...] = ()
    work_orders: Tuple[WorkOrder, ...] = ()
    production_logs: Tuple[ProductionLog, ...] = ()
    # 当前操作者
    current_user_id: Optional[str] = None


def seed_snapshot() -> Snapshot:
    """没有已保存快照时使用的初始数据"""
    return Snapshot(
        users=(
            User(id="u1", username="admin", role=UserRole.ADMIN, name="管理员"),
            User(id="u2", username="worker1", role=UserRole.WORKER, name="张伟"),
            User(id="u3", username="worker2", role=UserRole.WORKER, name="李强"),
        ),
        items=(
            Item(id="i1", code="P-001", name="电路板 A", unit="EA"),
            Item(id="i2", code="P-002", name="铝框架 B", unit="PCS"),
        ),
        defect_types=(
            DefectType(id="d1", name="划痕"),
            DefectType(id="d2", name="尺寸不良"),
            DefectType(id="d3", name="功能故障"),
        ),
        work_orders=(
            WorkOrder(
                id="wo1",
                date="2024-05-20",
                item_id="i1",
                worker_id="u2",
                target_quantity=100,
                status=WorkOrderStatus.PENDING,
            ),
        ),
    )
