"""作业指示数据操作

作业指示删除后，引用它的生产实绩保留不动，集计时按找不到处理
"""

from ..schemas import CreateWorkOrder, Snapshot, UpdateWorkOrder, WorkOrder
from .common import build, changes_of, new_id, remove_record, replace_record


def create_work_order(snapshot: Snapshot, command: CreateWorkOrder) -> Snapshot:
    """创建作业指示"""
    order = build(WorkOrder, {
        "id": command.id or new_id("wo"),
        "date": command.date,
        "item_id": command.item_id,
        "worker_id": command.worker_id,
        "target_quantity": command.target_quantity,
        "status": command.status,
    })
    return snapshot.model_copy(update={"work_orders": (order,) + snapshot.work_orders})


def update_work_order(snapshot: Snapshot, command: UpdateWorkOrder) -> Snapshot:
    """更新作业指示"""
    orders = replace_record(snapshot.work_orders, "WorkOrder", command.id, changes_of(command))
    return snapshot.model_copy(update={"work_orders": orders})


def delete_work_order(snapshot: Snapshot, order_id: str) -> Snapshot:
    """删除作业指示"""
    orders = remove_record(snapshot.work_orders, "WorkOrder", order_id)
    return snapshot.model_copy(update={"work_orders": orders})
