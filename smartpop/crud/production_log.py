"""生产实绩数据操作

- submit_production_log 的作业员取自作业指示，并把该指示标记为 COMPLETED
- 数量为 0 的不良录入在保存前丢弃
"""

from typing import Iterable, List

from ..exceptions import EntityNotFoundError
from ..schemas import (
    DefectInput,
    ProductionLog,
    Snapshot,
    SubmitProductionLog,
    UpdateProductionLog,
    WorkOrderStatus,
)
from .common import build, find_index, new_id, remove_record, replace_record, utc_timestamp


def normalize_defects(defects: Iterable[DefectInput]) -> List[dict]:
    """去掉数量为0的不良录入，保持原有顺序"""
    return [
        {"defect_type_id": d.defect_type_id, "quantity": d.quantity}
        for d in defects
        if d.quantity > 0
    ]


def submit_production_log(snapshot: Snapshot, command: SubmitProductionLog) -> Snapshot:
    """报告生产实绩"""
    idx = find_index(snapshot.work_orders, command.work_order_id)
    if idx < 0:
        raise EntityNotFoundError("WorkOrder", command.work_order_id)
    order = snapshot.work_orders[idx]

    log = build(ProductionLog, {
        "id": command.id or new_id("log"),
        "work_order_id": order.id,
        "worker_id": order.worker_id,
        "good_quantity": command.good_quantity,
        "defects": normalize_defects(command.defects),
        "comment": command.comment,
        "timestamp": command.timestamp or utc_timestamp(),
    })
    completed = order.model_copy(update={"status": WorkOrderStatus.COMPLETED})
    orders = snapshot.work_orders[:idx] + (completed,) + snapshot.work_orders[idx + 1:]
    return snapshot.model_copy(update={
        "work_orders": orders,
        "production_logs": (log,) + snapshot.production_logs,
    })


def update_production_log(snapshot: Snapshot, command: UpdateProductionLog) -> Snapshot:
    """管理员修正生产实绩；作业员字段保持创建时的值"""
    changes = command.model_dump(exclude_unset=True, exclude={"id", "defects"})
    changes = {k: v for k, v in changes.items() if v is not None}
    if command.defects is not None:
        changes["defects"] = normalize_defects(command.defects)
    logs = replace_record(snapshot.production_logs, "ProductionLog", command.id, changes)
    return snapshot.model_copy(update={"production_logs": logs})


def delete_production_log(snapshot: Snapshot, log_id: str) -> Snapshot:
    logs = remove_record(snapshot.production_logs, "ProductionLog", log_id)
    return snapshot.model_copy(update={"production_logs": logs})
