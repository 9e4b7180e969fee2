from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...core import filter_records, filter_worker_orders
from ...crud import SnapshotStore
from ...schemas import (
    CreateWorkOrder,
    DeleteRecord,
    RecordKind,
    UpdateWorkOrder,
    WorkOrder,
    WorkOrderChanges,
)
from ...utils.helpers import resolve_date_range
from ..deps import commit_command, find_record, get_snapshot_store, load_snapshot

router = APIRouter(prefix="/work-orders", tags=["work-orders"])


@router.get("/", response_model=List[WorkOrder])
def list_work_orders(
    start_date: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}-\d{2}$"),
    end_date: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}-\d{2}$"),
    q: str = Query(""),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """按日期范围与品名/作业员关键字检索作业指示"""
    snapshot = load_snapshot(store)
    start, end = resolve_date_range(start_date, end_date)
    orders, _ = filter_records(
        snapshot.work_orders, snapshot.production_logs, snapshot.items, snapshot.users, start, end, q
    )
    return orders


@router.get("/mine", response_model=List[WorkOrder])
def list_my_work_orders(q: str = Query(""), store: SnapshotStore = Depends(get_snapshot_store)):
    """当前操作者本人的作业指示，日期倒序"""
    snapshot = load_snapshot(store)
    if snapshot.current_user_id is None:
        raise HTTPException(status_code=401, detail="No active operator")
    return filter_worker_orders(snapshot.work_orders, snapshot.items, snapshot.current_user_id, q)


@router.post("/", response_model=WorkOrder)
def create_work_order(command: CreateWorkOrder, store: SnapshotStore = Depends(get_snapshot_store)):
    """创建作业指示"""
    snapshot = commit_command(store, command)
    return snapshot.work_orders[0]


@router.put("/{order_id}", response_model=WorkOrder)
def update_work_order(order_id: str, payload: WorkOrderChanges, store: SnapshotStore = Depends(get_snapshot_store)):
    command = UpdateWorkOrder(id=order_id, **payload.model_dump(exclude_unset=True))
    snapshot = commit_command(store, command)
    return find_record(snapshot.work_orders, order_id, "WorkOrder")


@router.delete("/{order_id}")
def delete_work_order(order_id: str, store: SnapshotStore = Depends(get_snapshot_store)):
    """删除作业指示（关联的生产实绩保留）"""
    commit_command(store, DeleteRecord(kind=RecordKind.WORK_ORDER, id=order_id))
    return {"message": "Work order deleted successfully"}
