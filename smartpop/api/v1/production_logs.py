from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...core import filter_records
from ...crud import SnapshotStore
from ...schemas import (
    DeleteRecord,
    ProductionLog,
    ProductionLogChanges,
    RecordKind,
    SubmitProductionLog,
    UpdateProductionLog,
)
from ...utils.helpers import resolve_date_range
from ..deps import commit_command, find_record, get_snapshot_store, load_snapshot

router = APIRouter(prefix="/production-logs", tags=["production-logs"])


@router.get("/", response_model=List[ProductionLog])
def list_production_logs(
    start_date: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}-\d{2}$"),
    end_date: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}-\d{2}$"),
    q: str = Query(""),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """按作业指示日期与品名/作业员/备注关键字检索生产实绩"""
    snapshot = load_snapshot(store)
    start, end = resolve_date_range(start_date, end_date)
    _, logs = filter_records(
        snapshot.work_orders, snapshot.production_logs, snapshot.items, snapshot.users, start, end, q
    )
    return logs


@router.post("/", response_model=ProductionLog)
def submit_production_log(command: SubmitProductionLog, store: SnapshotStore = Depends(get_snapshot_store)):
    """报告生产实绩，对应的作业指示变为 COMPLETED"""
    snapshot = commit_command(store, command)
    return snapshot.production_logs[0]


@router.put("/{log_id}", response_model=ProductionLog)
def update_production_log(
    log_id: str,
    payload: ProductionLogChanges,
    store: SnapshotStore = Depends(get_snapshot_store),
):
    command = UpdateProductionLog(id=log_id, **payload.model_dump(exclude_unset=True))
    snapshot = commit_command(store, command)
    return find_record(snapshot.production_logs, log_id, "ProductionLog")


@router.delete("/{log_id}")
def delete_production_log(log_id: str, store: SnapshotStore = Depends(get_snapshot_store)):
    commit_command(store, DeleteRecord(kind=RecordKind.PRODUCTION_LOG, id=log_id))
    return {"message": "Production log deleted successfully"}
