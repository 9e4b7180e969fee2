from fastapi import APIRouter, Depends

from ...crud import SnapshotStore
from ...schemas import SelectOperator, Snapshot
from ..deps import commit_command, get_snapshot_store, load_snapshot

router = APIRouter(tags=["records"])


@router.get("/records", response_model=Snapshot)
def get_records(store: SnapshotStore = Depends(get_snapshot_store)):
    """返回完整快照"""
    return load_snapshot(store)


@router.put("/session", response_model=Snapshot)
def select_operator(command: SelectOperator, store: SnapshotStore = Depends(get_snapshot_store)):
    """切换当前操作者（user_id 为空表示登出）"""
    return commit_command(store, command)
