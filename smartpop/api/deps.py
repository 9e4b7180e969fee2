"""路由公共依赖

- get_snapshot_store：每个请求一个数据库会话对应的快照存储
- commit_command：执行命令并保存，业务异常转换为 HTTP 错误
"""

import logging

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from ..core import apply
from ..crud import SnapshotStore, get_store
from ..database.connection import get_db
from ..exceptions import (
    EntityNotFoundError,
    RecordValidationError,
    SelfDeletionError,
    SnapshotCorruptedError,
)
from ..schemas import Command, Snapshot
from ..services import GeminiInsightGenerator, InsightGenerator

logger = logging.getLogger(__name__)


def get_snapshot_store(db: Session = Depends(get_db)) -> SnapshotStore:
    return get_store(db)


def get_insight_generator() -> InsightGenerator:
    return GeminiInsightGenerator()


def load_snapshot(store: SnapshotStore) -> Snapshot:
    try:
        return store.load()
    except SnapshotCorruptedError as exc:
        logger.error("Snapshot load failed: %s", exc)
        raise HTTPException(status_code=500, detail="Stored records are corrupted")


def commit_command(store: SnapshotStore, command: Command) -> Snapshot:
    """apply + save；失败时快照不保存"""
    snapshot = load_snapshot(store)
    try:
        new_snapshot = apply(snapshot, command)
    except EntityNotFoundError as exc:
        logger.warning("Rejected %s: %s", type(command).__name__, exc)
        raise HTTPException(status_code=404, detail=f"{exc.kind} not found")
    except SelfDeletionError as exc:
        logger.warning("Rejected %s: %s", type(command).__name__, exc)
        raise HTTPException(status_code=409, detail="Cannot delete the active operator")
    except RecordValidationError as exc:
        logger.warning("Rejected %s: %s", type(command).__name__, exc)
        raise HTTPException(status_code=422, detail=str(exc))
    store.save(new_snapshot)
    return new_snapshot


def find_record(records, record_id: str, kind: str):
    record = next((r for r in records if r.id == record_id), None)
    if record is None:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return record
