"""快照存储

整个快照序列化为 JSON 后保存在 snapshots 表的一行中。
load/save 是唯一的持久化入口，调用方在 reducer 成功后显式调用 save。
"""

import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..config.settings import settings
from ..exceptions import SnapshotCorruptedError
from ..models import SnapshotRecord
from ..schemas import Snapshot, seed_snapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """基于 SQLAlchemy 会话的快照存储"""

    def __init__(self, db: Session, key: Optional[str] = None):
        self.db = db
        self.key = key or settings.SNAPSHOT_KEY

    def _get_record(self) -> Optional[SnapshotRecord]:
        return self.db.query(SnapshotRecord).filter(SnapshotRecord.key == self.key).first()

    def load(self) -> Snapshot:
        """读取快照；尚未保存过时返回初始数据"""
        record = self._get_record()
        if record is None:
            logger.warning("No stored snapshot for key %r, using seed data", self.key)
            return seed_snapshot()
        try:
            return Snapshot.model_validate_json(record.payload)
        except ValidationError as exc:
            raise SnapshotCorruptedError(f"stored snapshot {self.key!r} is not valid") from exc

    def save(self, snapshot: Snapshot) -> None:
        """整体覆盖保存快照"""
        payload = snapshot.model_dump_json(by_alias=True)
        record = self._get_record()
        if record is None:
            record = SnapshotRecord(key=self.key, payload=payload)
            self.db.add(record)
        else:
            record.payload = payload
        self.db.commit()
        logger.info(
            "Saved snapshot %r (%d orders, %d logs)",
            self.key, len(snapshot.work_orders), len(snapshot.production_logs),
        )


def get_store(db: Session, key: Optional[str] = None) -> SnapshotStore:
    return SnapshotStore(db, key)
