"""快照表模型

整个记录集（用户、品目、不良类型、作业指示、生产实绩）作为一条 JSON 文本保存
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from ..database.connection import Base


class SnapshotRecord(Base):
    """快照表"""
    __tablename__ = "snapshots"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(64), unique=True, nullable=False, index=True)
    # Snapshot.model_dump_json() 的结果
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
