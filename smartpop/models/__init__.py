"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from .snapshot import SnapshotRecord

__all__ = ["SnapshotRecord"]
