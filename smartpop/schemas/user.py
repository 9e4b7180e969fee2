"""用户数据结构定义

定义用户相关的Pydantic模型
"""

from enum import Enum

from .base import RecordModel, NonBlankStr


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    WORKER = "WORKER"


class User(RecordModel):
    """用户（管理员或作业员）"""
    id: str
    username: NonBlankStr
    name: NonBlankStr
    role: UserRole = UserRole.WORKER
