"""快照编辑的公共工具函数"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import EntityNotFoundError, RecordValidationError

T = TypeVar("T", bound=BaseModel)


def new_id(prefix: str) -> str:
    """生成记录ID，例如 wo-3f9a1c2b7d4e"""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def changes_of(command: BaseModel) -> Dict[str, Any]:
    """取出 update 命令中显式传入且非 None 的字段（id 除外）"""
    data = command.model_dump(exclude_unset=True, exclude={"id"})
    return {k: v for k, v in data.items() if v is not None}


def build(model_cls: Type[T], data: Dict[str, Any]) -> T:
    """校验并构建记录，失败时转换为 RecordValidationError"""
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise RecordValidationError(str(exc)) from exc


def find_index(records: Tuple[Any, ...], record_id: str) -> int:
    for idx, record in enumerate(records):
        if record.id == record_id:
            return idx
    return -1


def replace_record(records: Tuple[T, ...], kind: str, record_id: str, changes: Dict[str, Any]) -> Tuple[T, ...]:
    """返回替换了指定记录的新元组"""
    idx = find_index(records, record_id)
    if idx < 0:
        raise EntityNotFoundError(kind, record_id)
    current = records[idx]
    updated = build(type(current), {**current.model_dump(), **changes})
    return records[:idx] + (updated,) + records[idx + 1:]


def remove_record(records: Tuple[T, ...], kind: str, record_id: str) -> Tuple[T, ...]:
    """返回删除了指定记录的新元组"""
    if find_index(records, record_id) < 0:
        raise EntityNotFoundError(kind, record_id)
    return tuple(r for r in records if r.id != record_id)
