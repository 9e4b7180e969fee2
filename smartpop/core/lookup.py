"""记录查找

查找函数返回 Optional，找不到时返回 None；显示用的占位值只在构建报表行时决定。
"""

from typing import Dict, Iterable, Optional, TypeVar

from ..schemas import DefectType, Item, User, WorkOrder

# 显示用占位值
MISSING_NAME = "-"
OTHER_DEFECT_NAME = "其他"

T = TypeVar("T")


def _index(records: Iterable[T]) -> Dict[str, T]:
    index: Dict[str, T] = {}
    for record in records:
        # 与逐条查找一致：重复ID时取第一条
        index.setdefault(record.id, record)
    return index


class RecordIndex:
    """按ID建立的只读索引"""

    def __init__(
        self,
        items: Iterable[Item] = (),
        users: Iterable[User] = (),
        defect_types: Iterable[DefectType] = (),
        work_orders: Iterable[WorkOrder] = (),
    ):
        self._items = _index(items)
        self._users = _index(users)
        self._defect_types = _index(defect_types)
        self._work_orders = _index(work_orders)

    def item(self, item_id: Optional[str]) -> Optional[Item]:
        return self._items.get(item_id) if item_id is not None else None

    def user(self, user_id: Optional[str]) -> Optional[User]:
        return self._users.get(user_id) if user_id is not None else None

    def defect_type(self, defect_type_id: Optional[str]) -> Optional[DefectType]:
        return self._defect_types.get(defect_type_id) if defect_type_id is not None else None

    def work_order(self, order_id: Optional[str]) -> Optional[WorkOrder]:
        return self._work_orders.get(order_id) if order_id is not None else None


def name_or(record, fallback: str) -> str:
    """取记录的 name，记录不存在时返回 fallback"""
    return record.name if record is not None else fallback
