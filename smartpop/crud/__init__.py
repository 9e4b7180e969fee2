"""快照编辑（CRUD）与存储

所有编辑函数都是纯函数：接收旧快照，返回新快照。
"""

from .item import create_item, update_item, delete_item
from .defect_type import create_defect_type, update_defect_type, delete_defect_type
from .user import create_user, update_user, delete_user, select_operator
from .work_order import create_work_order, update_work_order, delete_work_order
from .production_log import (
    submit_production_log,
    update_production_log,
    delete_production_log,
    normalize_defects,
)
from .store import SnapshotStore, get_store

__all__ = [
    # Item functions
    "create_item",
    "update_item",
    "delete_item",

    # Defect type functions
    "create_defect_type",
    "update_defect_type",
    "delete_defect_type",

    # User functions
    "create_user",
    "update_user",
    "delete_user",
    "select_operator",

    # Work order functions
    "create_work_order",
    "update_work_order",
    "delete_work_order",

    # Production log functions
    "submit_production_log",
    "update_production_log",
    "delete_production_log",
    "normalize_defects",

    # Store
    "SnapshotStore",
    "get_store",
]
