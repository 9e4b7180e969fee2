"""品目数据操作

每个函数接收旧快照并返回新快照，不修改输入
"""

from ..schemas import CreateItem, Item, Snapshot, UpdateItem
from .common import build, changes_of, new_id, remove_record, replace_record


def create_item(snapshot: Snapshot, command: CreateItem) -> Snapshot:
    """创建品目，新记录排在最前"""
    item = build(Item, {
        "id": command.id or new_id("i"),
        "code": command.code,
        "name": command.name,
        "unit": command.unit,
    })
    return snapshot.model_copy(update={"items": (item,) + snapshot.items})


def update_item(snapshot: Snapshot, command: UpdateItem) -> Snapshot:
    items = replace_record(snapshot.items, "Item", command.id, changes_of(command))
    return snapshot.model_copy(update={"items": items})


def delete_item(snapshot: Snapshot, item_id: str) -> Snapshot:
    return snapshot.model_copy(update={"items": remove_record(snapshot.items, "Item", item_id)})
