"""主数据（品目、不良类型、用户）路由"""

from fastapi import APIRouter, Depends

from ...crud import SnapshotStore
from ...schemas import (
    CreateDefectType,
    CreateItem,
    CreateUser,
    DefectType,
    DefectTypeChanges,
    DeleteRecord,
    Item,
    ItemChanges,
    RecordKind,
    UpdateDefectType,
    UpdateItem,
    UpdateUser,
    User,
    UserChanges,
)
from ..deps import commit_command, find_record, get_snapshot_store

router = APIRouter(tags=["master"])


@router.post("/items", response_model=Item)
def create_item(command: CreateItem, store: SnapshotStore = Depends(get_snapshot_store)):
    snapshot = commit_command(store, command)
    return snapshot.items[0]


@router.put("/items/{item_id}", response_model=Item)
def update_item(item_id: str, payload: ItemChanges, store: SnapshotStore = Depends(get_snapshot_store)):
    command = UpdateItem(id=item_id, **payload.model_dump(exclude_unset=True))
    snapshot = commit_command(store, command)
    return find_record(snapshot.items, item_id, "Item")


@router.delete("/items/{item_id}")
def delete_item(item_id: str, store: SnapshotStore = Depends(get_snapshot_store)):
    commit_command(store, DeleteRecord(kind=RecordKind.ITEM, id=item_id))
    return {"message": "Item deleted successfully"}


@router.post("/defect-types", response_model=DefectType)
def create_defect_type(command: CreateDefectType, store: SnapshotStore = Depends(get_snapshot_store)):
    snapshot = commit_command(store, command)
    return snapshot.defect_types[0]


@router.put("/defect-types/{defect_type_id}", response_model=DefectType)
def update_defect_type(
    defect_type_id: str,
    payload: DefectTypeChanges,
    store: SnapshotStore = Depends(get_snapshot_store),
):
    command = UpdateDefectType(id=defect_type_id, **payload.model_dump(exclude_unset=True))
    snapshot = commit_command(store, command)
    return find_record(snapshot.defect_types, defect_type_id, "DefectType")


@router.delete("/defect-types/{defect_type_id}")
def delete_defect_type(defect_type_id: str, store: SnapshotStore = Depends(get_snapshot_store)):
    commit_command(store, DeleteRecord(kind=RecordKind.DEFECT_TYPE, id=defect_type_id))
    return {"message": "Defect type deleted successfully"}


@router.post("/users", response_model=User)
def create_user(command: CreateUser, store: SnapshotStore = Depends(get_snapshot_store)):
    snapshot = commit_command(store, command)
    return snapshot.users[0]


@router.put("/users/{user_id}", response_model=User)
def update_user(user_id: str, payload: UserChanges, store: SnapshotStore = Depends(get_snapshot_store)):
    command = UpdateUser(id=user_id, **payload.model_dump(exclude_unset=True))
    snapshot = commit_command(store, command)
    return find_record(snapshot.users, user_id, "User")


@router.delete("/users/{user_id}")
def delete_user(user_id: str, store: SnapshotStore = Depends(get_snapshot_store)):
    """删除用户（不能删除当前操作者本人）"""
    commit_command(store, DeleteRecord(kind=RecordKind.USER, id=user_id))
    return {"message": "User deleted successfully"}
