"""用户数据操作

定义对用户数据的增删改查操作
"""

from ..exceptions import EntityNotFoundError, SelfDeletionError
from ..schemas import CreateUser, Snapshot, UpdateUser, User
from .common import build, changes_of, find_index, new_id, remove_record, replace_record


def create_user(snapshot: Snapshot, command: CreateUser) -> Snapshot:
    """创建用户"""
    user = build(User, {
        "id": command.id or new_id("u"),
        "username": command.username,
        "name": command.name,
        "role": command.role,
    })
    return snapshot.model_copy(update={"users": (user,) + snapshot.users})


def update_user(snapshot: Snapshot, command: UpdateUser) -> Snapshot:
    """更新用户"""
    users = replace_record(snapshot.users, "User", command.id, changes_of(command))
    return snapshot.model_copy(update={"users": users})


def delete_user(snapshot: Snapshot, user_id: str) -> Snapshot:
    """删除用户，当前操作者不能删除自己"""
    if snapshot.current_user_id is not None and user_id == snapshot.current_user_id:
        raise SelfDeletionError(user_id)
    return snapshot.model_copy(update={"users": remove_record(snapshot.users, "User", user_id)})


def select_operator(snapshot: Snapshot, user_id) -> Snapshot:
    """切换当前操作者；None 表示登出"""
    if user_id is not None and find_index(snapshot.users, user_id) < 0:
        raise EntityNotFoundError("User", user_id)
    return snapshot.model_copy(update={"current_user_id": user_id})
