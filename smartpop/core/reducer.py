"""快照 reducer

apply(snapshot, command) 返回新快照，不修改输入，也不做持久化。
调用方在成功后自行调用 SnapshotStore.save。
"""

import logging
from typing import Callable, Dict, Type

from .. import crud
from ..schemas import (
    Command,
    CreateDefectType,
    CreateItem,
    CreateUser,
    CreateWorkOrder,
    DeleteRecord,
    RecordKind,
    SelectOperator,
    Snapshot,
    SubmitProductionLog,
    UpdateDefectType,
    UpdateItem,
    UpdateProductionLog,
    UpdateUser,
    UpdateWorkOrder,
)

logger = logging.getLogger(__name__)

_DELETERS: Dict[RecordKind, Callable[[Snapshot, str], Snapshot]] = {
    RecordKind.USER: crud.delete_user,
    RecordKind.ITEM: crud.delete_item,
    RecordKind.DEFECT_TYPE: crud.delete_defect_type,
    RecordKind.WORK_ORDER: crud.delete_work_order,
    RecordKind.PRODUCTION_LOG: crud.delete_production_log,
}


def _delete(snapshot: Snapshot, command: DeleteRecord) -> Snapshot:
    return _DELETERS[command.kind](snapshot, command.id)


def _select_operator(snapshot: Snapshot, command: SelectOperator) -> Snapshot:
    return crud.select_operator(snapshot, command.user_id)


_HANDLERS: Dict[Type, Callable[[Snapshot, Command], Snapshot]] = {
    CreateItem: crud.create_item,
    UpdateItem: crud.update_item,
    CreateDefectType: crud.create_defect_type,
    UpdateDefectType: crud.update_defect_type,
    CreateUser: crud.create_user,
    UpdateUser: crud.update_user,
    CreateWorkOrder: crud.create_work_order,
    UpdateWorkOrder: crud.update_work_order,
    SubmitProductionLog: crud.submit_production_log,
    UpdateProductionLog: crud.update_production_log,
    DeleteRecord: _delete,
    SelectOperator: _select_operator,
}


def apply(snapshot: Snapshot, command: Command) -> Snapshot:
    """执行一条编辑命令

    校验失败、记录不存在、删除当前操作者时抛出异常，原快照保持不变。
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"unsupported command: {type(command).__name__}")
    new_snapshot = handler(snapshot, command)
    logger.info("Applied %s", type(command).__name__)
    return new_snapshot
