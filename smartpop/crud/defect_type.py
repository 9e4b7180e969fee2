"""不良类型数据操作"""

from ..schemas import CreateDefectType, DefectType, Snapshot, UpdateDefectType
from .common import build, changes_of, new_id, remove_record, replace_record


def create_defect_type(snapshot: Snapshot, command: CreateDefectType) -> Snapshot:
    defect_type = build(DefectType, {"id": command.id or new_id("d"), "name": command.name})
    return snapshot.model_copy(update={"defect_types": (defect_type,) + snapshot.defect_types})


def update_defect_type(snapshot: Snapshot, command: UpdateDefectType) -> Snapshot:
    defect_types = replace_record(snapshot.defect_types, "DefectType", command.id, changes_of(command))
    return snapshot.model_copy(update={"defect_types": defect_types})


def delete_defect_type(snapshot: Snapshot, defect_type_id: str) -> Snapshot:
    defect_types = remove_record(snapshot.defect_types, "DefectType", defect_type_id)
    return snapshot.model_copy(update={"defect_types": defect_types})
