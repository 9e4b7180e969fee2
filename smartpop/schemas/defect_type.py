"""不良类型数据结构定义"""

from .base import RecordModel, NonBlankStr


class DefectType(RecordModel):
    id: str
    name: NonBlankStr
