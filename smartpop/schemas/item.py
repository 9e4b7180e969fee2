"""品目数据结构定义"""

from .base import RecordModel, NonBlankStr


class Item(RecordModel):
    """品目（生产对象零件）"""
    id: str
    code: NonBlankStr
    name: NonBlankStr
    unit: str = "EA"
