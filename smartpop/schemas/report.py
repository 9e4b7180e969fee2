"""集计报表数据结构定义"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .base import RecordModel


class ReportDimension(str, Enum):
    TOTAL = "TOTAL"
    DAILY = "DAILY"
    ITEM = "ITEM"
    WORKER = "WORKER"
    DEFECT = "DEFECT"


class ReportRow(RecordModel):
    """按日期/品目/作业员/明细合计集计的一行

    字段声明顺序即 CSV 列顺序。rate 为保留一位小数的字符串。
    """
    classification: str
    item_name: str
    worker_name: str
    good: int
    defects: int
    target: int
    rate: str


class DefectReportRow(RecordModel):
    """按不良类型集计的一行"""
    classification: str
    defect_count: int


class ReportExport(BaseModel):
    filename: str
    # 没有可导出的数据时为 None
    content: Optional[str] = None
    row_count: int = 0

    @property
    def exported(self) -> bool:
        return self.content is not None
