"""生产实绩数据结构定义"""

from typing import Tuple

from pydantic import Field

from .base import RecordModel


class DefectEntry(RecordModel):
    """单条不良记录，数量必须大于0"""
    defect_type_id: str
    quantity: int = Field(gt=0)


class ProductionLog(RecordModel):
    """生产实绩

    worker_id 在创建时取自所引用的作业指示。
    """
    id: str
    work_order_id: str
    worker_id: str
    good_quantity: int = Field(ge=0)
    defects: Tuple[DefectEntry, ...] = ()
    comment: str = ""
    timestamp: str

    @property
    def defect_total(self) -> int:
        return sum(d.quantity for d in self.defects)
