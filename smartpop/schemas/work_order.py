"""作业指示数据结构定义"""

from enum import Enum

from pydantic import Field

from .base import RecordModel


class WorkOrderStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class WorkOrder(RecordModel):
    """作业指示

    date 为 ISO yyyy-mm-dd 字符串，按字符串比较即可得到时间先后。
    item_id / worker_id 不做引用约束，找不到时在显示层回退为占位值。
    """
    id: str
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    item_id: str
    worker_id: str
    target_quantity: int = Field(ge=0)
    status: WorkOrderStatus = WorkOrderStatus.PENDING
