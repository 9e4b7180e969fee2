"""集计核心逻辑

按集计维度对筛选后的生产实绩分组，并与作业指示的目标数量对账，计算达成率。

目标数量的对账规则：只有在实绩分组中已经出现的分组键才累加目标数量。
期间内没有任何实绩的作业指示不计入目标（即使日期在范围内）。
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Union

from ..schemas import (
    DefectReportRow,
    DefectType,
    Item,
    ProductionLog,
    ReportDimension,
    ReportRow,
    Snapshot,
    User,
    WorkOrder,
)
from .filters import filter_records, in_date_range
from .lookup import MISSING_NAME, OTHER_DEFECT_NAME, RecordIndex, name_or

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateKey:
    date: str


@dataclass(frozen=True)
class ItemKey:
    item_id: str


@dataclass(frozen=True)
class WorkerKey:
    worker_id: str


@dataclass(frozen=True)
class OrderTripleKey:
    """明细合计：同一 (日期, 品目, 作业员) 的作业指示归为一组"""
    date: str
    item_id: str
    worker_id: str


GroupKey = Union[DateKey, ItemKey, WorkerKey, OrderTripleKey]


def group_key(order: WorkOrder, dimension: ReportDimension) -> GroupKey:
    """根据集计维度计算作业指示的分组键"""
    if dimension == ReportDimension.DAILY:
        return DateKey(order.date)
    if dimension == ReportDimension.ITEM:
        return ItemKey(order.item_id)
    if dimension == ReportDimension.WORKER:
        return WorkerKey(order.worker_id)
    if dimension == ReportDimension.TOTAL:
        return OrderTripleKey(order.date, order.item_id, order.worker_id)
    raise ValueError(f"dimension {dimension} has no work order group key")


def achievement_rate(good: int, target: int) -> str:
    """达成率（%），保留一位小数的字符串；目标为0时为 "0.0"

    按浮点数的精确值四舍五入（.5 进位），与前端 toFixed(1) 的显示一致。
    """
    if target > 0:
        return str(Decimal(good / target * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return "0.0"


class _Accumulator:
    __slots__ = ("classification", "item_name", "worker_name", "good", "defects", "target")

    def __init__(self, classification: str, item_name: str, worker_name: str):
        self.classification = classification
        self.item_name = item_name
        self.worker_name = worker_name
        self.good = 0
        self.defects = 0
        self.target = 0

    def to_row(self) -> ReportRow:
        return ReportRow(
            classification=self.classification,
            item_name=self.item_name,
            worker_name=self.worker_name,
            good=self.good,
            defects=self.defects,
            target=self.target,
            rate=achievement_rate(self.good, self.target),
        )


def _classification(order: WorkOrder, dimension: ReportDimension, item_name: str, worker_name: str) -> str:
    if dimension == ReportDimension.ITEM:
        return item_name
    if dimension == ReportDimension.WORKER:
        return worker_name
    # DAILY 与 TOTAL 都以日期作为分类列
    return order.date


def aggregate_defects(logs: Iterable[ProductionLog], index: RecordIndex) -> List[DefectReportRow]:
    """按不良类型名称合计不良数量，按首次出现的顺序输出"""
    totals: Dict[str, int] = {}
    for log in logs:
        for defect in log.defects:
            name = name_or(index.defect_type(defect.defect_type_id), OTHER_DEFECT_NAME)
            totals[name] = totals.get(name, 0) + defect.quantity
    return [DefectReportRow(classification=name, defect_count=qty) for name, qty in totals.items()]


def aggregate(
    filtered_logs: Iterable[ProductionLog],
    all_work_orders: Iterable[WorkOrder],
    items: Iterable[Item],
    users: Iterable[User],
    defect_types: Iterable[DefectType],
    dimension: Union[ReportDimension, str],
    start_date: str,
    end_date: str,
) -> List[Union[ReportRow, DefectReportRow]]:
    """集计报表行

    - DEFECT：按不良类型名称合计
    - 其他维度：先按实绩分组累加良品/不良数，再对范围内全部作业指示累加目标数量
    行顺序为扫描实绩时分组键首次出现的顺序。
    """
    dimension = ReportDimension(dimension)
    all_work_orders = list(all_work_orders)
    index = RecordIndex(items=items, users=users, defect_types=defect_types, work_orders=all_work_orders)

    if dimension == ReportDimension.DEFECT:
        rows = aggregate_defects(filtered_logs, index)
        logger.debug("Aggregated %d defect rows", len(rows))
        return rows

    # 1) 实绩分组（dict 保持插入顺序）
    groups: Dict[GroupKey, _Accumulator] = {}
    for log in filtered_logs:
        order = index.work_order(log.work_order_id)
        if order is None:
            continue
        key = group_key(order, dimension)
        acc = groups.get(key)
        if acc is None:
            item_name = name_or(index.item(order.item_id), MISSING_NAME)
            worker_name = name_or(index.user(order.worker_id), MISSING_NAME)
            acc = _Accumulator(
                _classification(order, dimension, item_name, worker_name),
                item_name,
                worker_name,
            )
            groups[key] = acc
        acc.good += log.good_quantity
        acc.defects += log.defect_total

    # 2) 目标数量：遍历全部作业指示，只累加已有实绩分组的目标
    for order in all_work_orders:
        if not in_date_range(order.date, start_date, end_date):
            continue
        acc = groups.get(group_key(order, dimension))
        if acc is not None:
            acc.target += order.target_quantity

    rows = [acc.to_row() for acc in groups.values()]
    logger.debug("Aggregated %d %s rows", len(rows), dimension.value)
    return rows


def build_report(
    snapshot: Snapshot,
    dimension: Union[ReportDimension, str],
    start_date: str,
    end_date: str,
    query: str = "",
) -> List[Union[ReportRow, DefectReportRow]]:
    """筛选 + 集计"""
    _, filtered_logs = filter_records(
        snapshot.work_orders,
        snapshot.production_logs,
        snapshot.items,
        snapshot.users,
        start_date,
        end_date,
        query,
    )
    return aggregate(
        filtered_logs,
        snapshot.work_orders,
        snapshot.items,
        snapshot.users,
        snapshot.defect_types,
        dimension,
        start_date,
        end_date,
    )
