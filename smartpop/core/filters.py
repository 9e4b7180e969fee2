"""筛选逻辑

按日期范围与关键字筛选作业指示和生产实绩。
日期为 ISO yyyy-mm-dd 字符串，直接按字符串比较（两端都包含）。
关键字区分大小写，空字符串匹配全部。
"""

from typing import Iterable, List, Optional, Tuple

from ..schemas import Item, ProductionLog, User, WorkOrder
from .lookup import RecordIndex, name_or


def in_date_range(date: Optional[str], start_date: str, end_date: str) -> bool:
    if date is None:
        return False
    return start_date <= date <= end_date


def filter_records(
    work_orders: Iterable[WorkOrder],
    production_logs: Iterable[ProductionLog],
    items: Iterable[Item],
    users: Iterable[User],
    start_date: str,
    end_date: str,
    query: str = "",
) -> Tuple[List[WorkOrder], List[ProductionLog]]:
    """返回 (筛选后的作业指示, 筛选后的生产实绩)，保持输入顺序"""
    work_orders = list(work_orders)
    index = RecordIndex(items=items, users=users, work_orders=work_orders)

    filtered_orders = []
    for order in work_orders:
        item_name = name_or(index.item(order.item_id), "")
        worker_name = name_or(index.user(order.worker_id), "")
        matches_query = query in item_name or query in worker_name
        if matches_query and in_date_range(order.date, start_date, end_date):
            filtered_orders.append(order)

    filtered_logs = []
    for log in production_logs:
        order = index.work_order(log.work_order_id)
        item_name = name_or(index.item(order.item_id if order else None), "")
        worker_name = name_or(index.user(log.worker_id), "")
        matches_query = query in item_name or query in worker_name or query in (log.comment or "")
        # 实绩的日期取所引用作业指示的日期；找不到作业指示时不在范围内
        order_date = order.date if order else None
        if matches_query and in_date_range(order_date, start_date, end_date):
            filtered_logs.append(log)

    return filtered_orders, filtered_logs


def filter_worker_orders(
    work_orders: Iterable[WorkOrder],
    items: Iterable[Item],
    worker_id: str,
    query: str = "",
) -> List[WorkOrder]:
    """作业员本人的作业指示：按品名或日期检索，日期倒序"""
    index = RecordIndex(items=items)
    mine = [
        order for order in work_orders
        if order.worker_id == worker_id
        and (query in name_or(index.item(order.item_id), "") or query in order.date)
    ]
    return sorted(mine, key=lambda o: o.date, reverse=True)
