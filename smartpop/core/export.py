"""报表导出

把报表行转换为 CSV 文本：
- 表头按映射表翻译，未映射的键原样输出
- 字符串单元格加引号，数值不加引号
- 文本以 UTF-8 BOM 开头，便于表格软件识别编码
"""

import csv
import io
import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import BaseModel

from ..schemas import ReportDimension, ReportExport, Snapshot
from .aggregation import build_report

logger = logging.getLogger(__name__)

BOM = "\ufeff"

REPORT_HEADERS: Dict[str, str] = {
    "classification": "分类",
    "date": "日期",
    "itemName": "品名",
    "workerName": "作业员",
    "defectName": "不良类型",
    "target": "目标数量",
    "good": "良品数量",
    "defects": "不良数量",
    "defectCount": "不良数量",
    "rate": "达成率(%)",
}


def _as_dict(row: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(row, BaseModel):
        return row.model_dump(by_alias=True)
    return dict(row)


def format_rows(
    rows: Iterable[Union[BaseModel, Mapping[str, Any]]],
    header_map: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """生成 CSV 文本；没有数据时返回 None 表示无可导出内容"""
    records = [_as_dict(row) for row in rows]
    if not records:
        return None
    header_map = REPORT_HEADERS if header_map is None else header_map
    keys = list(records[0].keys())

    buf = io.StringIO()
    # 表头只在必要时加引号，单元格按类型决定
    csv.writer(buf, lineterminator="\n").writerow([header_map.get(k, k) for k in keys])
    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for record in records:
        writer.writerow([record.get(k) for k in keys])
    return BOM + buf.getvalue()


def export_filename(dimension: Union[ReportDimension, str], today: Optional[date] = None) -> str:
    """建议的下载文件名，例如 POP_REPORT_ITEM_2024-05-31.csv"""
    dimension = ReportDimension(dimension)
    today = today or date.today()
    return f"POP_REPORT_{dimension.value}_{today.isoformat()}.csv"


def export_report(
    snapshot: Snapshot,
    dimension: Union[ReportDimension, str],
    start_date: str,
    end_date: str,
    query: str = "",
    today: Optional[date] = None,
    header_map: Optional[Mapping[str, str]] = None,
) -> ReportExport:
    """集计并生成导出内容"""
    rows = build_report(snapshot, dimension, start_date, end_date, query)
    content = format_rows(rows, header_map)
    if content is None:
        logger.info("Nothing to export for %s %s~%s", ReportDimension(dimension).value, start_date, end_date)
    return ReportExport(
        filename=export_filename(dimension, today),
        content=content,
        row_count=len(rows),
    )
