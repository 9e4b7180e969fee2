from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from ...core import build_report, export_report
from ...crud import SnapshotStore
from ...schemas import DefectReportRow, ReportDimension, ReportRow
from ...services import InsightGenerator, get_production_insight
from ...utils.helpers import resolve_date_range
from ..deps import get_insight_generator, get_snapshot_store, load_snapshot

router = APIRouter(prefix="/reports", tags=["reports"])

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


@router.get("/", response_model=List[Union[ReportRow, DefectReportRow]])
def get_report(
    dimension: ReportDimension = Query(ReportDimension.TOTAL, description="集计维度"),
    start_date: Optional[str] = Query(None, pattern=DATE_PATTERN),
    end_date: Optional[str] = Query(None, pattern=DATE_PATTERN),
    q: str = Query("", description="品名/作业员/备注关键字"),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """集计报表"""
    start, end = resolve_date_range(start_date, end_date)
    return build_report(load_snapshot(store), dimension, start, end, q)


@router.get("/export")
def export_report_csv(
    dimension: ReportDimension = Query(ReportDimension.TOTAL),
    start_date: Optional[str] = Query(None, pattern=DATE_PATTERN),
    end_date: Optional[str] = Query(None, pattern=DATE_PATTERN),
    q: str = Query(""),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """导出集计报表为CSV"""
    start, end = resolve_date_range(start_date, end_date)
    result = export_report(load_snapshot(store), dimension, start, end, q)
    if not result.exported:
        return {"detail": "Nothing to export", "exported": False}

    return Response(
        content=result.content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={result.filename}"},
    )


@router.get("/insight")
def get_insight(
    store: SnapshotStore = Depends(get_snapshot_store),
    generator: InsightGenerator = Depends(get_insight_generator),
):
    """AI 生产分析"""
    return {"insight": get_production_insight(generator, load_snapshot(store))}
