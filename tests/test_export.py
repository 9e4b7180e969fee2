import csv
import io
from datetime import date

from conftest import make_log, make_order
from smartpop.core import REPORT_HEADERS, export_filename, export_report, format_rows
from smartpop.schemas import DefectReportRow, ReportDimension, ReportRow


def _parse(text):
    assert text.startswith("\ufeff")
    return list(csv.reader(io.StringIO(text[1:])))


def test_header_translation_and_passthrough():
    rows = [{"classification": "A", "custom": 1}]
    text = format_rows(rows, {"classification": "分类"})
    assert text.splitlines()[0] == "\ufeff分类,custom"


def test_strings_quoted_numbers_not():
    row = ReportRow(
        classification="2024-05-10",
        item_name="电路板 A",
        worker_name="张伟",
        good=50,
        defects=3,
        target=200,
        rate="25.0",
    )
    text = format_rows([row])
    header, line = text[1:].splitlines()
    assert header == "分类,品名,作业员,良品数量,不良数量,目标数量,达成率(%)"
    assert line == '"2024-05-10","电路板 A","张伟",50,3,200,"25.0"'


def test_defect_rows_use_defect_count_column():
    text = format_rows([DefectReportRow(classification="划痕", defect_count=5)], REPORT_HEADERS)
    assert text[1:].splitlines() == ["分类,不良数量", '"划痕",5']


def test_round_trip_keeps_separator_and_quotes():
    rows = [
        {"classification": "A, B", "note": 'say "hi"', "good": 7},
        {"classification": "plain", "note": "", "good": 0},
    ]
    parsed = _parse(format_rows(rows, {}))
    assert parsed[0] == ["classification", "note", "good"]
    assert parsed[1] == ["A, B", 'say "hi"', "7"]
    assert parsed[2] == ["plain", "", "0"]


def test_empty_rows_is_nothing_to_export():
    assert format_rows([]) is None
    assert format_rows(iter(())) is None


def test_export_filename_includes_dimension_and_date():
    assert export_filename(ReportDimension.ITEM, date(2024, 5, 31)) == "POP_REPORT_ITEM_2024-05-31.csv"
    assert export_filename("DEFECT", date(2024, 1, 2)) == "POP_REPORT_DEFECT_2024-01-02.csv"


def test_export_report_end_to_end(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10", target=200),),
        "production_logs": (make_log("l1", "wo1", 50, defects=[("d1", 2)]),),
    })
    result = export_report(snap, "WORKER", "2024-05-01", "2024-05-31", today=date(2024, 6, 1))
    assert result.exported
    assert result.row_count == 1
    assert result.filename == "POP_REPORT_WORKER_2024-06-01.csv"
    parsed = _parse(result.content)
    assert parsed[1] == ["张伟", "电路板 A", "张伟", "50", "2", "200", "25.0"]


def test_export_report_without_rows(base_snapshot):
    result = export_report(base_snapshot, "TOTAL", "2024-05-01", "2024-05-31", today=date(2024, 6, 1))
    assert not result.exported
    assert result.content is None
    assert result.row_count == 0
