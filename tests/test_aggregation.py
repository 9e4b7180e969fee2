import pytest

from conftest import make_log, make_order
from smartpop.core import achievement_rate, aggregate, build_report, group_key
from smartpop.core.aggregation import DateKey, ItemKey, OrderTripleKey, WorkerKey
from smartpop.core.lookup import OTHER_DEFECT_NAME
from smartpop.schemas import DefectReportRow, ReportDimension, ReportRow

START, END = "2024-05-01", "2024-05-31"


def _report(snapshot, dimension, start=START, end=END, query=""):
    return build_report(snapshot, dimension, start, end, query)


def test_rate_formatting():
    assert achievement_rate(50, 200) == "25.0"
    assert achievement_rate(0, 0) == "0.0"
    assert achievement_rate(10, 0) == "0.0"
    assert achievement_rate(1, 3) == "33.3"
    assert achievement_rate(150, 100) == "150.0"
    # .x5 ties round up
    assert achievement_rate(1, 16) == "6.3"
    assert achievement_rate(5, 16) == "31.3"
    assert achievement_rate(1, 8) == "12.5"


def test_group_keys_are_typed():
    order = make_order("wo1", "2024-05-10", item_id="i1", worker_id="u2")
    assert group_key(order, ReportDimension.DAILY) == DateKey("2024-05-10")
    assert group_key(order, ReportDimension.ITEM) == ItemKey("i1")
    assert group_key(order, ReportDimension.WORKER) == WorkerKey("u2")
    assert group_key(order, ReportDimension.TOTAL) == OrderTripleKey("2024-05-10", "i1", "u2")
    # an item id and a worker id with the same text never collide
    assert ItemKey("x") != WorkerKey("x")


def test_item_report_sums_good_defects_and_target(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10", target=200),),
        "production_logs": (
            make_log("l1", "wo1", 30, defects=[("d1", 2)]),
            make_log("l2", "wo1", 20, defects=[("d1", 1), ("d2", 4)]),
        ),
    })
    rows = _report(snap, ReportDimension.ITEM)
    assert rows == [ReportRow(
        classification="电路板 A",
        item_name="电路板 A",
        worker_name="张伟",
        good=50,
        defects=7,
        target=200,
        rate="25.0",
    )]


def test_item_report_rate_rounds_ties_up(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10", target=16),),
        "production_logs": (make_log("l1", "wo1", 5),),
    })
    rows = _report(snap, ReportDimension.ITEM)
    assert rows[0].target == 16
    assert rows[0].rate == "31.3"


def test_date_inclusivity_for_report(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("start", "2024-05-01"),
            make_order("end", "2024-05-31"),
            make_order("before", "2024-04-30"),
            make_order("after", "2024-06-01"),
        ),
        "production_logs": tuple(make_log(f"l-{oid}", oid, 10) for oid in ("start", "end", "before", "after")),
    })
    rows = _report(snap, ReportDimension.DAILY)
    assert [r.classification for r in rows] == ["2024-05-01", "2024-05-31"]
    assert all(r.target == 100 for r in rows)


def test_target_dropped_for_orders_without_logs(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("logged", "2024-05-10", item_id="i1", worker_id="u2", target=100),
            make_order("idle", "2024-05-11", item_id="i2", worker_id="u3", target=500),
        ),
        "production_logs": (make_log("l1", "logged", 40),),
    })
    for dimension in (ReportDimension.ITEM, ReportDimension.WORKER, ReportDimension.DAILY, ReportDimension.TOTAL):
        rows = _report(snap, dimension)
        assert len(rows) == 1
        assert rows[0].target == 100
        assert rows[0].rate == "40.0"


def test_target_counts_unfiltered_orders_sharing_a_key(base_snapshot):
    # Second order of the same item has no log, but its key exists from the log pass
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("wo1", "2024-05-10", item_id="i1", worker_id="u2", target=100),
            make_order("wo2", "2024-05-12", item_id="i1", worker_id="u3", target=300),
            make_order("wo3", "2024-06-12", item_id="i1", worker_id="u3", target=900),
        ),
        "production_logs": (make_log("l1", "wo1", 100),),
    })
    rows = _report(snap, ReportDimension.ITEM)
    assert rows[0].target == 400
    assert rows[0].rate == "25.0"


def test_query_narrows_logs_but_not_target_orders(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("wo1", "2024-05-10", worker_id="u2", target=100),
            make_order("wo2", "2024-05-10", worker_id="u3", target=100),
        ),
        "production_logs": (
            make_log("l1", "wo1", 50, worker_id="u2"),
            make_log("l2", "wo2", 70, worker_id="u3"),
        ),
    })
    rows = _report(snap, ReportDimension.DAILY, query="张伟")
    assert len(rows) == 1
    assert rows[0].good == 50
    assert rows[0].target == 200


def test_defect_report_merges_same_type_across_orders(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("wo1", "2024-05-10"),
            make_order("wo2", "2024-05-11", item_id="i2"),
        ),
        "production_logs": (
            make_log("l1", "wo1", 10, defects=[("d1", 3)]),
            make_log("l2", "wo2", 10, defects=[("d1", 2)]),
        ),
    })
    rows = _report(snap, ReportDimension.DEFECT)
    assert rows == [DefectReportRow(classification="划痕", defect_count=5)]


def test_defect_report_unknown_type_and_first_seen_order(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10"),),
        "production_logs": (
            make_log("l1", "wo1", 10, defects=[("d2", 1), ("gone", 4)]),
            make_log("l2", "wo1", 10, defects=[("d1", 2), ("d2", 5)]),
        ),
    })
    rows = _report(snap, ReportDimension.DEFECT)
    assert [(r.classification, r.defect_count) for r in rows] == [
        ("尺寸不良", 6),
        (OTHER_DEFECT_NAME, 4),
        ("划痕", 2),
    ]


def test_total_groups_orders_sharing_date_item_worker(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("wo1", "2024-05-10", target=100),
            make_order("wo2", "2024-05-10", target=50),
            make_order("wo3", "2024-05-10", item_id="i2", target=80),
        ),
        "production_logs": (
            make_log("l1", "wo1", 60),
            make_log("l2", "wo2", 30),
            make_log("l3", "wo3", 20),
        ),
    })
    rows = _report(snap, ReportDimension.TOTAL)
    assert len(rows) == 2
    first = rows[0]
    assert first.classification == "2024-05-10"
    assert (first.item_name, first.worker_name) == ("电路板 A", "张伟")
    assert (first.good, first.target, first.rate) == (90, 150, "60.0")
    assert rows[1].item_name == "铝框架 B"


def test_rows_follow_first_appearance_order(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (
            make_order("a", "2024-05-01"),
            make_order("b", "2024-05-20"),
            make_order("c", "2024-05-10"),
        ),
        "production_logs": (
            make_log("l1", "b", 1),
            make_log("l2", "a", 1),
            make_log("l3", "c", 1),
            make_log("l4", "b", 1),
        ),
    })
    rows = _report(snap, ReportDimension.DAILY)
    assert [r.classification for r in rows] == ["2024-05-20", "2024-05-01", "2024-05-10"]


def test_unknown_work_order_log_is_skipped(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10"),),
        "production_logs": (make_log("l1", "wo1", 10),),
    })
    orphan = make_log("orphan", "missing", 999)
    rows = aggregate(
        [orphan] + list(snap.production_logs),
        snap.work_orders,
        snap.items,
        snap.users,
        snap.defect_types,
        ReportDimension.WORKER,
        START,
        END,
    )
    assert len(rows) == 1
    assert rows[0].good == 10


def test_unknown_item_and_worker_render_dash(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10", item_id="ghost", worker_id="nobody"),),
        "production_logs": (make_log("l1", "wo1", 10, worker_id="nobody"),),
    })
    item_rows = _report(snap, ReportDimension.ITEM)
    worker_rows = _report(snap, ReportDimension.WORKER)
    assert item_rows[0].item_name == "-"
    assert item_rows[0].classification == "-"
    assert worker_rows[0].worker_name == "-"


def test_empty_inputs_give_empty_report(base_snapshot):
    for dimension in ReportDimension:
        assert _report(base_snapshot, dimension) == []


def test_zero_target_gives_zero_rate(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10", target=0),),
        "production_logs": (make_log("l1", "wo1", 25),),
    })
    rows = _report(snap, ReportDimension.ITEM)
    assert (rows[0].target, rows[0].rate) == (0, "0.0")


def test_dimension_accepts_plain_string(base_snapshot):
    snap = base_snapshot.model_copy(update={
        "work_orders": (make_order("wo1", "2024-05-10"),),
        "production_logs": (make_log("l1", "wo1", 25),),
    })
    assert _report(snap, "WORKER")[0].classification == "张伟"
    with pytest.raises(ValueError):
        _report(snap, "WEEKLY")
