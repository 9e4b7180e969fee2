import os
import sys
import tempfile
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'smartpop' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the app at a throwaway sqlite file before any smartpop module builds the engine
_TMP_DIR = tempfile.mkdtemp(prefix="smartpop-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test_smartpop.db"
os.environ["GEMINI_API_KEY"] = ""

from smartpop.database import Base, engine
from smartpop import models  # noqa: F401
from smartpop.schemas import (
    DefectEntry,
    DefectType,
    Item,
    ProductionLog,
    Snapshot,
    User,
    UserRole,
    WorkOrder,
)


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts without a stored snapshot
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def make_order(id, date, item_id="i1", worker_id="u2", target=100, **kw):
    return WorkOrder(id=id, date=date, item_id=item_id, worker_id=worker_id, target_quantity=target, **kw)


def make_log(id, work_order_id, good, defects=(), worker_id="u2", comment="", timestamp="2024-05-20T09:00:00+00:00"):
    return ProductionLog(
        id=id,
        work_order_id=work_order_id,
        worker_id=worker_id,
        good_quantity=good,
        defects=tuple(DefectEntry(defect_type_id=d, quantity=q) for d, q in defects),
        comment=comment,
        timestamp=timestamp,
    )


@pytest.fixture
def base_snapshot():
    """Master data only: one admin, two workers, two items, two defect types"""
    return Snapshot(
        users=(
            User(id="u1", username="admin", name="管理员", role=UserRole.ADMIN),
            User(id="u2", username="worker1", name="张伟"),
            User(id="u3", username="worker2", name="李强"),
        ),
        items=(
            Item(id="i1", code="P-001", name="电路板 A"),
            Item(id="i2", code="P-002", name="铝框架 B", unit="PCS"),
        ),
        defect_types=(
            DefectType(id="d1", name="划痕"),
            DefectType(id="d2", name="尺寸不良"),
        ),
    )
