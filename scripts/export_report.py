#!/usr/bin/env python3
"""Export an aggregated production report as CSV.

Usage:
  python3 scripts/export_report.py --dimension ITEM --start 2024-05-01 --end 2024-05-31
  python3 scripts/export_report.py --dimension DEFECT --query 划痕 --output ./exports

The snapshot is read from the configured DATABASE_URL (seed data when nothing is stored yet).
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smartpop.database import SessionLocal, Base, engine
from smartpop.crud import SnapshotStore
from smartpop.core import export_report
from smartpop.schemas import ReportDimension
from smartpop.utils.helpers import resolve_date_range


def main(argv=None):
    parser = argparse.ArgumentParser(description='Export an aggregated production report as CSV')
    parser.add_argument("--dimension", default="TOTAL", choices=[d.value for d in ReportDimension])
    parser.add_argument("--start", default=None, help="start date (yyyy-mm-dd), default: 30 days ago")
    parser.add_argument("--end", default=None, help="end date (yyyy-mm-dd), default: today")
    parser.add_argument("--query", default="", help="item / worker / comment keyword")
    parser.add_argument("--output", default=".", help="output directory")
    args = parser.parse_args(argv)

    try:
        Base.metadata.create_all(bind=engine)
    except Exception as exc:
        print("Warning: could not create tables on startup:", exc)

    start, end = resolve_date_range(args.start, args.end)
    with SessionLocal() as db:
        snapshot = SnapshotStore(db).load()

    result = export_report(snapshot, args.dimension, start, end, args.query)
    if not result.exported:
        print(f"Nothing to export for {args.dimension} {start} ~ {end}")
        return 1

    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / result.filename
    # 内容已带 BOM，按 utf-8 写出
    path.write_text(result.content, encoding="utf-8", newline="")
    print(f"Exported {result.row_count} rows to {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
