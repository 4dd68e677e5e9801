import sys
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from patternbook.db.models import DemoRunLog
from patternbook.patterns.runner import DemoRun


def record_run(db: Session, run: DemoRun) -> Optional[DemoRunLog]:
    """Persist a demo run; returns None when the database rejects it"""
    log = DemoRunLog(
        pattern_id=run.pattern_id,
        output=run.output,
        succeeded=run.succeeded,
        error=run.error,
        duration_ms=run.duration_ms,
    )
    try:
        db.add(log)
        db.commit()
        db.refresh(log)
    except SQLAlchemyError as e:
        db.rollback()
        print(f"[DB] Could not record run for '{run.pattern_id}': {e}", file=sys.stderr)
        return None
    return log


def recent_runs(db: Session, limit: int = 20, pattern_id: Optional[str] = None) -> List[DemoRunLog]:
    stmt = select(DemoRunLog)
    if pattern_id:
        stmt = stmt.where(DemoRunLog.pattern_id == pattern_id)
    stmt = stmt.order_by(DemoRunLog.id.desc()).limit(limit)
    return list(db.scalars(stmt))
