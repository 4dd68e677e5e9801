import sys
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from patternbook import config
from patternbook.db.run_log import record_run, recent_runs
from patternbook.db.session import get_db
from patternbook.patterns import PatternCategory, get_pattern_registry, run_demo
from patternbook.renderer import render_catalog_markdown
from patternbook.renderer.markdown_renderer import get_example_source
from patternbook.schemas import (
    PatternDetail,
    PatternSummary,
    RunResponse,
    SuggestRequest,
    SuggestResponse,
    ValidateRequest,
)
from patternbook.validation import validate_catalog

router = APIRouter()

MAX_RUNS_LIMIT = 500


def _summary(pattern) -> dict:
    return PatternSummary(
        id=pattern.id,
        name=pattern.name,
        category=pattern.category.value,
        description=pattern.description,
        tags=pattern.tags,
    ).model_dump()


def _not_found(pattern_id: str) -> dict:
    return {"error": f"Pattern '{pattern_id}' not found"}


# ============================================================
# PATTERN ENDPOINTS - Catalog browsing
# ============================================================

@router.get("/patterns")
def list_patterns(category: Optional[str] = None, tag: Optional[str] = None):
    """List catalog patterns, optionally filtered by category or tag"""
    registry = get_pattern_registry()

    if category is None and tag is None:
        return registry.get_pattern_summary()

    if category is not None:
        try:
            patterns = registry.get_by_category(PatternCategory(category.lower()))
        except ValueError:
            return {"error": f"Unknown category '{category}'"}
    else:
        patterns = registry.list_all()

    if tag is not None:
        patterns = [p for p in patterns if tag in p.tags]

    return {"total": len(patterns), "patterns": [_summary(p) for p in patterns]}


@router.get("/patterns/{pattern_id}")
def get_pattern(pattern_id: str):
    """Get the full catalog entry of a pattern"""
    pattern = get_pattern_registry().get(pattern_id)
    if not pattern:
        return _not_found(pattern_id)
    return PatternDetail(**pattern.to_dict()).model_dump()


@router.get("/patterns/{pattern_id}/source")
def get_pattern_source(pattern_id: str):
    """Get the example source code of a pattern"""
    pattern = get_pattern_registry().get(pattern_id)
    if not pattern:
        return _not_found(pattern_id)
    return {
        "id": pattern.id,
        "module": pattern.module,
        "source": get_example_source(pattern),
    }


@router.post("/patterns/{pattern_id}/run")
def run_pattern(pattern_id: str, db: Session = Depends(get_db)):
    """Run the pattern's illustration and record the run"""
    pattern = get_pattern_registry().get(pattern_id)
    if not pattern:
        return _not_found(pattern_id)

    run = run_demo(pattern)
    persisted = record_run(db, run) is not None
    return RunResponse(**run.to_dict(), persisted=persisted).model_dump()


@router.post("/patterns/suggest")
def suggest_patterns(request: SuggestRequest):
    """Suggest applicable patterns for a described design problem"""
    registry = get_pattern_registry()
    suggestions = registry.suggest_patterns(request.context, request.max_results)

    excerpt = request.context[:200] + "..." if len(request.context) > 200 else request.context
    return SuggestResponse(
        context_excerpt=excerpt,
        suggestions=[_summary(p) for p in suggestions],
    ).model_dump()


# ============================================================
# DOCUMENT & VALIDATION ENDPOINTS
# ============================================================

@router.get("/catalog.md")
def catalog_markdown():
    """The whole catalog rendered as a markdown document"""
    markdown = render_catalog_markdown(get_pattern_registry().list_all())
    return Response(markdown, media_type="text/markdown")


@router.post("/validate")
def validate(request: Optional[ValidateRequest] = None):
    """Validate the registered catalog"""
    strict = request.strict if request else False
    result = validate_catalog(get_pattern_registry().list_all(), strict=strict)
    return {
        "status": "success" if result.is_valid else "invalid",
        "summary": result.get_summary(),
        **result.to_dict(),
    }


@router.get("/runs")
def list_runs(
    pattern_id: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1, le=MAX_RUNS_LIMIT),
    db: Session = Depends(get_db),
):
    """Recently recorded demo runs, newest first"""
    try:
        runs = recent_runs(db, limit if limit is not None else config.RECENT_RUNS_LIMIT, pattern_id=pattern_id)
    except SQLAlchemyError as e:
        print(f"[API] Could not read runs: {e}", file=sys.stderr)
        return {"status": "error", "message": "Run history unavailable"}
    return {"runs": [r.to_dict() for r in runs]}
