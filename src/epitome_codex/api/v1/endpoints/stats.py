# src/epitome_codex/api/v1/endpoints/stats.py
"""Stat planner endpoints."""

from fastapi import APIRouter

from epitome_codex.core.errors import CodexError
from epitome_codex.game.stats import project, remaining_stat_points, total_stat_points
from epitome_codex.schemas.stats import DerivedStatsOut, ProjectionRequest, ProjectionResponse

from ..dependencies import http_error

router = APIRouter(prefix="/stats", tags=["stats"])


@router.post("/project", response_model=ProjectionResponse)
async def project_stats(payload: ProjectionRequest) -> ProjectionResponse:
    """Compute derived stats for a class, level and allocation.

    Also reports the point budget for the level; over-budget allocations are
    projected anyway and show a negative ``remainingPoints``.
    """
    allocation = payload.allocation.to_allocation()
    try:
        stats = project(payload.character_class, payload.level, allocation)
    except CodexError as err:
        raise http_error(err) from err

    return ProjectionResponse(
        character_class=payload.character_class,
        level=payload.level,
        stats=DerivedStatsOut.from_stats(stats),
        total_points=total_stat_points(payload.level),
        allocated_points=allocation.total,
        remaining_points=remaining_stat_points(payload.level, allocation),
    )
