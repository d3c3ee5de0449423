"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from replicator.config import Settings
from replicator.domain.repository import MemeRepository, UserRepository
from replicator.domain.service import ScoreService

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class DatabaseHealthResponse(BaseModel):
    """Database health response."""

    database_connected: bool
    meme_count: int
    user_count: int


class ScoreHealthResponse(BaseModel):
    """Score consistency report."""

    consistent: bool
    checked: int
    drifted_meme_ids: list[int]


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/health/db", response_model=DatabaseHealthResponse)
async def database_health(
    meme_repository: FromDishka[MemeRepository],
    user_repository: FromDishka[UserRepository],
) -> DatabaseHealthResponse:
    """Check the store is reachable and report row counts."""
    return DatabaseHealthResponse(
        database_connected=True,
        meme_count=await meme_repository.count(),
        user_count=await user_repository.count(),
    )


@router.get("/health/scores", response_model=ScoreHealthResponse)
async def score_health(score_service: FromDishka[ScoreService]) -> ScoreHealthResponse:
    """Check every stored score against its interaction ledger."""
    audits = await score_service.audit_all()
    drifted = [audit.meme_id for audit in audits if not audit.consistent]
    return ScoreHealthResponse(
        consistent=not drifted,
        checked=len(audits),
        drifted_meme_ids=drifted,
    )
