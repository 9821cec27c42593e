"""Service providers for FastAPI dependency injection."""

from fastapi import Depends

from ..core.database import Database, get_db
from ..services import (
    AnalyticsAggregator,
    ClickRecorder,
    CodeGenerator,
    ResolutionService,
)


def get_generator(db: Database = Depends(get_db)) -> CodeGenerator:
    return CodeGenerator(db)


def get_resolver(db: Database = Depends(get_db)) -> ResolutionService:
    return ResolutionService(db, ClickRecorder(db))


def get_aggregator(db: Database = Depends(get_db)) -> AnalyticsAggregator:
    return AnalyticsAggregator(db)
