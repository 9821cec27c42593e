"""Services package - code generation, resolution and analytics."""

from .generator import CodeGenerator
from .analytics import ClickRecorder, AnalyticsAggregator
from .resolver import ResolutionService

__all__ = [
    "CodeGenerator",
    "ClickRecorder",
    "AnalyticsAggregator",
    "ResolutionService",
]
