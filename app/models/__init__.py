"""Data models for the Resume Optimizer Backend."""
from app.models.resume import (
    OptimizeRequest,
    ParsedSectionsResponse,
    AnalysisResponse,
    SectionsRequest,
    EnhanceRequest,
    EnhanceResponse,
    AnalyzeResponse,
    HealthResponse,
)

__all__ = [
    "OptimizeRequest",
    "ParsedSectionsResponse",
    "AnalysisResponse",
    "SectionsRequest",
    "EnhanceRequest",
    "EnhanceResponse",
    "AnalyzeResponse",
    "HealthResponse",
]
