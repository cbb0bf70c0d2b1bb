"""HTTP API for BiteBrain.

This module provides:

- create_app: Factory function to create the FastAPI application
- RecommendRequest / RecommendResponse: recommendation request and envelope
- HealthResponse, ErrorResponse, DataResponse: shared envelopes
"""

from bitebrain.api.app import create_app
from bitebrain.api.schemas import (
    DataResponse,
    ErrorResponse,
    HealthResponse,
    RecommendRequest,
    RecommendResponse,
    SpeciesDetail,
    SpeciesSummary,
)

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "HealthResponse",
    "RecommendRequest",
    "RecommendResponse",
    "SpeciesDetail",
    "SpeciesSummary",
    "create_app",
]
