"""
API Models for the PharmacoDB API

Pydantic models for response documentation and validation.
"""

from .responses import (
    EntityResponse,
    DatasetStatResponse,
    DoseResponseResponse,
    ExperimentResponse,
    EntityListResponse,
    DatasetStatListResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    'EntityResponse',
    'DatasetStatResponse',
    'DoseResponseResponse',
    'ExperimentResponse',
    'EntityListResponse',
    'DatasetStatListResponse',
    'ErrorDetail',
    'ErrorResponse',
]
