"""
Response models for the PharmacoDB API

Pydantic models for formatting API responses.
"""

from pydantic import BaseModel
from typing import List


class EntityResponse(BaseModel):
    """Cell line, tissue, drug or dataset"""
    id: int
    name: str


class DatasetStatResponse(BaseModel):
    """Per-dataset count"""
    dataset: EntityResponse
    count: int


class DoseResponseResponse(BaseModel):
    dose: float
    response: float


class ExperimentResponse(BaseModel):
    """Experiment with its four references and dose-response series"""
    id: int
    cell: EntityResponse
    tissue: EntityResponse
    drug: EntityResponse
    dataset: EntityResponse
    dose_responses: List[DoseResponseResponse] = []


class EntityListResponse(BaseModel):
    description: str
    data: List[EntityResponse]


class DatasetStatListResponse(BaseModel):
    description: str
    data: List[DatasetStatResponse]


class ErrorDetail(BaseModel):
    code: int
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request"""
    error: ErrorDetail
