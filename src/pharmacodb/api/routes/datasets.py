"""
Dataset Routes
"""

from fastapi import APIRouter, Depends, Query

from pharmacodb.api.dependencies import get_dataset_repository
from pharmacodb.api.models import EntityResponse, EntityListResponse
from pharmacodb.database import DatasetRepository
from .common import data_types, data_type

router = APIRouter()


@router.get("/datasets", response_model=EntityListResponse)
def get_datasets(repo: DatasetRepository = Depends(get_dataset_repository)):
    return data_types("List of all datasets in pharmacodb", repo)


@router.get("/datasets/{dataset_id}", response_model=EntityResponse)
def get_dataset(dataset_id: str, typ: str = Query("id", alias="type"),
                repo: DatasetRepository = Depends(get_dataset_repository)):
    return data_type("Dataset", dataset_id, typ, repo)
