"""
Tissue Routes
"""

from fastapi import APIRouter, Depends, Query

from pharmacodb.api.dependencies import get_tissue_repository
from pharmacodb.api.models import EntityResponse, EntityListResponse, DatasetStatListResponse
from pharmacodb.database import TissueRepository
from .common import data_types, data_type_stats, data_type

router = APIRouter()


@router.get("/tissues", response_model=EntityListResponse)
def get_tissues(repo: TissueRepository = Depends(get_tissue_repository)):
    return data_types("List of all tissues in pharmacodb", repo)


@router.get("/tissues/stats", response_model=DatasetStatListResponse)
def get_tissue_stats(repo: TissueRepository = Depends(get_tissue_repository)):
    return data_type_stats("Number of tissues tested in each dataset", repo)


@router.get("/tissues/{tissue_id}", response_model=EntityResponse)
def get_tissue(tissue_id: str, typ: str = Query("id", alias="type"),
               repo: TissueRepository = Depends(get_tissue_repository)):
    return data_type("Tissue", tissue_id, typ, repo)
