"""
Drug Routes
"""

from fastapi import APIRouter, Depends, Query

from pharmacodb.api.dependencies import get_drug_repository
from pharmacodb.api.models import EntityResponse, EntityListResponse, DatasetStatListResponse
from pharmacodb.database import DrugRepository
from .common import data_types, data_type_stats, data_type

router = APIRouter()


@router.get("/drugs", response_model=EntityListResponse)
def get_drugs(repo: DrugRepository = Depends(get_drug_repository)):
    return data_types("List of all drugs in pharmacodb", repo)


@router.get("/drugs/stats", response_model=DatasetStatListResponse)
def get_drug_stats(repo: DrugRepository = Depends(get_drug_repository)):
    return data_type_stats("Number of drugs tested in each dataset", repo)


@router.get("/drugs/{drug_id}", response_model=EntityResponse)
def get_drug(drug_id: str, typ: str = Query("id", alias="type"),
             repo: DrugRepository = Depends(get_drug_repository)):
    return data_type("Drug", drug_id, typ, repo)
