"""
Cell Line Routes
"""

from fastapi import APIRouter, Depends, Query

from pharmacodb.api.dependencies import get_cell_repository
from pharmacodb.api.models import EntityResponse, EntityListResponse, DatasetStatListResponse
from pharmacodb.database import CellRepository
from .common import data_types, data_type_stats, data_type

router = APIRouter()


@router.get("/cell_lines", response_model=EntityListResponse)
def get_cells(repo: CellRepository = Depends(get_cell_repository)):
    """List of all cell lines"""
    return data_types("List of all cell lines in pharmacodb", repo)


@router.get("/cell_lines/stats", response_model=DatasetStatListResponse)
def get_cell_stats(repo: CellRepository = Depends(get_cell_repository)):
    """Number of cell lines tested in each dataset"""
    return data_type_stats("Number of cell lines tested in each dataset", repo)


@router.get("/cell_lines/{cell_id}", response_model=EntityResponse)
def get_cell(cell_id: str, typ: str = Query("id", alias="type"),
             repo: CellRepository = Depends(get_cell_repository)):
    """Get a cell line by id, or by name with ``type=name``"""
    return data_type("Cell line", cell_id, typ, repo)
