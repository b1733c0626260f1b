"""
Experiment Routes

Paginated listing, lookup by id, and the cell line / drug and cell line /
dataset combination queries.
"""

import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from pharmacodb.api.dependencies import get_experiment_repository, get_settings
from pharmacodb.api.models import ExperimentResponse
from pharmacodb.config import PharmacoDBSettings
from pharmacodb.database import ExperimentRepository
from pharmacodb.errors import NotFoundError, PublicError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/experiments", response_model=List[ExperimentResponse])
def list_experiments(
    page: int = Query(1),
    limit: Optional[int] = Query(None),
    repo: ExperimentRepository = Depends(get_experiment_repository),
    settings: PharmacoDBSettings = Depends(get_settings),
):
    """
    List experiments one page at a time.

    Args:
        page: 1-based page number
        limit: Page size, defaults to the configured page limit
    """
    if limit is None:
        limit = settings.default_page_limit
    if limit > settings.max_page_limit:
        raise PublicError(400, f"limit must not exceed {settings.max_page_limit}")

    experiments = repo.list_paginated(page, limit)
    return [asdict(e) for e in experiments]


@router.get("/experiments/{experiment_id}", response_model=ExperimentResponse)
def get_experiment(experiment_id: str, repo: ExperimentRepository = Depends(get_experiment_repository)):
    """Get a single experiment with its dose-response data"""
    experiment = repo.find(experiment_id)
    if experiment is None:
        raise NotFoundError("Experiment not found")
    return asdict(experiment)


@router.get("/cell_lines/{cell_id}/drugs/{drug_id}", response_model=List[ExperimentResponse])
def get_cell_drug_combination(
    cell_id: str,
    drug_id: str,
    typ: str = Query("id", alias="type"),
    repo: ExperimentRepository = Depends(get_experiment_repository),
):
    """All experiments where a cell line and a drug have been tested together"""
    experiments = repo.cell_drug_combination(cell_id, drug_id, typ)
    logger.info(f"Cell line {cell_id} / drug {drug_id}: {len(experiments)} experiments")
    return [asdict(e) for e in experiments]


@router.get("/cell_lines/{cell_id}/datasets/{dataset_id}", response_model=List[ExperimentResponse])
def get_cell_dataset_combination(
    cell_id: str,
    dataset_id: str,
    typ: str = Query("id", alias="type"),
    repo: ExperimentRepository = Depends(get_experiment_repository),
):
    """All experiments where a cell line has been tested in a dataset"""
    experiments = repo.cell_dataset_combination(cell_id, dataset_id, typ)
    logger.info(f"Cell line {cell_id} / dataset {dataset_id}: {len(experiments)} experiments")
    return [asdict(e) for e in experiments]
