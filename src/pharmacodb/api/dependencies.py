"""
Request dependencies.

The connection pool, settings and error sink live on ``app.state``; routes
get repositories bound to the shared pool through these functions.
"""
from fastapi import Depends, Request

from pharmacodb.config import PharmacoDBSettings
from pharmacodb.database import (
    ConnectionPool,
    CellRepository,
    TissueRepository,
    DrugRepository,
    DatasetRepository,
    ExperimentRepository,
)


def get_settings(request: Request) -> PharmacoDBSettings:
    return request.app.state.settings


def get_pool(request: Request) -> ConnectionPool:
    return request.app.state.pool


def get_cell_repository(pool: ConnectionPool = Depends(get_pool)) -> CellRepository:
    return CellRepository(pool)


def get_tissue_repository(pool: ConnectionPool = Depends(get_pool)) -> TissueRepository:
    return TissueRepository(pool)


def get_drug_repository(pool: ConnectionPool = Depends(get_pool)) -> DrugRepository:
    return DrugRepository(pool)


def get_dataset_repository(pool: ConnectionPool = Depends(get_pool)) -> DatasetRepository:
    return DatasetRepository(pool)


def get_experiment_repository(pool: ConnectionPool = Depends(get_pool)) -> ExperimentRepository:
    return ExperimentRepository(pool)
