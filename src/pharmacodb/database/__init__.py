"""
Database access layer for the PharmacoDB API.
"""
from .base import BaseRepository
from .connection_pool import ConnectionPool
from .schema import SCHEMA, init_schema, create_database
from .repositories import (
    Cell, Tissue, Drug, Dataset, DatasetStat, DoseResponse, Experiment,
    EntityRepository, DatasetStatsRepository, CellRepository, TissueRepository, DrugRepository, DatasetRepository, ExperimentRepository,
)

__all__ = [
    'BaseRepository',
    'ConnectionPool',
    'SCHEMA',
    'init_schema',
    'create_database',
    'Cell',
    'Tissue',
    'Drug',
    'Dataset',
    'DatasetStat',
    'DoseResponse',
    'Experiment',
    'EntityRepository',
    'DatasetStatsRepository',
    'CellRepository',
    'TissueRepository',
    'DrugRepository',
    'DatasetRepository',
    'ExperimentRepository',
]
