"""
Repository implementations.
"""
from .entities import (
    Cell, Tissue, Drug, Dataset, DatasetStat,
    EntityRepository, DatasetStatsRepository, CellRepository, TissueRepository, DrugRepository, DatasetRepository,
)
from .experiments import DoseResponse, Experiment, ExperimentRepository

__all__ = [
    'Cell',
    'Tissue',
    'Drug',
    'Dataset',
    'DatasetStat',
    'EntityRepository',
    'DatasetStatsRepository',
    'CellRepository',
    'TissueRepository',
    'DrugRepository',
    'DatasetRepository',
    'DoseResponse',
    'Experiment',
    'ExperimentRepository',
]
