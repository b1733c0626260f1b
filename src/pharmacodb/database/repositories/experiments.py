"""
Experiment repository.

Experiments reference one cell line, tissue, drug and dataset. Listing and
lookup join all four lookup tables; the combination queries resolve the two
given entities first and then join the remaining two.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..base import BaseRepository, SQLITE_MAX_INT, parse_id
from ..connection_pool import ConnectionPool
from .entities import (
    Cell, Tissue, Drug, Dataset,
    CellRepository, DrugRepository, DatasetRepository,
)
from ...errors import NotFoundError, PublicError

logger = logging.getLogger(__name__)


@dataclass
class DoseResponse:
    """Single point of a dose-response curve"""
    dose: float
    response: float


@dataclass
class Experiment:
    """One cell line / drug / tissue / dataset combination"""
    id: int
    cell: Cell
    tissue: Tissue
    drug: Drug
    dataset: Dataset
    dose_responses: List[DoseResponse] = field(default_factory=list)


EXPERIMENT_SELECT = """
    SELECT e.experiment_id,
           c.cell_id, c.cell_name,
           t.tissue_id, t.tissue_name,
           d.drug_id, d.drug_name,
           da.dataset_id, da.dataset_name
    FROM experiments e
    JOIN cells c ON c.cell_id = e.cell_id
    JOIN tissues t ON t.tissue_id = e.tissue_id
    JOIN drugs d ON d.drug_id = e.drug_id
    JOIN datasets da ON da.dataset_id = e.dataset_id
"""


def _experiment_from_row(row: Dict[str, Any]) -> Experiment:
    return Experiment(
        id=row['experiment_id'],
        cell=Cell(id=row['cell_id'], name=row['cell_name']),
        tissue=Tissue(id=row['tissue_id'], name=row['tissue_name']),
        drug=Drug(id=row['drug_id'], name=row['drug_name']),
        dataset=Dataset(id=row['dataset_id'], name=row['dataset_name']),
    )


class ExperimentRepository(BaseRepository):
    """Repository for experiments and their dose-response data"""

    def __init__(self, pool: ConnectionPool):
        super().__init__(pool)
        self.cells = CellRepository(pool)
        self.drugs = DrugRepository(pool)
        self.datasets = DatasetRepository(pool)

    def list_paginated(self, page: int, limit: int) -> List[Experiment]:
        """
        Get one page of experiments, ordered by id.

        Pages are 1-based. A page past the end of the data is an empty list.
        Dose-response data is not included.
        """
        if page < 1 or limit < 1:
            raise PublicError(400, "page and limit must be positive integers")

        offset = (page - 1) * limit
        if offset > SQLITE_MAX_INT:
            return []
        limit = min(limit, SQLITE_MAX_INT)
        rows = self._fetch_all(
            EXPERIMENT_SELECT + " ORDER BY e.experiment_id LIMIT ? OFFSET ?",
            (limit, offset)
        )
        return [_experiment_from_row(row) for row in rows]

    def find(self, experiment_id: Union[int, str]) -> Optional[Experiment]:
        """Get a single experiment with its dose-response data"""
        experiment_id = parse_id(experiment_id)
        if experiment_id is None:
            return None

        row = self._fetch_one(EXPERIMENT_SELECT + " WHERE e.experiment_id = ?", (experiment_id,))
        if row is None:
            return None

        experiment = _experiment_from_row(row)
        experiment.dose_responses = self.dose_responses(experiment.id)
        return experiment

    def dose_responses(self, experiment_id: int) -> List[DoseResponse]:
        """Get the dose-response series of an experiment in stored order"""
        rows = self._fetch_all(
            "SELECT dose, response FROM dose_responses WHERE experiment_id = ? ORDER BY id",
            (experiment_id,)
        )
        return [DoseResponse(dose=row['dose'], response=row['response']) for row in rows]

    def cell_drug_combination(self, cell_id: Union[int, str], drug_id: Union[int, str],
                              typ: str = "id") -> List[Experiment]:
        """Get all experiments where a cell line and a drug have been tested together"""
        cell = self.cells.find(cell_id, typ)
        if cell is None:
            raise NotFoundError(f"Cell line {cell_id} not found")
        drug = self.drugs.find(drug_id, typ)
        if drug is None:
            raise NotFoundError(f"Drug {drug_id} not found")

        rows = self._fetch_all(
            """
            SELECT e.experiment_id, t.tissue_id, t.tissue_name, da.dataset_id, da.dataset_name
            FROM experiments e
            JOIN tissues t ON t.tissue_id = e.tissue_id
            JOIN datasets da ON da.dataset_id = e.dataset_id
            WHERE e.cell_id = ? AND e.drug_id = ?
            ORDER BY e.experiment_id
            """,
            (cell.id, drug.id)
        )

        experiments = []
        for row in rows:
            experiment = Experiment(
                id=row['experiment_id'],
                cell=cell,
                tissue=Tissue(id=row['tissue_id'], name=row['tissue_name']),
                drug=drug,
                dataset=Dataset(id=row['dataset_id'], name=row['dataset_name']),
            )
            experiment.dose_responses = self.dose_responses(experiment.id)
            experiments.append(experiment)

        logger.debug(f"{len(experiments)} experiments for cell {cell.id} / drug {drug.id}")
        return experiments

    def cell_dataset_combination(self, cell_id: Union[int, str], dataset_id: Union[int, str],
                                 typ: str = "id") -> List[Experiment]:
        """Get all experiments where a cell line has been tested in a dataset"""
        cell = self.cells.find(cell_id, typ)
        if cell is None:
            raise NotFoundError(f"Cell line {cell_id} not found")
        dataset = self.datasets.find(dataset_id, typ)
        if dataset is None:
            raise NotFoundError(f"Dataset {dataset_id} not found")

        rows = self._fetch_all(
            """
            SELECT e.experiment_id, t.tissue_id, t.tissue_name, d.drug_id, d.drug_name
            FROM experiments e
            JOIN tissues t ON t.tissue_id = e.tissue_id
            JOIN drugs d ON d.drug_id = e.drug_id
            WHERE e.cell_id = ? AND e.dataset_id = ?
            ORDER BY e.experiment_id
            """,
            (cell.id, dataset.id)
        )

        experiments = []
        for row in rows:
            experiment = Experiment(
                id=row['experiment_id'],
                cell=cell,
                tissue=Tissue(id=row['tissue_id'], name=row['tissue_name']),
                drug=Drug(id=row['drug_id'], name=row['drug_name']),
                dataset=dataset,
            )
            experiment.dose_responses = self.dose_responses(experiment.id)
            experiments.append(experiment)

        logger.debug(f"{len(experiments)} experiments for cell {cell.id} / dataset {dataset.id}")
        return experiments
