"""
Entity repositories for cell lines, tissues, drugs and datasets.

Each entity is a flat (id, name) record living in its own lookup table, so a
single generic repository parameterized by table and column names covers all
four of them.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Type, Union

from ..base import BaseRepository, parse_id
from ...errors import PublicError

logger = logging.getLogger(__name__)

LOOKUP_TYPES = ("id", "name")


@dataclass
class Cell:
    """Cell line"""
    id: int
    name: str


@dataclass
class Tissue:
    """Tissue of origin"""
    id: int
    name: str


@dataclass
class Drug:
    """Tested compound"""
    id: int
    name: str


@dataclass
class Dataset:
    """Source study"""
    id: int
    name: str


@dataclass
class DatasetStat:
    """Number of entities of one kind tested in a dataset"""
    dataset: Dataset
    count: int


class EntityRepository(BaseRepository):
    """Lookup-by-id and list-all over an (id, name) table."""

    table: str = ""
    id_column: str = ""
    name_column: str = ""
    record_type: Type = None

    def _to_record(self, row: Dict[str, Any]):
        return self.record_type(id=row[self.id_column], name=row[self.name_column])

    def find(self, identifier: Union[int, str], typ: str = "id"):
        """
        Get a single record.

        Args:
            identifier: Entity id, or entity name when ``typ`` is "name"
            typ: Lookup column, "id" or "name"

        Returns:
            The matching record, or None if no row matches
        """
        if typ == "id":
            value = parse_id(identifier)
            if value is None:
                return None
            column = self.id_column
        elif typ == "name":
            value = str(identifier)
            column = self.name_column
        else:
            raise PublicError(400, f"Invalid type '{typ}', must be one of: {', '.join(LOOKUP_TYPES)}")

        row = self._fetch_one(
            f"SELECT {self.id_column}, {self.name_column} FROM {self.table} WHERE {column} = ?",
            (value,)
        )
        if row is None:
            return None
        return self._to_record(row)

    def list_all(self) -> List:
        """Get every record, ordered by id"""
        rows = self._fetch_all(
            f"SELECT {self.id_column}, {self.name_column} FROM {self.table} ORDER BY {self.id_column}"
        )
        return [self._to_record(row) for row in rows]


class DatasetStatsRepository(EntityRepository):
    """Entity repository with per-dataset counts from dataset_statistics."""

    # Column of dataset_statistics holding this entity's per-dataset count
    stats_column: str = ""

    def stats(self) -> List[DatasetStat]:
        """Get the number of entities of this kind tested in each dataset"""
        rows = self._fetch_all(
            f"""
            SELECT ds.dataset_id, da.dataset_name, ds.{self.stats_column} AS count
            FROM dataset_statistics ds
            JOIN datasets da ON da.dataset_id = ds.dataset_id
            ORDER BY ds.dataset_id
            """
        )
        return [
            DatasetStat(
                dataset=Dataset(id=row['dataset_id'], name=row['dataset_name']),
                count=row['count']
            )
            for row in rows
        ]


class CellRepository(DatasetStatsRepository):
    table = "cells"
    id_column = "cell_id"
    name_column = "cell_name"
    record_type = Cell
    stats_column = "cell_lines"


class TissueRepository(DatasetStatsRepository):
    table = "tissues"
    id_column = "tissue_id"
    name_column = "tissue_name"
    record_type = Tissue
    stats_column = "tissues"


class DrugRepository(DatasetStatsRepository):
    table = "drugs"
    id_column = "drug_id"
    name_column = "drug_name"
    record_type = Drug
    stats_column = "drugs"


class DatasetRepository(EntityRepository):
    table = "datasets"
    id_column = "dataset_id"
    name_column = "dataset_name"
    record_type = Dataset
