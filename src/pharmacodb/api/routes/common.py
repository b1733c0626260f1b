"""
Shared helpers for the data type routes (cell lines, tissues, drugs, datasets).
"""

from dataclasses import asdict
from typing import Any, Dict

from pharmacodb.database import EntityRepository, DatasetStatsRepository
from pharmacodb.errors import NotFoundError


def data_types(description: str, repo: EntityRepository) -> Dict[str, Any]:
    """List every record of a data type"""
    return {
        "description": description,
        "data": [asdict(record) for record in repo.list_all()],
    }


def data_type_stats(description: str, repo: DatasetStatsRepository) -> Dict[str, Any]:
    """Per-dataset counts of a data type"""
    return {
        "description": description,
        "data": [asdict(stat) for stat in repo.stats()],
    }


def data_type(label: str, identifier: str, typ: str, repo: EntityRepository) -> Dict[str, Any]:
    """Single record of a data type, or 404"""
    record = repo.find(identifier, typ)
    if record is None:
        raise NotFoundError(f"{label} not found")
    return asdict(record)
