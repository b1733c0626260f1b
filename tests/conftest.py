"""
Pytest configuration for PharmacoDB API tests.
"""
import sys
import os
import sqlite3
import pytest

# Add src directory to Python path so tests can import pharmacodb modules
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
sys.path.insert(0, src_path)

from pharmacodb.config import PharmacoDBSettings
from pharmacodb.database import ConnectionPool, init_schema
from pharmacodb.monitoring import ErrorSink


# ==============================================================================
# Database Fixtures
# ==============================================================================

TISSUES = [(1, "lung"), (2, "breast"), (3, "skin")]
CELLS = [
    (1, "CVCL_0023", "A549", 1),
    (2, "CVCL_0031", "MCF7", 2),
    (3, "CVCL_0526", "SK-MEL-28", 3),
]
DRUGS = [(1, "Paclitaxel"), (2, "Erlotinib"), (3, "Doxorubicin")]
DATASETS = [(1, "CCLE"), (2, "GDSC1000")]

# experiment_id, cell_id, drug_id, dataset_id, tissue_id
EXPERIMENTS = [
    (1, 1, 1, 1, 1),
    (2, 1, 1, 2, 1),
    (3, 1, 2, 1, 1),
    (4, 2, 1, 2, 2),
    (5, 3, 3, 2, 3),
]

# Interleaved across experiments; each experiment keeps its own insertion order
DOSE_RESPONSES = [
    (1, 0.1, 98.0),
    (2, 0.5, 95.5),
    (1, 1.0, 71.2),
    (2, 5.0, 40.1),
    (1, 10.0, 12.4),
    (3, 0.01, 100.0),
    (4, 2.0, 60.0),
    (3, 0.1, 88.3),
    (5, 0.3, 90.0),
]

# dataset_id, cell_lines, tissues, drugs, experiments
DATASET_STATISTICS = [
    (1, 1, 1, 2, 2),
    (2, 3, 3, 2, 3),
]


def seed_database(db_path: str) -> str:
    conn = sqlite3.connect(db_path)
    try:
        init_schema(conn)
        conn.executemany("INSERT INTO tissues VALUES (?, ?)", TISSUES)
        conn.executemany("INSERT INTO cells VALUES (?, ?, ?, ?)", CELLS)
        conn.executemany("INSERT INTO drugs VALUES (?, ?)", DRUGS)
        conn.executemany("INSERT INTO datasets VALUES (?, ?)", DATASETS)
        conn.executemany("INSERT INTO experiments VALUES (?, ?, ?, ?, ?)", EXPERIMENTS)
        conn.executemany(
            "INSERT INTO dose_responses (experiment_id, dose, response) VALUES (?, ?, ?)",
            DOSE_RESPONSES
        )
        conn.executemany("INSERT INTO dataset_statistics VALUES (?, ?, ?, ?, ?)", DATASET_STATISTICS)
        conn.commit()
    finally:
        conn.close()
    return db_path


class RecordingErrorSink(ErrorSink):
    """Keeps captured private errors for assertions."""

    def __init__(self):
        self.captured = []

    def capture(self, error):
        self.captured.append(error)


@pytest.fixture
def db_path(tmp_path):
    """Seeded SQLite database."""
    return seed_database(str(tmp_path / "pharmacodb.db"))


@pytest.fixture
def pool(db_path):
    """Read-only connection pool over the seeded database."""
    pool = ConnectionPool(db_path, pool_size=2, read_only=True)
    yield pool
    pool.close_all()


@pytest.fixture
def error_sink():
    return RecordingErrorSink()


@pytest.fixture
def settings(db_path):
    return PharmacoDBSettings(db_path=db_path, pool_size=2, sentry_dsn="", max_page_limit=100)


@pytest.fixture
def client(settings, pool, error_sink):
    """TestClient over an app using the seeded pool."""
    from fastapi.testclient import TestClient
    from pharmacodb.api import create_app

    app = create_app(settings, pool=pool, error_sink=error_sink)
    with TestClient(app) as client:
        yield client
