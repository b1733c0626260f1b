"""
Database schema.

The API never writes; this is used to create local and test databases.
"""
import sqlite3
from pathlib import Path

SCHEMA = """
CREATE TABLE IF NOT EXISTS tissues (
    tissue_id INTEGER PRIMARY KEY,
    tissue_name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS cells (
    cell_id INTEGER PRIMARY KEY,
    accession_id TEXT,
    cell_name TEXT NOT NULL,
    tissue_id INTEGER,
    FOREIGN KEY (tissue_id) REFERENCES tissues(tissue_id)
);

CREATE TABLE IF NOT EXISTS drugs (
    drug_id INTEGER PRIMARY KEY,
    drug_name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS datasets (
    dataset_id INTEGER PRIMARY KEY,
    dataset_name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS experiments (
    experiment_id INTEGER PRIMARY KEY,
    cell_id INTEGER NOT NULL,
    drug_id INTEGER NOT NULL,
    dataset_id INTEGER NOT NULL,
    tissue_id INTEGER NOT NULL,
    FOREIGN KEY (cell_id) REFERENCES cells(cell_id),
    FOREIGN KEY (drug_id) REFERENCES drugs(drug_id),
    FOREIGN KEY (dataset_id) REFERENCES datasets(dataset_id),
    FOREIGN KEY (tissue_id) REFERENCES tissues(tissue_id)
);

CREATE TABLE IF NOT EXISTS dose_responses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    experiment_id INTEGER NOT NULL,
    dose REAL NOT NULL,
    response REAL NOT NULL,
    FOREIGN KEY (experiment_id) REFERENCES experiments(experiment_id)
);

CREATE INDEX IF NOT EXISTS idx_dose_responses_experiment
    ON dose_responses(experiment_id);

CREATE TABLE IF NOT EXISTS dataset_statistics (
    dataset_id INTEGER PRIMARY KEY,
    cell_lines INTEGER NOT NULL DEFAULT 0,
    tissues INTEGER NOT NULL DEFAULT 0,
    drugs INTEGER NOT NULL DEFAULT 0,
    experiments INTEGER NOT NULL DEFAULT 0,
    FOREIGN KEY (dataset_id) REFERENCES datasets(dataset_id)
);
"""


def init_schema(conn: sqlite3.Connection):
    """Create all tables on an open connection."""
    conn.executescript(SCHEMA)
    conn.commit()


def create_database(db_path: str) -> str:
    """Create an empty database file with the schema applied."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        init_schema(conn)
    finally:
        conn.close()
    return db_path
