"""
PharmacoDB API Server Entry Point

Run with: python -m pharmacodb.api.main
or: uvicorn pharmacodb.api.main:app
"""

import uvicorn

from pharmacodb.api.app import create_app
from pharmacodb.config import PharmacoDBSettings

settings = PharmacoDBSettings.load_from_env()
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )
