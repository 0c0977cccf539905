"""
Haversine Distance Service
==========================
Entry point. Run with: python main.py  (or: uvicorn main:app --port 8080)
"""

import logging
import sys

from src.api.app import create_app
from src.domain.errors import BindFailure
from src.server import serve

logger = logging.getLogger(__name__)

app = create_app()

if __name__ == "__main__":
    try:
        serve(app)
    except BindFailure as exc:
        logger.critical("%s", exc)
        sys.exit(1)
