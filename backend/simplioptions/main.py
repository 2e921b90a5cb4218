"""Served application for the SimpliOptions backend.

Run with:
    uvicorn simplioptions.main:app --port 4000
"""

from .application import create_app
from .logging_conf import setup_logging

setup_logging()
app = create_app()
