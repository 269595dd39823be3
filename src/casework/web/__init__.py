"""FastAPI REST API for cabinet generation.

This module provides a REST API for sizing cabinets, generating their
manufacturing data and rendering technical drawings.

Usage:
    uvicorn casework.web:app --reload
"""

from casework.web.app import app, create_app

__all__ = ["app", "create_app"]
