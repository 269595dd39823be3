"""API routers for the REST API."""

from casework.web.routers.drawings import router as drawings_router
from casework.web.routers.export import router as export_router
from casework.web.routers.generate import router as generate_router
from casework.web.routers.sizes import router as sizes_router

__all__ = [
    "drawings_router",
    "export_router",
    "generate_router",
    "sizes_router",
]
