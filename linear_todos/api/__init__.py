"""HTTP API routers.

- todos: TODO index endpoints under /v1/documents
"""

from .todos import router as todos_router

__all__ = ["todos_router"]
