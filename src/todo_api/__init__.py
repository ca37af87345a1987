"""
FastAPI Todo service package.

Exposes the application factory for convenience imports
(``from todo_api import create_app``).
"""

from .main import create_app  # noqa: F401
