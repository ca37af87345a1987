from .greet import router as greet_router
from .todos import router as todos_router

__all__ = ["greet_router", "todos_router"]
