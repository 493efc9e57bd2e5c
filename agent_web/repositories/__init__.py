from .run_repository import RunRepository

__all__ = [
    "RunRepository",
]
