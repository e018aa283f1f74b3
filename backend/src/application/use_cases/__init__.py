"""Application use cases."""

from .init_db import InitDbUseCase

__all__ = ["InitDbUseCase"]
