"""
Domain models and value objects.

Contains the immutable square Matrix model.
"""

from src.core.domain.matrix import Matrix, from_trusted_rows

__all__ = [
    "Matrix",
    "from_trusted_rows",
]
