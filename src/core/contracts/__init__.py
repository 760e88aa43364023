"""
Contract Validation Module

Модуль для валидации JSON контрактов внешнего представления матриц.
"""

from .validators import (
    ContractValidator,
    MatrixPairValidator,
    MatrixValidator,
    SchemaLoader,
    load_matrix,
    load_matrix_pair,
    validate_matrix,
    validate_matrix_pair,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    "MatrixPairValidator",
    # Functions
    "validate_matrix",
    "validate_matrix_pair",
    "load_matrix",
    "load_matrix_pair",
]
