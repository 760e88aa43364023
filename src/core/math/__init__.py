"""
Core math modules

Поэлементные операции, квадранты и рекурсивное умножение Штрассена.
"""

# Elementwise Combiner
from src.core.math.elementwise import add_matrices, subtract_matrices

# Quadrant Splitter/Joiner
from src.core.math.quadrants import (
    Quadrants,
    join_quadrants,
    pad_matrix,
    split_quadrants,
    trim_matrix,
)

# Standard (reference) multiply
from src.core.math.standard import scalar_multiplications, standard_multiply

# Recursive Multiplier
from src.core.math.strassen import (
    DEFAULT_BASE_CASE_THRESHOLD,
    PRODUCTS_PER_LEVEL,
    MultiplicationResult,
    MultiplicationStats,
    OddDimensionError,
    ShapeMismatch,
    StrassenConfig,
    StrassenMultiplier,
    multiply,
)

__all__ = [
    # Elementwise
    "add_matrices",
    "subtract_matrices",
    # Quadrants — Types
    "Quadrants",
    # Quadrants — Functions
    "join_quadrants",
    "pad_matrix",
    "split_quadrants",
    "trim_matrix",
    # Standard
    "scalar_multiplications",
    "standard_multiply",
    # Strassen — Constants
    "DEFAULT_BASE_CASE_THRESHOLD",
    "PRODUCTS_PER_LEVEL",
    # Strassen — Exceptions
    "OddDimensionError",
    "ShapeMismatch",
    # Strassen — Types
    "MultiplicationResult",
    "MultiplicationStats",
    "StrassenConfig",
    "StrassenMultiplier",
    # Strassen — Functions
    "multiply",
]
