"""
Strassen — Рекурсивное умножение квадратных матриц

Алгоритм Штрассена: вместо восьми произведений квадрантов вычисляются семь,
что даёт O(n^log2(7)) ≈ O(n^2.807) скалярных умножений вместо O(n^3).

ФОРМУЛЫ:
    p1 = (a11)       × (b12 - b22)
    p2 = (a11 + a12) × (b22)
    p3 = (a21 + a22) × (b11)
    p4 = (a22)       × (b21 - b11)
    p5 = (a11 + a22) × (b11 + b22)
    p6 = (a12 - a22) × (b21 + b22)
    p7 = (a11 - a21) × (b11 + b12)

    c11 = p5 + p4 - p2 + p6
    c12 = p1 + p2
    c21 = p3 + p4
    c22 = p5 + p1 - p3 - p7

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат точно равен стандартному произведению C[i][j] = Σ_k A[i][k]·B[k][j]
2. Ровно 7 рекурсивных умножений на каждом уровне разбиения
3. Несовпадение размерностей → ShapeMismatch до начала вычислений
4. Нечётная размерность выше порога → дополнение нулями до n + 1 и обрезка
   результата (или OddDimensionError в строгом режиме)
5. Входные матрицы не изменяются
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.domain.matrix import Matrix
from src.core.math.elementwise import add_matrices, subtract_matrices
from src.core.math.quadrants import (
    join_quadrants,
    pad_matrix,
    split_quadrants,
    trim_matrix,
)
from src.core.math.standard import scalar_multiplications, standard_multiply

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Размерность, при которой и ниже которой умножение выполняется напрямую.
# Для 1×1 и 2×2 накладные расходы рекурсии не окупаются.
DEFAULT_BASE_CASE_THRESHOLD: Final[int] = 2

# Количество рекурсивных произведений на один уровень разбиения
PRODUCTS_PER_LEVEL: Final[int] = 7


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ShapeMismatch(ValueError):
    """
    Размерности операндов умножения не совпадают.

    Поднимается один раз на входе multiply, до любых вычислений.
    Частичный результат не формируется.
    """

    def __init__(self, left_dimension: int, right_dimension: int):
        self.left_dimension = left_dimension
        self.right_dimension = right_dimension
        super().__init__(
            f"Shape mismatch: cannot multiply {left_dimension}x{left_dimension} "
            f"by {right_dimension}x{right_dimension}"
        )


class OddDimensionError(ValueError):
    """
    Нечётная размерность выше порога base case при pad_odd_dimensions=False.

    Строгий режим: контракт ограничен размерностями, которые делятся пополам
    на каждом уровне вплоть до base case.
    """

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class StrassenConfig:
    """Конфигурация StrassenMultiplier.

    Attributes:
        base_case_threshold: n <= threshold → прямое умножение (>= 1)
        pad_odd_dimensions: True → нечётные n дополняются нулями до чётных;
            False → OddDimensionError
    """

    base_case_threshold: int = DEFAULT_BASE_CASE_THRESHOLD
    pad_odd_dimensions: bool = True

    def __post_init__(self) -> None:
        if self.base_case_threshold < 1:
            raise ValueError(
                f"base_case_threshold must be >= 1, got {self.base_case_threshold}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class MultiplicationStats:
    """Статистика одного вызова multiply.

    Для n = 2^k и threshold = 2^j (k > j):
        recursive_steps        = (7^(k-j) - 1) / 6
        base_case_calls        = 7^(k-j)
        scalar_multiplications = 7^(k-j) · threshold^3
        max_depth              = k - j
    """

    dimension: int
    recursive_steps: int  # вызовы, ушедшие в ветку split → 7 products → join
    base_case_calls: int
    scalar_multiplications: int
    max_depth: int
    padded_levels: int  # вызовы, дополнившие нечётную размерность нулями


@dataclass(frozen=True)
class MultiplicationResult:
    """Результат multiply_with_stats."""

    product: Matrix
    stats: MultiplicationStats


@dataclass
class _Counters:
    """Изменяемый аккумулятор статистики, принадлежит одному вызову multiply."""

    recursive_steps: int = 0
    base_case_calls: int = 0
    scalar_multiplications: int = 0
    max_depth: int = 0
    padded_levels: int = 0


# =============================================================================
# MULTIPLIER
# =============================================================================


class StrassenMultiplier:
    """Умножение квадратных матриц алгоритмом Штрассена.

    Порядок работы multiply:
    1. Проверка a.n == b.n (ShapeMismatch)
    2. Строгий режим: проверка, что все уровни разбиения чётные
    3. n <= threshold → standard_multiply
    4. Иначе (нечётное n → pad до n + 1) → split → 7 произведений → join
       (→ trim)
    """

    def __init__(self, config: StrassenConfig | None = None):
        """Инициализация multiplier.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or StrassenConfig()

    def multiply(self, a: Matrix, b: Matrix) -> Matrix:
        """
        Произведение A × B.

        Args:
            a: Матрица n × n
            b: Матрица n × n

        Returns:
            Матрица n × n, равная стандартному произведению

        Raises:
            ShapeMismatch: Если a.n != b.n
            OddDimensionError: Если pad_odd_dimensions=False и на каком-либо
                уровне выше порога размерность нечётная

        Examples:
            >>> StrassenMultiplier().multiply(
            ...     Matrix.from_rows([[1, 2], [3, 4]]),
            ...     Matrix.from_rows([[5, 6], [7, 8]]),
            ... ).to_lists()
            [[19, 22], [43, 50]]
        """
        return self.multiply_with_stats(a, b).product

    def multiply_with_stats(self, a: Matrix, b: Matrix) -> MultiplicationResult:
        """
        Произведение A × B вместе со статистикой рекурсии.

        Raises:
            ShapeMismatch: Если a.n != b.n
            OddDimensionError: В строгом режиме при нечётном уровне
        """
        if a.n != b.n:
            logger.warning(
                "Refusing to multiply matrices of different dimension: %d vs %d",
                a.n,
                b.n,
            )
            raise ShapeMismatch(a.n, b.n)

        if not self.config.pad_odd_dimensions:
            self._check_even_levels(a.n)

        counters = _Counters()
        product = self._multiply(a, b, 0, counters)

        stats = MultiplicationStats(
            dimension=a.n,
            recursive_steps=counters.recursive_steps,
            base_case_calls=counters.base_case_calls,
            scalar_multiplications=counters.scalar_multiplications,
            max_depth=counters.max_depth,
            padded_levels=counters.padded_levels,
        )
        logger.debug("Strassen multiply finished: %s", stats)
        return MultiplicationResult(product=product, stats=stats)

    def _check_even_levels(self, n: int) -> None:
        """Строгий режим: n должно делиться пополам до base case."""
        size = n
        while size > self.config.base_case_threshold:
            if size % 2 != 0:
                raise OddDimensionError(
                    f"Dimension {n} reaches odd size {size} above base case "
                    f"threshold {self.config.base_case_threshold}"
                )
            size //= 2

    def _multiply(self, a: Matrix, b: Matrix, depth: int, counters: _Counters) -> Matrix:
        n = a.n
        counters.max_depth = max(counters.max_depth, depth)

        # Base case
        if n <= self.config.base_case_threshold:
            counters.base_case_calls += 1
            counters.scalar_multiplications += scalar_multiplications(n)
            return standard_multiply(a, b)

        # Нечётная размерность: дополняем нулями до n + 1, результат обрезаем
        if n % 2 != 0:
            counters.padded_levels += 1
            logger.debug("Padding odd dimension %d to %d at depth %d", n, n + 1, depth)
            padded = self._multiply(
                pad_matrix(a, n + 1), pad_matrix(b, n + 1), depth, counters
            )
            return trim_matrix(padded, n)

        counters.recursive_steps += 1

        a11, a12, a21, a22 = split_quadrants(a)
        b11, b12, b21, b22 = split_quadrants(b)

        nxt = depth + 1
        p1 = self._multiply(a11, subtract_matrices(b12, b22), nxt, counters)
        p2 = self._multiply(add_matrices(a11, a12), b22, nxt, counters)
        p3 = self._multiply(add_matrices(a21, a22), b11, nxt, counters)
        p4 = self._multiply(a22, subtract_matrices(b21, b11), nxt, counters)
        p5 = self._multiply(add_matrices(a11, a22), add_matrices(b11, b22), nxt, counters)
        p6 = self._multiply(subtract_matrices(a12, a22), add_matrices(b21, b22), nxt, counters)
        p7 = self._multiply(subtract_matrices(a11, a21), add_matrices(b11, b12), nxt, counters)

        c11 = add_matrices(subtract_matrices(add_matrices(p5, p4), p2), p6)
        c12 = add_matrices(p1, p2)
        c21 = add_matrices(p3, p4)
        c22 = subtract_matrices(subtract_matrices(add_matrices(p5, p1), p3), p7)

        return join_quadrants(c11, c12, c21, c22)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Глобальный экземпляр с конфигурацией по умолчанию
_DEFAULT_MULTIPLIER = StrassenMultiplier()


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Произведение A × B алгоритмом Штрассена (конфигурация по умолчанию).

    Args:
        a: Матрица n × n
        b: Матрица n × n

    Returns:
        Матрица n × n

    Raises:
        ShapeMismatch: Если a.n != b.n
    """
    return _DEFAULT_MULTIPLIER.multiply(a, b)
