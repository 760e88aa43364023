"""
Quadrants — Разбиение матрицы на квадранты и обратная сборка

Split: матрица чётной размерности n → четыре матрицы n/2:
    top_left     = M[0..n/2][0..n/2]
    top_right    = M[0..n/2][n/2..n]
    bottom_left  = M[n/2..n][0..n/2]
    bottom_right = M[n/2..n][n/2..n]

Join: точная инверсия Split.

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    join_quadrants(*split_quadrants(M)) == M для любой чётной M

Также содержит pad_matrix / trim_matrix для обработки нечётных
размерностей (дополнение нулями до чётной и обрезка результата).
"""

from typing import NamedTuple

from src.core.domain.matrix import Matrix, from_trusted_rows


# =============================================================================
# TYPES
# =============================================================================


class Quadrants(NamedTuple):
    """Четыре квадранта матрицы (порядок: TL, TR, BL, BR)."""

    top_left: Matrix
    top_right: Matrix
    bottom_left: Matrix
    bottom_right: Matrix


# =============================================================================
# SPLIT / JOIN
# =============================================================================


def split_quadrants(m: Matrix) -> Quadrants:
    """
    Разбиение матрицы чётной размерности на четыре квадранта.

    Args:
        m: Матрица n × n, n чётное

    Returns:
        Quadrants, каждый квадрант размерности n/2

    Raises:
        ValueError: Если n нечётное

    Examples:
        >>> q = split_quadrants(Matrix.from_rows([[1, 2], [3, 4]]))
        >>> q.top_right.to_lists(), q.bottom_left.to_lists()
        ([[2]], [[3]])
    """
    n = m.n
    if n % 2 != 0:
        raise ValueError(f"Cannot split matrix of odd dimension {n}")

    half = n // 2
    top = m.rows[:half]
    bottom = m.rows[half:]

    return Quadrants(
        top_left=from_trusted_rows(tuple(row[:half] for row in top)),
        top_right=from_trusted_rows(tuple(row[half:] for row in top)),
        bottom_left=from_trusted_rows(tuple(row[:half] for row in bottom)),
        bottom_right=from_trusted_rows(tuple(row[half:] for row in bottom)),
    )


def join_quadrants(
    top_left: Matrix,
    top_right: Matrix,
    bottom_left: Matrix,
    bottom_right: Matrix,
) -> Matrix:
    """
    Сборка матрицы 2k × 2k из четырёх квадрантов k × k.

    Args:
        top_left: Верхний левый квадрант
        top_right: Верхний правый квадрант
        bottom_left: Нижний левый квадрант
        bottom_right: Нижний правый квадрант

    Returns:
        Матрица размерности 2k

    Raises:
        ValueError: Если квадранты разной размерности
    """
    k = top_left.n
    if not (top_right.n == bottom_left.n == bottom_right.n == k):
        raise ValueError(
            f"Quadrants must share one dimension, got "
            f"{top_left.n}, {top_right.n}, {bottom_left.n}, {bottom_right.n}"
        )

    upper = tuple(
        left + right for left, right in zip(top_left.rows, top_right.rows)
    )
    lower = tuple(
        left + right for left, right in zip(bottom_left.rows, bottom_right.rows)
    )
    return from_trusted_rows(upper + lower)


# =============================================================================
# PADDING
# =============================================================================


def pad_matrix(m: Matrix, size: int) -> Matrix:
    """
    Дополнение матрицы нулями снизу и справа до size × size.

    Args:
        m: Матрица n × n
        size: Целевая размерность (size >= n)

    Returns:
        Матрица size × size; верхний левый блок n × n равен m

    Raises:
        ValueError: Если size < n
    """
    n = m.n
    if size < n:
        raise ValueError(f"Cannot pad matrix of dimension {n} down to {size}")
    if size == n:
        return m

    extra = size - n
    padded_rows = tuple(row + (0,) * extra for row in m.rows)
    zero_rows = tuple((0,) * size for _ in range(extra))
    return from_trusted_rows(padded_rows + zero_rows)


def trim_matrix(m: Matrix, size: int) -> Matrix:
    """
    Обрезка матрицы до верхнего левого блока size × size.

    Args:
        m: Матрица n × n
        size: Целевая размерность (0 <= size <= n)

    Returns:
        Матрица size × size

    Raises:
        ValueError: Если size вне [0, n]
    """
    n = m.n
    if not 0 <= size <= n:
        raise ValueError(f"Cannot trim matrix of dimension {n} to {size}")
    if size == n:
        return m
    return from_trusted_rows(tuple(row[:size] for row in m.rows[:size]))
