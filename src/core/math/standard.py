"""
Standard Multiply — Эталонное умножение по определению

    C[i][j] = Σ_k A[i][k] * B[k][j]

O(n^3) умножений. Используется как base case в Strassen и как эталон
для проверки корректности.
"""

from src.core.domain.matrix import Matrix, from_trusted_rows


def standard_multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Умножение квадратных матриц по определению.

    Размерности не проверяются: вызывающий код гарантирует a.n == b.n.

    Args:
        a: Матрица n × n
        b: Матрица n × n

    Returns:
        Произведение A × B, матрица n × n

    Examples:
        >>> standard_multiply(Matrix.from_rows([[1, 2], [3, 4]]),
        ...                   Matrix.from_rows([[5, 6], [7, 8]])).to_lists()
        [[19, 22], [43, 50]]
    """
    columns = tuple(zip(*b.rows))
    return from_trusted_rows(
        tuple(
            tuple(sum(x * y for x, y in zip(row, col)) for col in columns)
            for row in a.rows
        )
    )


def scalar_multiplications(n: int) -> int:
    """Количество скалярных умножений в standard_multiply для n × n: n^3."""
    return n * n * n
