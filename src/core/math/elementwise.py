"""
Elementwise — Поэлементное сложение и вычитание матриц

Чистые функции над матрицами одинаковой размерности:
    C[i][j] = A[i][j] + B[i][j]
    C[i][j] = A[i][j] - B[i][j]

Равенство размерностей — предусловие вызывающего кода (Recursive Multiplier
гарантирует его построением), ShapeMismatch здесь не поднимается.
Несовпадение длин строк всё же не проходит молча: zip(strict=True) даёт
ValueError.

Python int имеет произвольную точность, переполнения нет.
"""

from src.core.domain.matrix import Matrix, from_trusted_rows


def add_matrices(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма A + B.

    Args:
        a: Матрица n × n
        b: Матрица n × n

    Returns:
        Новая матрица n × n

    Examples:
        >>> add_matrices(Matrix.from_rows([[1, 2], [3, 4]]),
        ...              Matrix.from_rows([[5, 6], [7, 8]])).to_lists()
        [[6, 8], [10, 12]]
    """
    return from_trusted_rows(
        tuple(
            tuple(x + y for x, y in zip(row_a, row_b, strict=True))
            for row_a, row_b in zip(a.rows, b.rows, strict=True)
        )
    )


def subtract_matrices(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная разность A - B.

    Args:
        a: Уменьшаемое, матрица n × n
        b: Вычитаемое, матрица n × n

    Returns:
        Новая матрица n × n

    Examples:
        >>> subtract_matrices(Matrix.from_rows([[5, 6], [7, 8]]),
        ...                   Matrix.from_rows([[1, 2], [3, 4]])).to_lists()
        [[4, 4], [4, 4]]
    """
    return from_trusted_rows(
        tuple(
            tuple(x - y for x, y in zip(row_a, row_b, strict=True))
            for row_a, row_b in zip(a.rows, b.rows, strict=True)
        )
    )
