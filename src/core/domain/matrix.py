"""
Matrix — Квадратная целочисленная матрица

Immutable Pydantic модель, представляющая квадратную матрицу n × n
со знаковыми целыми элементами.

ИНВАРИАНТЫ:
1. Количество строк равно количеству столбцов (n × n)
2. Все элементы — int (bool и float отвергаются)
3. Матрица никогда не изменяется после создания (frozen=True)
4. Матрица размерности 0 — валидное значение
"""

from typing import Iterable, Sequence

from pydantic import BaseModel, Field, StrictInt, field_validator


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Квадратная матрица знаковых целых чисел.

    Immutable модель (frozen=True): все операции (сложение, вычитание,
    умножение, разбиение на квадранты) создают новый экземпляр.
    """

    rows: tuple[tuple[StrictInt, ...], ...] = Field(
        default=(), description="Строки матрицы (n строк по n элементов)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rows")
    @classmethod
    def validate_square(
        cls, v: tuple[tuple[int, ...], ...]
    ) -> tuple[tuple[int, ...], ...]:
        """Проверка квадратности: каждая строка длины n."""
        n = len(v)
        for i, row in enumerate(v):
            if len(row) != n:
                raise ValueError(
                    f"Matrix must be square: row {i} has {len(row)} entries, expected {n}"
                )
        return v

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Matrix":
        """
        Создание матрицы из произвольной вложенной последовательности.

        Args:
            rows: Строки матрицы (list of lists, tuple of tuples, ...)

        Returns:
            Валидированная Matrix

        Raises:
            ValidationError: Если матрица не квадратная или элементы не int

        Examples:
            >>> Matrix.from_rows([[1, 2], [3, 4]]).n
            2
        """
        return cls(rows=tuple(tuple(row) for row in rows))

    @classmethod
    def zeros(cls, n: int) -> "Matrix":
        """Нулевая матрица n × n."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return from_trusted_rows(tuple((0,) * n for _ in range(n)))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Единичная матрица n × n."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return from_trusted_rows(
            tuple(tuple(1 if i == j else 0 for j in range(n)) for i in range(n))
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Размерность матрицы (количество строк = количество столбцов)."""
        return len(self.rows)

    def entry(self, row: int, col: int) -> int:
        """Элемент (row, col)."""
        return self.rows[row][col]

    def to_lists(self) -> list[list[int]]:
        """Конверсия во вложенные списки (для JSON и вывода)."""
        return [list(row) for row in self.rows]


# =============================================================================
# INTERNAL CONSTRUCTION
# =============================================================================


def from_trusted_rows(rows: tuple[tuple[int, ...], ...]) -> Matrix:
    """
    Создание Matrix без повторной валидации.

    Используется только внутри math модулей, где квадратность и тип
    элементов гарантированы построением (квадранты, суммы, произведения).
    Внешние данные должны проходить через Matrix.from_rows.

    Args:
        rows: Строки матрицы, уже tuple of tuples of int

    Returns:
        Matrix
    """
    return Matrix.model_construct(rows=rows)
