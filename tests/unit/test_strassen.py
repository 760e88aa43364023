"""
Тесты для Strassen — рекурсивное умножение матриц

Проверяемые инварианты:
1. Результат совпадает с наивным O(n^3) произведением поэлементно
2. Единичная матрица — нейтральный элемент (слева и справа)
3. ShapeMismatch до начала вычислений
4. Ровно 7 рекурсивных произведений на уровень: O(n^log2(7))
5. Нечётные размерности: дополнение нулями или OddDimensionError
"""

import logging
import random

import pytest

from src.core.domain import Matrix
from src.core.math import standard_multiply
from src.core.math.strassen import (
    DEFAULT_BASE_CASE_THRESHOLD,
    PRODUCTS_PER_LEVEL,
    MultiplicationResult,
    OddDimensionError,
    ShapeMismatch,
    StrassenConfig,
    StrassenMultiplier,
    multiply,
)


# =============================================================================
# HELPERS
# =============================================================================


def naive_product(a: list[list[int]], b: list[list[int]]) -> list[list[int]]:
    """Тройной цикл по определению, независимо от кода модуля."""
    n = len(a)
    c = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            for k in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def random_matrix(rng: random.Random, n: int, low: int = -100, high: int = 100) -> Matrix:
    return Matrix.from_rows([[rng.randint(low, high) for _ in range(n)] for _ in range(n)])


# =============================================================================
# ТЕСТЫ: Конкретные сценарии
# =============================================================================


class TestConcreteScenarios:
    """Известные произведения."""

    def test_2x2(self) -> None:
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert multiply(a, b).to_lists() == [[19, 22], [43, 50]]

    def test_4x4(self) -> None:
        a = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
        b = [[17, 18, 19, 20], [21, 22, 23, 24], [25, 26, 27, 28], [29, 30, 31, 32]]
        c = multiply(Matrix.from_rows(a), Matrix.from_rows(b))

        assert c.entry(0, 0) == 1 * 17 + 2 * 21 + 3 * 25 + 4 * 29 == 250
        assert c.to_lists() == naive_product(a, b)
        assert c.to_lists() == [
            [250, 260, 270, 280],
            [618, 644, 670, 696],
            [986, 1028, 1070, 1112],
            [1354, 1412, 1470, 1528],
        ]

    def test_1x1(self) -> None:
        assert multiply(Matrix.from_rows([[-3]]), Matrix.from_rows([[7]])).to_lists() == [[-21]]

    def test_0x0(self) -> None:
        """Пустая матрица — валидное значение, результат тоже пустой."""
        assert multiply(Matrix.zeros(0), Matrix.zeros(0)).n == 0

    def test_random_8x8(self) -> None:
        """Все 64 элемента совпадают с наивным произведением."""
        rng = random.Random(8)
        a = random_matrix(rng, 8)
        b = random_matrix(rng, 8)
        c = multiply(a, b)
        expected = naive_product(a.to_lists(), b.to_lists())
        for i in range(8):
            for j in range(8):
                assert c.entry(i, j) == expected[i][j]


# =============================================================================
# ТЕСТЫ: Корректность против наивного умножения
# =============================================================================


class TestCorrectness:
    """Свойства произведения."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7, 8, 10, 12, 16])
    def test_matches_naive(self, n: int) -> None:
        rng = random.Random(1000 + n)
        a = random_matrix(rng, n)
        b = random_matrix(rng, n)
        assert multiply(a, b).to_lists() == naive_product(a.to_lists(), b.to_lists())

    @pytest.mark.parametrize("threshold", [1, 2, 3, 4, 8])
    def test_threshold_does_not_change_result(self, threshold: int) -> None:
        rng = random.Random(threshold)
        a = random_matrix(rng, 12)
        b = random_matrix(rng, 12)
        multiplier = StrassenMultiplier(StrassenConfig(base_case_threshold=threshold))
        assert multiplier.multiply(a, b) == standard_multiply(a, b)

    @pytest.mark.parametrize("n", [1, 2, 4, 5, 8])
    def test_identity_right_and_left(self, n: int) -> None:
        rng = random.Random(n)
        a = random_matrix(rng, n)
        identity = Matrix.identity(n)
        assert multiply(a, identity) == a
        assert multiply(identity, a) == a

    def test_zero_matrix_annihilates(self) -> None:
        rng = random.Random(0)
        a = random_matrix(rng, 8)
        assert multiply(a, Matrix.zeros(8)) == Matrix.zeros(8)

    def test_not_commutative(self) -> None:
        """Порядок операндов важен: A×B ≠ B×A в общем случае."""
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert multiply(b, a).to_lists() == [[23, 34], [31, 46]]
        assert multiply(a, b) != multiply(b, a)

    def test_large_entries_exact(self) -> None:
        """Нет переполнения: результат точен для больших значений."""
        big = 2**62
        a = Matrix.from_rows([[big, big], [big, big]])
        assert multiply(a, a).entry(0, 0) == 2 * big * big

    def test_inputs_unchanged(self) -> None:
        rng = random.Random(42)
        a = random_matrix(rng, 4)
        b = random_matrix(rng, 4)
        before = (a.to_lists(), b.to_lists())
        multiply(a, b)
        assert (a.to_lists(), b.to_lists()) == before


# =============================================================================
# ТЕСТЫ: ShapeMismatch
# =============================================================================


class TestShapeMismatch:
    """Разные размерности → ShapeMismatch без вычислений."""

    def test_raises(self) -> None:
        with pytest.raises(ShapeMismatch, match="2x2 by 4x4"):
            multiply(Matrix.zeros(2), Matrix.zeros(4))

    def test_carries_dimensions(self) -> None:
        with pytest.raises(ShapeMismatch) as exc_info:
            multiply(Matrix.zeros(3), Matrix.zeros(0))
        assert exc_info.value.left_dimension == 3
        assert exc_info.value.right_dimension == 0

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            multiply(Matrix.zeros(1), Matrix.zeros(2))

    def test_no_partial_work(self, monkeypatch) -> None:
        """Рекурсия не запускается."""
        multiplier = StrassenMultiplier()
        calls = []
        monkeypatch.setattr(multiplier, "_multiply", lambda *args: calls.append(args))

        with pytest.raises(ShapeMismatch):
            multiplier.multiply(Matrix.zeros(4), Matrix.zeros(8))
        assert calls == []

    def test_logged_as_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.math.strassen"):
            with pytest.raises(ShapeMismatch):
                multiply(Matrix.zeros(2), Matrix.zeros(3))
        assert "different dimension" in caplog.text


# =============================================================================
# ТЕСТЫ: Сложность O(n^log2(7))
# =============================================================================


class TestComplexity:
    """Счётчики рекурсии подтверждают 7 произведений на уровень."""

    def test_products_per_level_constant(self) -> None:
        assert PRODUCTS_PER_LEVEL == 7

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_threshold_one_counts(self, k: int) -> None:
        """n = 2^k, threshold 1: 7^k скалярных умножений вместо 8^k."""
        n = 2**k
        multiplier = StrassenMultiplier(StrassenConfig(base_case_threshold=1))
        result = multiplier.multiply_with_stats(Matrix.identity(n), Matrix.identity(n))

        stats = result.stats
        assert stats.dimension == n
        assert stats.base_case_calls == 7**k
        assert stats.scalar_multiplications == 7**k
        assert stats.recursive_steps == (7**k - 1) // 6
        assert stats.max_depth == k
        assert stats.padded_levels == 0
        assert stats.scalar_multiplications < n**3

    @pytest.mark.parametrize("k", [2, 3, 4])
    def test_default_threshold_counts(self, k: int) -> None:
        """n = 2^k, threshold 2: 7^(k-1) base case 2×2 по 8 умножений."""
        n = 2**k
        result = StrassenMultiplier().multiply_with_stats(Matrix.zeros(n), Matrix.zeros(n))

        assert DEFAULT_BASE_CASE_THRESHOLD == 2
        assert result.stats.base_case_calls == 7 ** (k - 1)
        assert result.stats.scalar_multiplications == 8 * 7 ** (k - 1)
        assert result.stats.max_depth == k - 1

    def test_growth_ratio_is_seven(self) -> None:
        """Удвоение n умножает число скалярных умножений на 7, а не на 8."""
        multiplier = StrassenMultiplier(StrassenConfig(base_case_threshold=1))
        counts = [
            multiplier.multiply_with_stats(Matrix.zeros(n), Matrix.zeros(n)).stats.scalar_multiplications
            for n in (4, 8, 16)
        ]
        assert counts[1] == 7 * counts[0]
        assert counts[2] == 7 * counts[1]

    def test_base_case_only(self) -> None:
        result = StrassenMultiplier().multiply_with_stats(Matrix.zeros(2), Matrix.zeros(2))
        assert isinstance(result, MultiplicationResult)
        assert result.stats.recursive_steps == 0
        assert result.stats.base_case_calls == 1
        assert result.stats.scalar_multiplications == 8
        assert result.stats.max_depth == 0

    def test_stats_are_per_call(self) -> None:
        """Статистика не накапливается между вызовами."""
        multiplier = StrassenMultiplier()
        first = multiplier.multiply_with_stats(Matrix.zeros(4), Matrix.zeros(4)).stats
        second = multiplier.multiply_with_stats(Matrix.zeros(4), Matrix.zeros(4)).stats
        assert first == second


# =============================================================================
# ТЕСТЫ: Нечётные размерности
# =============================================================================


class TestOddDimensions:
    """Дополнение нулями и строгий режим."""

    def test_padding_counted(self) -> None:
        """10 → 5 (нечётное) → pad 6 → 3 (нечётное) → pad 4 → 2."""
        rng = random.Random(10)
        a = random_matrix(rng, 10)
        b = random_matrix(rng, 10)
        result = StrassenMultiplier().multiply_with_stats(a, b)

        assert result.product.n == 10
        assert result.product == standard_multiply(a, b)
        # 1 уровень 5×5 (7 вызовов) + 49 уровней 3×3
        assert result.stats.padded_levels == 7 + 49

    def test_odd_top_level_padded(self) -> None:
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        result = StrassenMultiplier().multiply_with_stats(a, Matrix.identity(3))
        assert result.product == a
        assert result.stats.padded_levels == 1

    def test_odd_within_threshold_not_padded(self) -> None:
        config = StrassenConfig(base_case_threshold=3)
        result = StrassenMultiplier(config).multiply_with_stats(Matrix.zeros(3), Matrix.zeros(3))
        assert result.stats.padded_levels == 0
        assert result.stats.base_case_calls == 1

    def test_strict_mode_rejects_odd(self) -> None:
        config = StrassenConfig(pad_odd_dimensions=False)
        with pytest.raises(OddDimensionError, match="odd size 3"):
            StrassenMultiplier(config).multiply(Matrix.zeros(6), Matrix.zeros(6))

    def test_strict_mode_fails_before_recursion(self, monkeypatch) -> None:
        multiplier = StrassenMultiplier(StrassenConfig(pad_odd_dimensions=False))
        calls = []
        monkeypatch.setattr(multiplier, "_multiply", lambda *args: calls.append(args))

        with pytest.raises(OddDimensionError):
            multiplier.multiply(Matrix.zeros(12), Matrix.zeros(12))
        assert calls == []

    def test_strict_mode_accepts_powers_of_two(self) -> None:
        rng = random.Random(16)
        a = random_matrix(rng, 16)
        b = random_matrix(rng, 16)
        multiplier = StrassenMultiplier(StrassenConfig(pad_odd_dimensions=False))
        assert multiplier.multiply(a, b) == standard_multiply(a, b)

    def test_strict_mode_accepts_odd_base_case(self) -> None:
        """6 → 3 при threshold 3: 3 уже base case."""
        config = StrassenConfig(base_case_threshold=3, pad_odd_dimensions=False)
        rng = random.Random(6)
        a = random_matrix(rng, 6)
        b = random_matrix(rng, 6)
        assert StrassenMultiplier(config).multiply(a, b) == standard_multiply(a, b)


# =============================================================================
# ТЕСТЫ: Конфигурация
# =============================================================================


class TestStrassenConfig:
    """Тесты StrassenConfig."""

    def test_defaults(self) -> None:
        config = StrassenConfig()
        assert config.base_case_threshold == DEFAULT_BASE_CASE_THRESHOLD
        assert config.pad_odd_dimensions is True

    def test_default_multiplier_config(self) -> None:
        assert StrassenMultiplier().config == StrassenConfig()

    @pytest.mark.parametrize("threshold", [0, -1])
    def test_invalid_threshold(self, threshold: int) -> None:
        with pytest.raises(ValueError, match="base_case_threshold"):
            StrassenConfig(base_case_threshold=threshold)

    def test_frozen(self) -> None:
        config = StrassenConfig()
        with pytest.raises(AttributeError):
            config.base_case_threshold = 4
