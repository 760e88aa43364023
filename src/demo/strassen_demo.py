"""
Strassen demo — консольный драйвер

Сценарии по умолчанию:
1. 2×2:   [[1,2],[3,4]] × [[5,6],[7,8]]
2. 4×4:   1..16 × 17..32
3. 10×10: 1..100 × 101..200 (нечётные уровни → дополнение нулями)

С --input FILE перемножает пару матриц из JSON файла формата
{"a": [[...], ...], "b": [[...], ...]} (контракт matrix_pair.json).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import jsonschema
import pydantic

from src.core.contracts import load_matrix_pair
from src.core.domain.matrix import Matrix
from src.core.math.strassen import (
    DEFAULT_BASE_CASE_THRESHOLD,
    OddDimensionError,
    ShapeMismatch,
    StrassenConfig,
    StrassenMultiplier,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


# =============================================================================
# SAMPLE MATRICES
# =============================================================================


def counting_matrix(n: int, start: int = 1) -> Matrix:
    """Матрица n × n, заполненная start, start+1, ... построчно."""
    return Matrix.from_rows(
        [[start + i * n + j for j in range(n)] for i in range(n)]
    )


def builtin_scenarios() -> list[tuple[str, Matrix, Matrix]]:
    """Три демонстрационных сценария: (имя, A, B)."""
    return [
        (
            "2x2",
            Matrix.from_rows([[1, 2], [3, 4]]),
            Matrix.from_rows([[5, 6], [7, 8]]),
        ),
        ("4x4", counting_matrix(4, start=1), counting_matrix(4, start=17)),
        ("10x10", counting_matrix(10, start=1), counting_matrix(10, start=101)),
    ]


# =============================================================================
# RENDERING
# =============================================================================


def render_matrix(m: Matrix) -> str:
    """Текстовое представление: одна строка матрицы на строку, '[ 1 2 ]'."""
    return "\n".join("[ " + " ".join(str(x) for x in row) + " ]" for row in m.rows)


def print_scenario(
    name: str,
    a: Matrix,
    b: Matrix,
    multiplier: StrassenMultiplier,
    show_stats: bool,
) -> None:
    result = multiplier.multiply_with_stats(a, b)

    print(f"Matrix A ({name}):")
    print(render_matrix(a))
    print(f"\nMatrix B ({name}):")
    print(render_matrix(b))
    print(f"\nMatrix C = A * B ({name}):")
    print(render_matrix(result.product))

    if show_stats:
        stats = result.stats
        print(
            f"\nrecursive_steps={stats.recursive_steps} "
            f"base_case_calls={stats.base_case_calls} "
            f"scalar_multiplications={stats.scalar_multiplications} "
            f"max_depth={stats.max_depth} "
            f"padded_levels={stats.padded_levels}"
        )
    print()


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Multiply square integer matrices with Strassen's algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  strassen-demo                      # Run the built-in 2x2, 4x4, 10x10 scenarios
  strassen-demo --stats              # Also print recursion statistics
  strassen-demo --input pair.json    # Multiply {"a": [[...]], "b": [[...]]}
  strassen-demo --threshold 4 --no-pad
        """,
    )
    parser.add_argument(
        "--input",
        type=Path,
        metavar="FILE",
        help="JSON file with a matrix pair {\"a\": ..., \"b\": ...}",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_BASE_CASE_THRESHOLD,
        metavar="N",
        help=f"Base case dimension (default: {DEFAULT_BASE_CASE_THRESHOLD})",
    )
    parser.add_argument(
        "--no-pad",
        action="store_true",
        help="Reject odd dimensions above the base case instead of zero-padding",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print recursion statistics for each product",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with argument parsing."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = StrassenConfig(
            base_case_threshold=args.threshold,
            pad_odd_dimensions=not args.no_pad,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    multiplier = StrassenMultiplier(config)

    try:
        if args.input is not None:
            with open(args.input, "r", encoding="utf-8") as f:
                payload = json.load(f)
            a, b = load_matrix_pair(payload)
            scenarios = [(args.input.name, a, b)]
        else:
            scenarios = builtin_scenarios()

        for name, a, b in scenarios:
            logger.debug("Running scenario %s (n=%d)", name, a.n)
            print_scenario(name, a, b, multiplier, args.stats)
    except (ShapeMismatch, OddDimensionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except jsonschema.ValidationError as e:
        print(f"Error: invalid matrix pair: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except pydantic.ValidationError as e:
        print(f"Error: invalid matrix: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
