"""Summing the values of mappings of integers or floats."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from decimal import Decimal
from typing import Hashable, TypeVar, Union

Number = Union[int, float]
N = TypeVar("N", int, float)


def sum_ints(m: Mapping[Hashable, int]) -> int:
    """Return the sum of the integer values of ``m``."""
    return sum(m.values(), 0)


def sum_floats(m: Mapping[Hashable, float]) -> float:
    """Return the sum of the float values of ``m``."""
    return sum(m.values(), 0.0)


def sum_numbers(m: Mapping[Hashable, N]) -> N:
    """Return the sum of the values of ``m``, integers or floats alike."""
    return sum(m.values())


def _format_value(value: Number) -> str:
    """Format a number the way a default value verb prints it."""
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" in text and 1e-4 <= abs(value) < 1e21:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def main(argv: list[str] | None = None) -> int:
    """Print the sums of two sample mappings computed each way."""
    ints = {"first": 34, "second": 12}
    floats = {"first": 35.98, "second": 26.99}

    def pair(a: Number, b: Number) -> str:
        return f"{_format_value(a)} and {_format_value(b)}"

    print(f"Non-Generic Sums: {pair(sum_ints(ints), sum_floats(floats))}")
    print(f"Generic Sums: {pair(sum_numbers(ints), sum_numbers(floats))}")
    print(
        "Generic Sums, type parameters inferred: "
        f"{pair(sum_numbers(ints), sum_numbers(floats))}"
    )
    print(
        "Generic Sums with Constraint: "
        f"{pair(sum_numbers(ints), sum_numbers(floats))}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())