"""Helpers for rounding integers to powers of two."""

from __future__ import annotations


def round_up_power_of_two(value: int) -> int:
    """Return the smallest power of two greater than or equal to ``value``."""
    result = 1
    while result < value:
        result <<= 1
    return result


def round_down_power_of_two(value: int) -> int:
    """Return the largest power of two less than or equal to ``value``."""
    if value <= 0:
        raise ValueError(f"input {value} must be positive")
    rounded_up = round_up_power_of_two(value)
    if rounded_up == value:
        return rounded_up
    return rounded_up // 2


def round_up_power_of_two_strict(value: int) -> int:
    """Return the smallest power of two strictly greater than ``value``."""
    result = round_up_power_of_two(value)
    if result == value:
        return result * 2
    return result


def is_power_of_two(value: int) -> bool:
    """Return True if ``value`` is a power of two."""
    return value != 0 and value & (value - 1) == 0