from __future__ import annotations


def to_fahrenheit(tenths_celsius: int | float) -> float:
    """Convert a GHCND value in tenths of a degree Celsius to Fahrenheit."""
    return (tenths_celsius / 10) * 9 / 5 + 32
