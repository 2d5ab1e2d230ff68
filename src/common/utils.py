"""
Common utilities shared across all modules.
"""
import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Rounds halves away from negative infinity (2.5 -> 3, 92.5 -> 93).
    The built-in round() rounds halves to even, which would shift tier scores.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_half_up_int(value: float) -> int:
    return int(round_half_up(value, 0))


def format_coordinates(lat: float, lon: float) -> str:
    """Fallback display name for a coordinate pair."""
    return f"{lat:.4f}, {lon:.4f}"
