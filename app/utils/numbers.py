import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the positive amounts we price."""
    return int(math.floor(value + 0.5))
