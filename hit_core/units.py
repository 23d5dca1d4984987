import math
from hit_core.config import UNITS, DEFAULT_UNIT

KG_PER_LB = 0.45359237
LB_PER_KG = 1 / KG_PER_LB  # 2.20462...


def _to_float(value) -> float:
    """ Coerce str/number input to float, anything unusable becomes 0 """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return v


def normalize_unit(unit: str | None) -> str:
    """ Return a known unit, falling back to kg """
    return unit if unit in UNITS else DEFAULT_UNIT


def other_unit(unit: str | None) -> str:
    """ kg <-> lbs, used by the unit toggle """
    return "lbs" if normalize_unit(unit) == "kg" else "kg"


def to_canonical(unit: str, value) -> float:
    """ Takes a weight typed in the display unit and returns kilograms """
    v = _to_float(value)
    return v * KG_PER_LB if unit == "lbs" else v


def from_canonical(unit: str, kg) -> float:
    """ Takes stored kilograms and returns the weight in the display unit """
    v = _to_float(kg or 0)
    return v * LB_PER_KG if unit == "lbs" else v


def round_display(value: float) -> float:
    """ Two decimals, render time only. Stored kilograms keep full precision. """
    # half-up like the chart labels always had, not banker's rounding
    return math.floor(value * 100 + 0.5) / 100


def display_weight(unit: str, kg) -> float:
    return round_display(from_canonical(unit, kg))
