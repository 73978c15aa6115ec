import math

DEG2RAD = math.pi / 180
RAD2DEG = 180 / math.pi


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEG2RAD


def rad2deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * RAD2DEG


def safe_div(a: float, b: float, fallback: float = 0.0, eps: float = 1e-12) -> float:
    """Return a / b, or `fallback` when |b| is below `eps`."""
    return fallback if abs(b) < eps else a / b


def round_sig(x: float, sig: int = 3) -> float:
    """
    Round to `sig` significant figures.

    Non-finite values and exact zero collapse to 0.0 so a results table never
    shows 'nan' or 'inf'.
    """
    if not math.isfinite(x) or x == 0:
        return 0.0
    sign = -1.0 if x < 0 else 1.0
    x = abs(x)
    exponent = math.floor(math.log10(x))
    factor = 10.0 ** (sig - 1 - exponent)
    return sign * round(x * factor) / factor


def fmt(x: float, sig: int = 3) -> str:
    """Format a number with `sig` significant figures for display."""
    r = round_sig(x, sig)
    if abs(r) < 1e-12:
        r = 0.0
    return f"{r:g}"
