"""Private helper utilities."""

import math
import re

# digits with an optional sign and decimal point; no exponents or underscores
_DECIMAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_decimal(value, default: float = 0.0) -> float:
    """Parse a number that may use a decimal comma.

    Parameters
    ----------
    value : Optional[str]
        The cell as read from the grade sheet, e.g. ``"7,5"``. May be `None`
        if the column is absent.
    default : float
        Returned when `value` is missing or cannot be parsed. Default: 0.0.

    Returns
    -------
    float
        The parsed number, or `default`. This function never raises.

    Notes
    -----
    Only plain decimals are accepted: an optional sign, digits, and a single
    decimal comma or point. Spellings such as ``"7_5"``, ``"1e3"`` or
    ``"nan"`` give `default`.

    """
    if value is None:
        return default

    text = str(value).strip().replace(",", ".")
    if not _DECIMAL.fullmatch(text):
        return default

    number = float(text)
    if not math.isfinite(number):
        return default

    return number


def parse_percentage(value, default: float = 0.0) -> float:
    """Parse a percentage like ``"82,5%"`` into the number 82.5."""
    if value is None:
        return default

    text = str(value).strip()
    if text.endswith("%"):
        text = text[:-1]

    return parse_decimal(text, default)
