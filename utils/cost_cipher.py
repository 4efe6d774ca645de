"""
Cost cipher for SKU cost tokens.

Each digit of the rounded cost is replaced by a letter:

    0 = C    5 = W
    1 = R    6 = O
    2 = A    7 = M
    3 = Z    8 = A  (same letter as 2)
    4 = Y    9 = N

No padding: 500 -> "WCC", 1500 -> "RWCC". Because 2 and 8 share a
letter, decoding "A" always gives 2.
"""

import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

CIPHER_MAP: dict[str, str] = {
    "0": "C",
    "1": "R",
    "2": "A",
    "3": "Z",
    "4": "Y",
    "5": "W",
    "6": "O",
    "7": "M",
    "8": "A",
    "9": "N",
}

REVERSE_CIPHER_MAP: dict[str, str] = {
    "C": "0",
    "R": "1",
    "A": "2",  # Could be 2 or 8; 2 wins
    "Z": "3",
    "Y": "4",
    "W": "5",
    "O": "6",
    "M": "7",
    "N": "9",
}

# Returned when the cost is not a number
INVALID_COST_TOKEN = "---"

# Leading number of a cost string: "500/-" reads as 500, "12abc" as 12
NUMERIC_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_cost(cost: Union[str, int, float, Decimal, None]) -> Optional[float]:
    """
    Read the leading number of a cost value.

    Trailing text is ignored, so "500/-" gives 500.0. Returns None when
    there is no leading number or it is not finite.
    """
    if cost is None:
        return None

    match = NUMERIC_PREFIX.match(str(cost))
    if not match:
        return None

    numeric = float(match.group(0))
    return numeric if math.isfinite(numeric) else None


def encode_cost(cost: Union[str, int, float, Decimal, None]) -> str:
    """
    Encode a cost value as cipher letters.

    The value is rounded to the nearest whole number (halves away
    from zero) and each digit is mapped to its letter. The sign of a
    negative cost is ignored.

    Examples:
        100    -> "RCC"
        "0500" -> "WCC"
        1500   -> "RWCC"
        9999   -> "NNNN"
        "500/-" -> "WCC"
        "abc"  -> "---"

    Args:
        cost: Cost as a number or a string starting with one

    Returns:
        Encoded letters, or INVALID_COST_TOKEN if cost has no leading number
    """
    numeric = parse_cost(cost)
    if numeric is None:
        return INVALID_COST_TOKEN

    try:
        rounded = Decimal(repr(abs(numeric))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits to round exactly
        return INVALID_COST_TOKEN

    return "".join(CIPHER_MAP[digit] for digit in str(int(rounded)))


def decode_cost(encoded: str) -> int:
    """
    Decode cipher letters back to a whole-number cost.

    Case-insensitive. Unknown characters decode as 0, and "A" decodes
    as 2 even when the original digit was 8.

    Examples:
        "RCC"  -> 100
        "rawc" -> 1250
        "?RC"  -> 10

    Args:
        encoded: Cipher letters

    Returns:
        Decoded cost (0 for empty input)
    """
    digits = "".join(REVERSE_CIPHER_MAP.get(char, "0") for char in (encoded or "").upper())
    return int(digits) if digits else 0
