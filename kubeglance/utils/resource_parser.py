"""Resource parsing utilities for CPU and memory quantities.

Provides functions to parse Kubernetes resource quantities into integers:
- CPU: parsed to millicores (int)
- Memory: parsed to bytes (int)

Scaled values are rounded up, matching how the API server reports
``MilliValue()`` and ``Value()`` for fractional quantities.
"""

import re
from decimal import ROUND_CEILING, Decimal, DecimalException

# Module-level constants to avoid re-creating on every function call.
_SUFFIX_MULTIPLIERS: dict[str, Decimal] = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024**2),
    "Gi": Decimal(1024**3),
    "Ti": Decimal(1024**4),
    "Pi": Decimal(1024**5),
    "Ei": Decimal(1024**6),
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}

# A suffix is tried before a decimal exponent so "1E" reads as exa, "1E3" as 1000.
_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))"
    r"(?:(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|n|u|m|k|M|G|T|P|E)|[eE](?P<exponent>[+-]?\d+))?$"
)

# Scaled values must fit a signed 64-bit integer.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_quantity(value: str | int | float) -> Decimal:
    """Parse a Kubernetes resource quantity into its base-unit value.

    Handles the binary SI suffixes (Ki..Ei), the decimal SI suffixes (n..E)
    and decimal exponents ("1e3").

    Args:
        value: Quantity as a string (e.g., "100m", "512Mi", "1.5") or a number

    Returns:
        Quantity value in base units (cores or bytes) as Decimal.

    Raises:
        ValueError: If the value is not a valid quantity.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid quantity: {value!r}")
    if isinstance(value, (int, float)):
        try:
            number = Decimal(str(value))
        except DecimalException as exc:
            raise ValueError(f"invalid quantity: {value!r}") from exc
        if not number.is_finite():
            raise ValueError(f"invalid quantity: {value!r}")
        return number
    if not isinstance(value, str):
        raise ValueError(f"invalid quantity: {value!r}")

    match = _QUANTITY_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"invalid quantity: {value!r}")

    try:
        number = Decimal(match.group("number"))
        if suffix := match.group("suffix"):
            return number * _SUFFIX_MULTIPLIERS[suffix]
        if exponent := match.group("exponent"):
            return number.scaleb(int(exponent))
    except DecimalException as exc:
        raise ValueError(f"quantity out of range: {value!r}") from exc
    return number


def _ceil_int(value: Decimal, scale: int = 1) -> int:
    try:
        rounded = (value * scale).to_integral_value(rounding=ROUND_CEILING)
    except DecimalException as exc:
        raise ValueError(f"quantity out of range: {value}") from exc
    if not _INT64_MIN <= rounded <= _INT64_MAX:
        raise ValueError(f"quantity out of range: {value}")
    return int(rounded)


def cpu_millicores(value: str | int | float) -> int:
    """Convert a CPU quantity to millicores.

    Examples: "100m" -> 100, "1.5" -> 1500, "250000000n" -> 250.

    Raises:
        ValueError: If the value is not a valid quantity or does not fit in 64 bits.
    """
    return _ceil_int(parse_quantity(value), 1000)


def memory_bytes(value: str | int | float) -> int:
    """Convert a memory quantity to bytes.

    Examples: "1Ki" -> 1024, "64Mi" -> 67108864, "1G" -> 1000000000.

    Raises:
        ValueError: If the value is not a valid quantity or does not fit in 64 bits.
    """
    return _ceil_int(parse_quantity(value))
