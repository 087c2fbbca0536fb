import re

from .types import InvalidModulus, LcgParameters, ParameterRangeError, ValidationError

__all__ = ["ValidationError", "InvalidModulus", "ParameterRangeError", "parse_integer", "parse_parameters"]

# Optional sign and ASCII digits only; int() alone would also take "1_000" and non-ASCII digits.
_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


def parse_integer(text: object, message: str) -> int:
    if isinstance(text, bool):
        raise ValidationError(message)
    if isinstance(text, int):
        return text
    if not isinstance(text, str):
        raise ValidationError(message)
    stripped = text.strip()
    if not _INTEGER_RE.match(stripped):
        raise ValidationError(message)
    return int(stripped)


def _parse_modulus(text: object) -> int:
    try:
        value = parse_integer(text, "Modulus (m) must be a positive integer.")
    except ValidationError as exc:
        raise InvalidModulus(str(exc)) from exc
    if value <= 0:
        raise InvalidModulus("Modulus (m) must be a positive integer.")
    return value


def parse_parameters(modulus: object, multiplier: object, increment: object, seed: object) -> LcgParameters:
    """Parse the four text inputs in the order modulus, multiplier, increment, seed."""

    m = _parse_modulus(modulus)
    a = parse_integer(multiplier, "Multiplier (a) must be an integer.")
    c = parse_integer(increment, "Increment (c) must be an integer.")
    x0 = parse_integer(seed, "Seed must be an integer.")
    return LcgParameters(modulus=m, multiplier=a, increment=c, seed=x0)
