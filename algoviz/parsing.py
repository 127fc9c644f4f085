# parsing.py
#
# User input is read leniently: a token counts as a number if it starts with
# an optional sign and at least one digit ("12abc" -> 12, "3.9" -> 3).
# Tokens without leading digits are not numbers.
import re

from algoviz.errors import InvalidInputError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(token):
    """Leading integer of `token`, or None when it has none."""
    if token is None:
        return None
    match = _LEADING_INT.match(str(token))
    if not match:
        return None
    return int(match.group(1))


def parse_int_list(text: str) -> list:
    """
    Parse comma-separated integers. Non-numeric tokens are dropped silently;
    if nothing numeric remains, InvalidInputError is raised.
    """
    values = [parse_int(token) for token in (text or "").split(",")]
    values = [v for v in values if v is not None]
    if not values:
        raise InvalidInputError("Enter numbers separated by commas")
    return values


def parse_value(text) -> int:
    """Single value for an insert / remove / search field."""
    value = parse_int(text)
    if value is None:
        raise InvalidInputError("Please enter a valid number")
    return value


def parse_node_id(text, node_count: int) -> int:
    """Node id bounded to [0, node_count - 1]."""
    value = parse_int(text)
    if value is None or not 0 <= value < node_count:
        raise InvalidInputError(f"Node id must be a number between 0 and {node_count - 1}")
    return value
