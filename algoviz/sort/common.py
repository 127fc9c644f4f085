# common.py
#
# Helpers shared by the sorting trace generators.
import copy
import random

from algoviz.errors import InvalidInputError
from algoviz.trace import generate_id

ARRAY_STATES = ("normal", "pivot", "comparing", "swapping", "dividing", "merging", "sorted")


def make_elements(values) -> list:
    values = list(values)
    if not values:
        raise InvalidInputError("The array is empty. Enter some numbers first")
    return [{"id": generate_id(), "value": int(v), "state": "normal"} for v in values]


def make_step(elements, meta, code_highlight, message=""):
    """
    Record one frame. The element list is deep-copied so later mutations of
    the working array never leak into an already recorded step.
    """
    return {
        "meta": dict(meta),
        "code_highlight": code_highlight,
        "message": message,
        "data": copy.deepcopy(elements),
    }


def random_values(size=8, low=1, high=100, rng=None) -> list:
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(size)]


def values_of(step) -> list:
    return [element["value"] for element in step["data"]]
