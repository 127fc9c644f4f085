# style_merger.py
import copy


def merge_styles(base: dict, overrides: dict) -> dict:
    """
    Recursively merge `overrides` into a copy of `base`.
    Nested dicts are merged key by key; any other value in `overrides` replaces
    the one in `base`. Neither input is modified.
    """
    merged = copy.deepcopy(base)
    if not overrides:
        return merged

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_styles(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
