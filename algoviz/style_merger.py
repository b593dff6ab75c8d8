# style_merger.py
import copy


def merge_styles(base_styles: dict, overrides: dict) -> dict:
    """
    Recursively merge style overrides onto a base style table.
    Nested dicts are merged key by key, any other value replaces the base value.
    Neither argument is modified.
    """
    merged = copy.deepcopy(base_styles)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_styles(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
