"""Recursive merge of a JSON patch onto a JSON tree."""

from __future__ import annotations

import copy
from typing import Any

JsonTree = dict[str, Any] | list[Any] | str | int | float | bool | None


def merge_json(target: JsonTree, patch: JsonTree) -> JsonTree:
    """Merge ``patch`` onto ``target`` and return the result.

    For each key of ``patch``: when both values are objects the merge
    recurses, otherwise the patch value replaces the target value (keys
    missing from the target are added). Keys absent from the patch are
    left untouched. If either root is not an object, ``target`` is
    returned unchanged. Neither argument is mutated.

    Args:
        target: Current JSON tree
        patch: Partial JSON tree to apply

    Returns:
        A new merged tree
    """
    result = copy.deepcopy(target)
    if not isinstance(result, dict) or not isinstance(patch, dict):
        return result
    _merge_into(result, patch)
    return result


def _merge_into(target: dict[str, Any], patch: dict[str, Any]) -> None:
    for key, value in patch.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)
