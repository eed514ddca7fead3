"""Merge rules for partial application updates."""

import copy
from collections.abc import Mapping
from typing import Any

from domain.enums import ApplicationCategory

STATUS_FIELD = "status"


def deep_merge(target: dict, source: Mapping) -> dict:
    """
    Recursively merge ``source`` into ``target`` in place.

    Mappings are merged key by key; any other value (strings, lists, None)
    replaces what ``target`` held under the same key.

    Args:
        target: Document being updated
        source: Partial document

    Returns:
        The updated ``target``
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            deep_merge(current, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, Mapping, list, tuple)):
        return len(value) == 0
    return False


def prune_empty(value: Any) -> Any:
    """
    Return a copy of ``value`` without empty strings, mappings, sequences or None.

    Pruning is bottom-up: a mapping or list that only held empty values is
    itself removed from its parent.
    """
    if isinstance(value, Mapping):
        pruned = {}
        for key, item in value.items():
            item = prune_empty(item)
            if not _is_empty(item):
                pruned[key] = item
        return pruned
    if isinstance(value, (list, tuple)):
        return [item for item in (prune_empty(item) for item in value) if not _is_empty(item)]
    return value


def _split_status(patch: Mapping[str, Any]) -> tuple[dict, dict]:
    """Separate category status maps from the rest of the patch."""
    body: dict[str, Any] = {}
    statuses: dict[str, Any] = {}
    for key, value in patch.items():
        if key in ApplicationCategory.keys() and isinstance(value, Mapping) and STATUS_FIELD in value:
            statuses[key] = value[STATUS_FIELD]
            value = {name: part for name, part in value.items() if name != STATUS_FIELD}
        body[key] = value
    return body, statuses


def merge_application_document(existing: Mapping[str, Any], patch: Mapping[str, Any]) -> dict:
    """
    Apply a partial update to an application document.

    Phase one deep-merges everything except category status maps, so titles
    under ``contents`` and ``attachments`` that the patch does not mention
    are kept. Phase two assigns each patched status map verbatim: decisions
    replace the previous map instead of accumulating stale keys. Empty values
    are pruned from the result.

    Args:
        existing: Stored document
        patch: Partial update body

    Returns:
        New merged document; ``existing`` is not modified
    """
    merged = copy.deepcopy(dict(existing))
    body, statuses = _split_status(patch)

    deep_merge(merged, body)

    for key, status in statuses.items():
        sub_application = merged.get(key)
        if not isinstance(sub_application, dict):
            sub_application = merged[key] = {}
        sub_application[STATUS_FIELD] = copy.deepcopy(status)

    return prune_empty(merged)
