"""Find-or-create logic for a cache behavior's LambdaFunctionAssociations."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

DEFAULT_EVENT_TYPE = "viewer-request"
EVENT_TYPES = ("viewer-request", "viewer-response", "origin-request", "origin-response")


@dataclass
class Upsert:
    """Association list after an upsert, plus where the target entry landed."""

    associations: dict[str, Any]
    index: int
    inserted: bool
    duplicates: int = 0


def read_associations(distribution_config: dict[str, Any]) -> dict[str, Any]:
    """Return the default cache behavior's association list, normalized.

    boto3 omits Items when Quantity is 0; both missing pieces read as empty.
    The returned dict is a copy; the fetched config is not modified.
    """
    behavior = distribution_config.get("DefaultCacheBehavior") or {}
    raw = behavior.get("LambdaFunctionAssociations") or {}
    items = [dict(item) for item in raw.get("Items") or []]
    return {"Quantity": raw.get("Quantity", len(items)), "Items": items}


def find_association(associations: dict[str, Any], event_type: str) -> int | None:
    """Index of the first item with this EventType, or None."""
    for i, item in enumerate(associations["Items"]):
        if item.get("EventType") == event_type:
            return i
    return None


def count_duplicates(associations: dict[str, Any], event_type: str) -> int:
    """Number of items for event_type beyond the first."""
    matches = sum(1 for item in associations["Items"] if item.get("EventType") == event_type)
    return max(matches - 1, 0)


def upsert_association(
    associations: dict[str, Any],
    event_type: str,
    function_arn: str,
    include_body: bool | None = None,
) -> Upsert:
    """Point event_type at function_arn, appending a new entry if none exists.

    Returns a new list; the input is left untouched. Quantity grows by one only
    when an entry is appended.
    """
    items = [dict(item) for item in associations["Items"]]
    quantity = associations["Quantity"]
    index = find_association(associations, event_type)

    if index is None:
        entry: dict[str, Any] = {"EventType": event_type}
        inserted = True
    else:
        entry = items[index]
        inserted = False

    entry["LambdaFunctionARN"] = function_arn
    if include_body is not None:
        entry["IncludeBody"] = include_body

    if inserted:
        items.append(entry)
        quantity += 1
        index = len(items) - 1
    else:
        items[index] = entry

    return Upsert(
        associations={"Quantity": quantity, "Items": items},
        index=index,
        inserted=inserted,
        duplicates=count_duplicates(associations, event_type),
    )


def with_associations(
    distribution_config: dict[str, Any], associations: dict[str, Any]
) -> dict[str, Any]:
    """Copy of distribution_config with the default behavior's associations replaced."""
    updated = copy.deepcopy(distribution_config)
    behavior = updated.setdefault("DefaultCacheBehavior", {})
    behavior["LambdaFunctionAssociations"] = copy.deepcopy(associations)
    return updated
