from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equal(left: Any, right: Any) -> bool:
    """
    Equality with JSON typing: booleans never equal numbers, ints equal
    floats of the same value, containers compare element-wise.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if _is_number(left) and _is_number(right):
        return left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(strict_equal(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))
    if type(left) is not type(right):
        return False
    return left == right


def matches(document: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
    """True when every query key is present in `document` with a strictly equal value."""
    for key, expected in query.items():
        actual = document.get(key, _MISSING)
        if actual is _MISSING or not strict_equal(actual, expected):
            return False
    return True


def _apply_set(document: dict[str, Any], fields: Mapping[str, Any]) -> None:
    document.update(fields)


def _apply_inc(document: dict[str, Any], fields: Mapping[str, Any]) -> None:
    for key, amount in fields.items():
        current = document.get(key)
        if _is_number(current) and _is_number(amount):
            document[key] = current + amount


def _apply_push(document: dict[str, Any], fields: Mapping[str, Any]) -> None:
    for key, value in fields.items():
        current = document.get(key)
        if isinstance(current, list):
            document[key] = [*current, value]


class UpdateOperator(str, Enum):
    SET = "$set"
    INC = "$inc"
    PUSH = "$push"

    def apply(self, document: dict[str, Any], fields: Mapping[str, Any]) -> None:
        """Mutate `document` in place. Fields or operands of the wrong type are left unchanged."""
        _APPLIERS[self](document, fields)


_APPLIERS = {
    UpdateOperator.SET: _apply_set,
    UpdateOperator.INC: _apply_inc,
    UpdateOperator.PUSH: _apply_push,
}


def parse_update_spec(update_spec: Mapping[str, Any]) -> Iterator[tuple[UpdateOperator, Mapping[str, Any]]]:
    """
    Yield (operator, fields) pairs in the update spec's key order.

    Unknown operator names are skipped.
    """
    for name, fields in update_spec.items():
        try:
            op = UpdateOperator(name)
        except ValueError:
            logger.debug("ignoring unknown update operator %r", name)
            continue
        if not isinstance(fields, Mapping):
            raise TypeError(f"{name} expects a mapping of field -> value")
        yield op, fields


def apply_update(document: Mapping[str, Any], update_spec: Mapping[str, Any]) -> dict[str, Any]:
    """Return a shallow copy of `document` with every recognized operator applied in order."""
    updated = dict(document)
    for op, fields in parse_update_spec(update_spec):
        op.apply(updated, fields)
    return updated
