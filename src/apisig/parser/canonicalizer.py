"""Canonical ordering and unique naming of method models.

Sorting and naming together decide the generated identifiers, so both are
fully deterministic: ordinal string comparison, a stable sort, and
locale-independent upper-casing.
"""

from __future__ import annotations

import logging
from typing import Literal

from apisig.core.errors import DuplicateSignatureError
from apisig.core.models import MethodModel

logger = logging.getLogger(__name__)


def sort_key(model: MethodModel) -> tuple[str, int, tuple[str, ...]]:
    """Order by name, then argument count, then argument names by position."""
    return (model.name, len(model.arguments), model.argument_names)


def sort_models(
    models: list[MethodModel],
    duplicate_policy: Literal["warn", "error"] = "warn",
) -> list[MethodModel]:
    """Return models in canonical order.

    Models with equal sort keys keep their relative order and are reported
    as probable duplicates.

    Raises:
        DuplicateSignatureError: For equal keys when duplicate_policy is "error"
    """
    ordered = sorted(models, key=sort_key)
    for previous, current in zip(ordered, ordered[1:]):
        if sort_key(previous) != sort_key(current):
            continue
        if duplicate_policy == "error":
            raise DuplicateSignatureError(str(previous), str(current))
        logger.warning(f"Duplicate methods found [{previous}], [{current}]")
    return ordered


def upper_case(name: str) -> str:
    """Upper-case a name one character at a time, independent of locale.

    Characters whose upper-case form is not a single character (such as
    German sharp s) are kept unchanged so the mapping stays one to one.
    """
    chars = []
    for char in name:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


def assign_unique_names(models: list[MethodModel]) -> list[MethodModel]:
    """Assign unique names in the given order, returning updated copies.

    The first model with a given upper-cased name gets it verbatim; later
    ones get "_1", "_2", ... A suffix that would clash with another model's
    upper-cased name is skipped.
    """
    base_names = {upper_case(model.name) for model in models}
    occurrences: dict[str, int] = {}
    used: set[str] = set()
    named: list[MethodModel] = []

    for model in models:
        base = upper_case(model.name)
        count = occurrences.get(base)
        if count is None and base not in used:
            unique_name = base
            count = 1
        else:
            count = count or 1
            unique_name = f"{base}_{count}"
            while unique_name in used or unique_name in base_names:
                count += 1
                unique_name = f"{base}_{count}"
            count += 1
        occurrences[base] = count
        used.add(unique_name)
        named.append(model.model_copy(update={"unique_name": unique_name}))

    return named


def canonicalize(
    models: list[MethodModel],
    duplicate_policy: Literal["warn", "error"] = "warn",
) -> list[MethodModel]:
    """Sort a validated batch and give every model a unique name."""
    return assign_unique_names(sort_models(models, duplicate_policy))
