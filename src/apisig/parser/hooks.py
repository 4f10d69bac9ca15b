"""Post-processing hooks applied to the bound, unsorted batch.

A hook receives every bound model before argument consistency is checked and
may add, remove or reorder models, for example to add synthetic variants of a
real method.
"""

from __future__ import annotations

from typing import Callable as CallableFunc

from apisig.core.models import MethodModel

ProcessResults = CallableFunc[[list[MethodModel]], list[MethodModel]]


def identity(models: list[MethodModel]) -> list[MethodModel]:
    """Default hook: leave the batch unchanged."""
    return models


def chain(*processors: ProcessResults) -> ProcessResults:
    """Compose hooks so that each one receives the previous one's result."""

    def process(models: list[MethodModel]) -> list[MethodModel]:
        for processor in processors:
            models = processor(models)
        return models

    return process
