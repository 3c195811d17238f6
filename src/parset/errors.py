"""Exceptions raised by parset."""

from __future__ import annotations
from typing import Any


class ApplyError(Exception):
    """
    One or more concurrent apply invocations raised.

    Every element is still processed; the failures are collected and
    raised together once all invocations have finished.

    Attributes:
        failures: (element, exception) pairs, one per failed invocation.
        total: Number of invocations that were run.
    """

    def __init__(self, failures: list[tuple[Any, BaseException]], total: int):
        self.failures = failures
        self.total = total
        super().__init__(f"{len(failures)} of {total} apply invocations failed")

    @property
    def exceptions(self) -> list[BaseException]:
        return [exc for _, exc in self.failures]
