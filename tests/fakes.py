"""Test doubles shared by the test modules."""

from __future__ import annotations

import io
from typing import Optional

from valet_delivery.domain.entities import GeoPoint
from valet_delivery.domain.errors import LocationResolutionError
from valet_delivery.session import ConsolePrompter


class FakeLocator:
    """Returns a fixed point, or raises when built with ``point=None``."""

    def __init__(self, point: Optional[GeoPoint] = GeoPoint(0.0, 0.0)):
        self.point = point
        self.calls = 0

    def locate(self) -> GeoPoint:
        self.calls += 1
        if self.point is None:
            raise LocationResolutionError("location service unreachable")
        return self.point


def scripted_prompter(*lines: str) -> ConsolePrompter:
    """A console prompter fed with *lines*; prompts go to a buffer."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return ConsolePrompter(stdin=stdin, stdout=io.StringIO())
