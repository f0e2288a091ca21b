"""
Order Session
=============

Interactive collection of the customers for one order cycle.

Prompting is a capability (:class:`Prompter`): ask a question, parse the
answer, ask again until it parses.  ``OrderSession`` only knows the
questions, so it can be driven by the console or by a scripted prompter
in tests.
"""

from __future__ import annotations

import logging
import math
import sys
from abc import ABC, abstractmethod
from typing import Callable, TextIO, TypeVar

from .domain.entities import GeoPoint, NamedPoint
from .domain.errors import InputParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ── Parsers ───────────────────────────────────────────────────────────


def parse_count(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError as e:
        raise InputParseError(f"not a whole number: {text!r}") from e
    if value < 0:
        raise InputParseError(f"count cannot be negative: {value}")
    return value


def parse_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise InputParseError("name cannot be empty")
    return name


def _parse_coordinate(text: str, limit: float, label: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as e:
        raise InputParseError(f"{label} is not a number: {text!r}") from e
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise InputParseError(f"{label} must be within ±{limit:g}: {text!r}")
    return value


def parse_latitude(text: str) -> float:
    return _parse_coordinate(text, 90.0, "latitude")


def parse_longitude(text: str) -> float:
    return _parse_coordinate(text, 180.0, "longitude")


def parse_yes_no(text: str) -> bool:
    """Only ``y`` (any case) means yes; every other answer means no."""
    return text.strip().lower() == "y"


# ── Prompting capability ──────────────────────────────────────────────


class Prompter(ABC):
    @abstractmethod
    def ask(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Ask *prompt* until *parser* accepts the answer."""


class ConsolePrompter(Prompter):
    """Prompter over text streams (stdin / stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def ask(self, prompt: str, parser: Callable[[str], T]) -> T:
        while True:
            print(prompt, file=self.stdout, flush=True)
            line = self.stdin.readline()
            if not line:
                raise EOFError("input closed while waiting for an answer")
            try:
                return parser(line)
            except InputParseError as e:
                logger.debug("Rejected input for %r: %s", prompt, e)


# ── Session ───────────────────────────────────────────────────────────


class OrderSession:
    """Asks the questions of one order cycle."""

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def collect_customers(self) -> list[NamedPoint]:
        customers: list[NamedPoint] = []
        count = self.prompter.ask("How many customers?", parse_count)
        for i in range(1, count + 1):
            name = self.prompter.ask(f"Customer-{i} name please?", parse_name)
            lat = self.prompter.ask(
                f"Hi! {name}, your geo lat for food please?", parse_latitude
            )
            lng = self.prompter.ask(
                "and your geo lng for food please?", parse_longitude
            )
            customers.append(NamedPoint(name, GeoPoint(lat, lng)))
        logger.info("Collected %d customer(s)", len(customers))
        return customers

    def ask_valet_name(self) -> str:
        return self.prompter.ask("Valet, your delivery name please?", parse_name)

    def ask_repeat(self) -> bool:
        return self.prompter.ask("Take orders again? (y/n)", parse_yes_no)
