"""
Order cycle runner
==================

One cycle: collect customers → ask the valet's name → resolve the valet's
location → rank → print the delivery sequence.  The loop repeats while the
operator answers ``y``; every cycle starts from an empty customer list.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol, Sequence, TextIO

from .domain.entities import GeoPoint, ProximityEntry
from .domain.errors import LocationResolutionError
from .domain.ranking import ProximityRanker
from .session import OrderSession

logger = logging.getLogger(__name__)


class Locator(Protocol):
    def locate(self) -> GeoPoint: ...


def render_sequence(
    valet_name: str, entries: Sequence[ProximityEntry], out: TextIO
) -> None:
    print(
        f"Congratulations! {valet_name} would deliver food order in this sequence:",
        file=out,
    )
    for entry in entries:
        print(f"-{entry.name}", file=out)


class OrderDesk:
    def __init__(
        self,
        session: OrderSession,
        locator: Locator,
        ranker: Optional[ProximityRanker] = None,
        out: Optional[TextIO] = None,
    ):
        self.session = session
        self.locator = locator
        self.ranker = ranker or ProximityRanker()
        self.out = out or sys.stdout

    def run_cycle(self) -> Optional[tuple[ProximityEntry, ...]]:
        """Run one order cycle.

        Returns the ranking, an empty tuple when no customers were entered,
        or ``None`` when the valet could not be located.
        """
        customers = self.session.collect_customers()
        if not customers:
            print("No customers to deliver to.", file=self.out)
            return ()

        valet_name = self.session.ask_valet_name()
        try:
            reference = self.locator.locate()
        except LocationResolutionError as e:
            logger.error("Could not locate valet %s: %s", valet_name, e)
            print(f"Could not locate {valet_name}: {e}", file=self.out)
            return None

        entries = self.ranker.rank(reference, customers)
        render_sequence(valet_name, entries, self.out)
        return entries

    def run(self) -> int:
        """Loop until the operator declines; return the number of cycles run."""
        cycles = 0
        while True:
            self.run_cycle()
            cycles += 1
            if not self.session.ask_repeat():
                break
        logger.info("Order desk closed after %d cycle(s)", cycles)
        return cycles
