"""Tests for the order cycle runner."""

import io

from tests.fakes import FakeLocator, scripted_prompter
from valet_delivery.domain.entities import GeoPoint
from valet_delivery.orders import OrderDesk
from valet_delivery.session import OrderSession

EQUATOR_ORDER = ["3", "A", "0", "1", "B", "0", "0.5", "C", "0", "1", "Vale"]


def _desk(*lines, locator=None):
    out = io.StringIO()
    desk = OrderDesk(
        OrderSession(scripted_prompter(*lines)),
        locator or FakeLocator(GeoPoint(0.0, 0.0)),
        out=out,
    )
    return desk, out


class TestOrderCycle:
    def test_prints_delivery_sequence(self):
        desk, out = _desk(*EQUATOR_ORDER)
        entries = desk.run_cycle()

        assert [e.name for e in entries] == ["B", "A", "C"]
        assert out.getvalue() == (
            "Congratulations! Vale would deliver food order in this sequence:\n"
            "-B\n-A\n-C\n"
        )

    def test_empty_order_skips_lookup(self):
        locator = FakeLocator(GeoPoint(0.0, 0.0))
        desk, out = _desk("0", locator=locator)

        assert desk.run_cycle() == ()
        assert locator.calls == 0
        assert "No customers" in out.getvalue()

    def test_location_failure_ends_cycle(self):
        desk, out = _desk(*EQUATOR_ORDER, locator=FakeLocator(None))

        assert desk.run_cycle() is None
        assert "Could not locate Vale" in out.getvalue()
        assert "Congratulations" not in out.getvalue()


class TestOrderLoop:
    def test_single_cycle_when_declined(self):
        desk, _ = _desk(*EQUATOR_ORDER, "n")
        assert desk.run() == 1

    def test_repeats_with_fresh_customer_list(self):
        desk, out = _desk(
            *EQUATOR_ORDER, "y",
            "1", "D", "0", "2", "Vale", "n",
        )
        assert desk.run() == 2
        second = out.getvalue().split("Congratulations!")[2]
        assert second.splitlines()[1:] == ["-D"]

    def test_failed_lookup_still_asks_to_repeat(self):
        desk, out = _desk(*EQUATOR_ORDER, "n", locator=FakeLocator(None))
        assert desk.run() == 1
