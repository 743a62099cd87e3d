import asyncio

import pytest

from Category import Category
from Connectivity import ConnectivityResult, ManualConnectivity
from ConversionEngine import ConversionEngine
from ReachabilityTracker import ReachabilityTracker
from Unit import Unit
from UnitConverter import UnitConverter


class FakeRateClient:
    """
    Async stand-in for the rate client.

    `results` maps the amount string to the value returned (None by default).
    An `asyncio.Event` in `gates` for an amount holds that call open until set.
    """
    def __init__(self, results=None):
        self.results = results or {}
        self.gates = {}
        self.calls = []

    async def convert(self, route, amount, from_unit, to_unit):
        self.calls.append((route, amount, from_unit, to_unit))
        gate = self.gates.get(amount)
        if gate is not None:
            await gate.wait()
        return self.results.get(amount)


async def wait_for_calls(client, count):
    while len(client.calls) < count:
        await asyncio.sleep(0)


@pytest.fixture
def length():
    return Category("Length", [Unit("Meters", 1.0, base_unit=True), Unit("Feet", 3.28084), Unit("Inches", 39.3701)])


@pytest.fixture
def mass():
    return Category("Mass", [Unit("Kilogram", 1.0, base_unit=True), Unit("Pound", 2.20462)])


@pytest.fixture
def currency():
    return Category("Currency", [Unit("USD", 1.0), Unit("EUR", 1.0), Unit("GBP", 1.0)])


@pytest.fixture
def connectivity():
    return ManualConnectivity(ConnectivityResult.WIFI)


@pytest.fixture
def rate_client():
    return FakeRateClient()


@pytest.fixture
def make_converter(connectivity, rate_client):
    def _make(category):
        return UnitConverter(
            category,
            engine=ConversionEngine(rate_client),
            tracker=ReachabilityTracker(connectivity),
        )
    return _make
