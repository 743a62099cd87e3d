"""
Tests for the reachability tracker.
"""

import asyncio

import pytest

from Connectivity import ConnectivityError, ConnectivityResult, ManualConnectivity
from ReachabilityTracker import ReachabilityTracker


class GatedConnectivity(ManualConnectivity):
    """Initial query blocks until `release` is set."""
    def __init__(self, result):
        super().__init__(result)
        self.release = asyncio.Event()
        self.queried = asyncio.Event()

    async def check_connectivity(self):
        self.queried.set()
        await self.release.wait()
        return self.result


@pytest.mark.asyncio
@pytest.mark.parametrize("result", [ConnectivityResult.WIFI, ConnectivityResult.MOBILE])
async def test_start_connected(result):
    tracker = ReachabilityTracker(ManualConnectivity(result))
    await tracker.start()

    assert tracker.state == result
    assert tracker.connectivity_problem is False


@pytest.mark.asyncio
async def test_start_offline():
    tracker = ReachabilityTracker(ManualConnectivity(ConnectivityResult.NONE))
    await tracker.start()

    assert tracker.state == ConnectivityResult.NONE
    assert tracker.connectivity_problem is True


@pytest.mark.asyncio
async def test_start_query_failure_stays_unknown(capsys):
    tracker = ReachabilityTracker(ManualConnectivity(failure=ConnectivityError("platform error")))
    await tracker.start()

    assert tracker.state == ConnectivityResult.UNKNOWN
    assert tracker.connectivity_problem is True
    assert "Error checking connectivity: platform error" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_change_events(connectivity):
    tracker = ReachabilityTracker(connectivity)
    await tracker.start()

    connectivity.set_connectivity(ConnectivityResult.NONE)
    assert (tracker.state, tracker.connectivity_problem) == (ConnectivityResult.NONE, True)

    connectivity.set_connectivity(ConnectivityResult.MOBILE)
    assert (tracker.state, tracker.connectivity_problem) == (ConnectivityResult.MOBILE, False)

    connectivity.set_connectivity(ConnectivityResult.UNKNOWN)
    assert (tracker.state, tracker.connectivity_problem) == (ConnectivityResult.MOBILE, True)

    connectivity.set_connectivity(ConnectivityResult.WIFI)
    assert (tracker.state, tracker.connectivity_problem) == (ConnectivityResult.WIFI, False)


@pytest.mark.asyncio
async def test_listeners_notified(connectivity):
    tracker = ReachabilityTracker(connectivity)
    seen = []
    tracker.add_listener(lambda t: seen.append(t.connectivity_problem))

    await tracker.start()
    connectivity.set_connectivity(ConnectivityResult.NONE)

    assert seen == [False, True]


@pytest.mark.asyncio
async def test_close_unsubscribes_once(connectivity):
    tracker = ReachabilityTracker(connectivity)
    await tracker.start()
    assert connectivity.listener_count == 1

    tracker.close()
    tracker.close()

    assert connectivity.listener_count == 0
    connectivity.set_connectivity(ConnectivityResult.NONE)
    assert tracker.connectivity_problem is False


@pytest.mark.asyncio
async def test_start_twice_subscribes_once(connectivity):
    tracker = ReachabilityTracker(connectivity)
    await tracker.start()
    await tracker.start()
    assert connectivity.listener_count == 1


@pytest.mark.asyncio
async def test_query_result_dropped_after_close():
    monitor = GatedConnectivity(ConnectivityResult.NONE)
    tracker = ReachabilityTracker(monitor)

    task = asyncio.create_task(tracker.start())
    await monitor.queried.wait()
    tracker.close()
    monitor.release.set()
    await task

    assert tracker.state == ConnectivityResult.UNKNOWN
    assert tracker.connectivity_problem is False


@pytest.mark.asyncio
async def test_change_event_beats_in_flight_query():
    monitor = GatedConnectivity(ConnectivityResult.NONE)
    tracker = ReachabilityTracker(monitor)

    task = asyncio.create_task(tracker.start())
    await monitor.queried.wait()
    # Arrives while the initial query is still pending.
    monitor.emit(ConnectivityResult.WIFI)
    monitor.release.set()
    await task

    assert tracker.state == ConnectivityResult.WIFI
    assert tracker.connectivity_problem is False
