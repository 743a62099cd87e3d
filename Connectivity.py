"""
Network reachability monitors.

A monitor answers two questions for the converter:
- `check_connectivity()`: what is the link state right now (awaitable)?
- `subscribe(listener)`: call `listener(result)` whenever the state changes,
  until the returned `Subscription` is cancelled.

Two monitors are provided:
- `ManualConnectivity` is driven by `set_connectivity()`. It backs the tests
  and any host that learns about the network from somewhere else.
- `HttpConnectivity` probes a URL with `requests` and, when `poll()` is
  running, pushes changes to its subscribers.

Listeners are plain callables run on the event loop thread, so they must not
block.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from enum import Enum

import requests
from dotenv import load_dotenv

load_dotenv()
CONNECTIVITY_PROBE_URL = os.getenv("CONNECTIVITY_PROBE_URL", os.getenv("RATE_API_URL", "https://api.frankfurter.app"))
CONNECTIVITY_POLL_INTERVAL = float(os.getenv("CONNECTIVITY_POLL_INTERVAL", "5"))


class ConnectivityResult(Enum):
    WIFI = "wifi"
    MOBILE = "mobile"
    NONE = "none"
    UNKNOWN = "unknown"


class ConnectivityError(Exception):
    """Raised by a monitor when the platform cannot report the link state."""


class Subscription:
    """
    Handle returned by `Connectivity.subscribe`. Cancelling it twice is harmless.
    """
    def __init__(self, listeners, listener):
        self._listeners = listeners
        self._listener = listener
        self.cancelled = False


    def cancel(self):
        if self.cancelled:
            return
        self.cancelled = True
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)


class Connectivity(ABC):
    """
    Base monitor: keeps the listener list and fans results out to it.
    """
    def __init__(self):
        self._listeners = []


    @abstractmethod
    async def check_connectivity(self):
        """Return the current `ConnectivityResult`, or raise `ConnectivityError`."""


    def subscribe(self, listener):
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)


    @property
    def listener_count(self):
        return len(self._listeners)


    def emit(self, result):
        # Copy so a listener may cancel its own subscription while being called.
        for listener in list(self._listeners):
            listener(result)


class ManualConnectivity(Connectivity):
    """
    Monitor whose state is set by hand.

    Parameters
    ----------
    result : ConnectivityResult
        State reported by `check_connectivity()` until changed.
    failure : Exception | None
        When set, `check_connectivity()` raises it instead of answering.
    """
    def __init__(self, result=ConnectivityResult.WIFI, failure=None):
        super().__init__()
        self.result = result
        self.failure = failure


    async def check_connectivity(self):
        if self.failure is not None:
            raise self.failure
        return self.result


    def set_connectivity(self, result):
        """
        Record `result` and notify every subscriber, even if the state did not change.
        """
        self.result = result
        self.emit(result)


class HttpConnectivity(Connectivity):
    """
    Monitor that decides reachability by sending a HEAD request to `probe_url`.

    A host-level probe cannot tell the link type apart, so any reachable link
    reports `WIFI` and a failed probe reports `NONE`.
    """
    def __init__(self, probe_url=None, interval=None, timeout=5.0):
        super().__init__()
        self.probe_url = probe_url or CONNECTIVITY_PROBE_URL
        self.interval = CONNECTIVITY_POLL_INTERVAL if interval is None else interval
        self.timeout = timeout
        self.last_result = None


    def probe(self):
        """
        Blocking probe. Any HTTP answer, even an error status, proves the network is up.
        """
        try:
            requests.head(self.probe_url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            print(f"Connectivity probe to {self.probe_url} failed: {e}")
            return ConnectivityResult.NONE
        return ConnectivityResult.WIFI


    async def check_connectivity(self):
        return await asyncio.to_thread(self.probe)


    async def poll(self):
        """
        Probe every `interval` seconds and emit whenever the result changes.

        Runs until cancelled; start it with `asyncio.create_task(monitor.poll())`.
        """
        while True:
            result = await self.check_connectivity()
            if result != self.last_result:
                self.last_result = result
                self.emit(result)
            await asyncio.sleep(self.interval)
