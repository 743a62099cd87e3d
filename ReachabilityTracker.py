"""
Reachability tracking for the converter.

`ReachabilityTracker` is the single owner of the current network
classification. It subscribes to a `Connectivity` monitor, asks it once for
the current state, and from then on applies every change event:

    WIFI / MOBILE -> state = result, connectivity_problem = False
    NONE          -> state = NONE,   connectivity_problem = True
    anything else -> connectivity_problem = True (state left as is)

The conversion engine reads `connectivity_problem` only; `state` is
informational. Nothing else writes either attribute.

Lifecycle
---------
- `start()` subscribes and runs the initial query. A `ConnectivityError`
  from the query is printed and leaves the state at `UNKNOWN`.
- `close()` cancels the subscription exactly once. A query that finishes
  after `close()` is dropped, as is one overtaken by a change event.
"""

from Connectivity import ConnectivityError, ConnectivityResult


class ReachabilityTracker:
    def __init__(self, connectivity):
        self.connectivity = connectivity
        self.state = ConnectivityResult.UNKNOWN
        self.connectivity_problem = False
        self.closed = False
        self._subscription = None
        self._listeners = []
        self._events_seen = 0


    async def start(self):
        """
        Subscribe to change events, then apply the result of the initial query.
        """
        if self.closed or self._subscription is not None:
            return
        self._subscription = self.connectivity.subscribe(self._on_connectivity_changed)

        events_before = self._events_seen
        result = None
        try:
            result = await self.connectivity.check_connectivity()
        except ConnectivityError as e:
            print(f"Error checking connectivity: {e}")

        # The tracker went away, or a newer change event already arrived.
        if self.closed or self._events_seen != events_before:
            return
        self.update(result)


    def _on_connectivity_changed(self, result):
        self._events_seen += 1
        self.update(result)


    def update(self, result):
        """
        Apply one reachability result and notify listeners.

        Parameters
        ----------
        result : ConnectivityResult | None
            None stands for "could not be determined" and counts as a problem.
        """
        if self.closed:
            return

        match result:
            case ConnectivityResult.WIFI | ConnectivityResult.MOBILE:
                self.state = result
                self.connectivity_problem = False
            case ConnectivityResult.NONE:
                self.state = result
                self.connectivity_problem = True
            case _:
                self.connectivity_problem = True

        for listener in list(self._listeners):
            listener(self)


    def add_listener(self, listener):
        """Call `listener(tracker)` after every applied update."""
        self._listeners.append(listener)


    def remove_listener(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)


    def close(self):
        if self.closed:
            return
        self.closed = True
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self._listeners.clear()
