"""
Selection state machine for the unit converter panel.

`UnitConverter` owns the panel's `SelectionState` and is its only writer.
The presentation layer forwards four events (typed text, a new "from" unit,
a new "to" unit, a new category) and renders every snapshot published to
its subscribers.

Event handling
--------------
- Input text:
    * empty / whitespace -> output cleared, input valid, nothing converted;
    * not a finite number -> input marked invalid, previous output kept;
    * a number -> stored and converted.
- Unit change: unknown names are printed and ignored; otherwise the unit
  is swapped and, if a number was entered, converted again.
- Category change: selection reset to the category's first two units, input,
  output and error cleared.

Ordering
--------
Every input event, and every category or unit change that is applied,
bumps a generation counter. A conversion whose generation is no longer
current when it finishes is dropped, so a slow rate lookup can never
overwrite the answer to a newer event. Nothing is published after `close()`.

Usage
-----
    async with UnitConverter(category) as converter:
        converter.subscribe(render)
        await converter.handle(InputChanged("10"))
"""

import math

from Connectivity import HttpConnectivity, Subscription
from ConversionEngine import ConversionEngine
from ConversionResult import ConversionRequest, ErrorKind
from ConverterEvent import CategoryChanged, FromUnitChanged, InputChanged, ToUnitChanged
from ReachabilityTracker import ReachabilityTracker
from SelectionState import SelectionState


class UnitConverter:
    """
    Attributes
    ----------
    engine : ConversionEngine
    tracker : ReachabilityTracker
        Read for `connectivity_problem` before every conversion.
    state : SelectionState
        Latest published snapshot.
    closed : bool
    """
    def __init__(self, category, engine=None, tracker=None):
        self.engine = engine or ConversionEngine()
        self.tracker = tracker or ReachabilityTracker(HttpConnectivity())
        self.state = SelectionState.for_category(category, self.tracker.connectivity_problem)
        self.closed = False
        self._generation = 0
        self._listeners = []
        self.tracker.add_listener(self._on_reachability_changed)


    async def __aenter__(self):
        await self.start()
        return self


    async def __aexit__(self, exc_type, exc, tb):
        self.close()


    async def start(self):
        await self.tracker.start()


    def close(self):
        if self.closed:
            return
        self.closed = True
        self.tracker.remove_listener(self._on_reachability_changed)
        self.tracker.close()
        self._listeners.clear()


    def subscribe(self, listener):
        """Call `listener(state)` with every new snapshot."""
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)


    async def handle(self, event):
        match event:
            case InputChanged(text=text):
                await self.on_input_changed(text)
            case FromUnitChanged(unit_name=unit_name):
                await self.on_from_unit_changed(unit_name)
            case ToUnitChanged(unit_name=unit_name):
                await self.on_to_unit_changed(unit_name)
            case CategoryChanged(category=category):
                await self.on_category_changed(category)
            case _:
                raise TypeError(f"Unsupported converter event: {event!r}")


    async def run(self, queue):
        """
        Handle events from `queue` one at a time, in order, until a None arrives.
        """
        while True:
            event = await queue.get()
            try:
                if event is None:
                    return
                await self.handle(event)
            finally:
                queue.task_done()


    async def on_input_changed(self, text):
        if self.closed:
            return

        # Any input event supersedes a conversion still in flight.
        self._generation += 1

        if text is None or not text.strip():
            self._publish(self.state.copy_with(input_text="", input_value=None, input_is_valid=True, output_text=""))
            return

        # A numeric keyboard still lets through text such as '5..0' or '6 -3'.
        try:
            input_value = float(text)
        except ValueError as e:
            print(f"Error: {e}")
            self._publish(self.state.copy_with(input_text=text, input_is_valid=False))
            return
        if not math.isfinite(input_value):
            print(f"Error: non-finite input {text!r}")
            self._publish(self.state.copy_with(input_text=text, input_is_valid=False))
            return

        self._publish(self.state.copy_with(input_text=text, input_value=input_value, input_is_valid=True))
        await self._update_conversion()


    async def on_from_unit_changed(self, unit_name):
        await self._change_unit("from_unit", unit_name)


    async def on_to_unit_changed(self, unit_name):
        await self._change_unit("to_unit", unit_name)


    async def on_category_changed(self, category):
        if self.closed or category == self.state.category:
            return
        self._generation += 1
        self._publish(SelectionState.for_category(category, self.tracker.connectivity_problem))


    async def _change_unit(self, field, unit_name):
        if self.closed:
            return

        unit = self.state.category.find_unit(unit_name)
        if unit is None:
            print(f"Error: no unit named {unit_name!r} in {self.state.category.name}, keeping current selection")
            return

        self._generation += 1
        self._publish(self.state.copy_with(**{field: unit}))
        if self.state.input_value is not None:
            await self._update_conversion()


    async def _update_conversion(self):
        self._generation += 1
        generation = self._generation
        state = self.state
        request = ConversionRequest(state.category, state.from_unit, state.to_unit, state.input_value)

        result = await self.engine.convert(request, self.tracker.connectivity_problem)

        # Superseded by a newer event, or the session is gone.
        if self.closed or generation != self._generation:
            return

        if result.is_success:
            self._publish(self.state.copy_with(output_text=result.formatted_value, last_error_kind=None))
        else:
            self._publish(self.state.copy_with(last_error_kind=result.error_kind))


    def _on_reachability_changed(self, tracker):
        changes = {"connectivity_problem": tracker.connectivity_problem}
        if not tracker.connectivity_problem and self.state.last_error_kind == ErrorKind.NETWORK_UNREACHABLE:
            changes["last_error_kind"] = None
        self._publish(self.state.copy_with(**changes))


    def _publish(self, state):
        if self.closed:
            return
        self.state = state
        for listener in list(self._listeners):
            listener(state)
