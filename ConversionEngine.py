"""
Conversion engine.

`ConversionEngine.convert` decides how a `ConversionRequest` is answered:

1. Remote-backed category (currency):
   - reachability problem -> `NETWORK_UNREACHABLE`, the rate client is not called;
   - otherwise the rate client is asked; no value -> `REMOTE_UNAVAILABLE`,
     a value -> formatted success.
2. Any other category: `value * (to.conversion / from.conversion)`, formatted.

The engine holds no state between calls. Reachability is passed in by the
caller, which reads it from its `ReachabilityTracker`.
"""

import asyncio
import inspect

from ConversionResult import ConversionResult, ErrorKind
from CurrencyConverter import CurrencyConverter
from NumberFormatter import format_conversion


class ConversionEngine:
    """
    Attributes
    ----------
    currency_converter : object
        Rate client exposing `convert(route, amount, from_unit, to_unit)`
        returning a number or None. Plain callables run in a worker thread;
        coroutine functions are awaited directly.
    """
    def __init__(self, currency_converter=None):
        self.currency_converter = currency_converter or CurrencyConverter()


    async def convert(self, request, connectivity_problem) -> ConversionResult:
        category = request.category

        if category.is_remote_backed:
            if connectivity_problem:
                return ConversionResult.failure(ErrorKind.NETWORK_UNREACHABLE)

            conversion = await self._remote_convert(
                category.route,
                str(request.input_value),
                request.from_unit.name,
                request.to_unit.name,
            )
            if conversion is None:
                return ConversionResult.failure(ErrorKind.REMOTE_UNAVAILABLE)
            return ConversionResult.success(format_conversion(conversion))

        conversion = self.convert_by_ratio(request.input_value, request.from_unit, request.to_unit)
        return ConversionResult.success(format_conversion(conversion))


    @staticmethod
    def convert_by_ratio(value, from_unit, to_unit):
        return value * (to_unit.conversion / from_unit.conversion)


    async def _remote_convert(self, route, amount, from_name, to_name):
        convert = self.currency_converter.convert
        if inspect.iscoroutinefunction(convert):
            return await convert(route, amount, from_name, to_name)
        # requests blocks; keep it off the event loop.
        return await asyncio.to_thread(convert, route, amount, from_name, to_name)
