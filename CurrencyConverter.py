"""
Exchange-rate client built on the Frankfurter API.

Overview
--------
`CurrencyConverter.convert` converts an `amount` between two currencies by
calling the rate service route, e.g. for the "latest" route:

    {RATE_API_URL}/latest?amount={amount}&from={from_unit}&to={to_unit}

and `get_units` lists the currency codes the service knows:

    {RATE_API_URL}/currencies

Key points
----------
- If `from_unit == to_unit`, `convert` returns `amount` as a float without
  making a network call.
- Every failure (transport error, timeout, non-200 status, malformed JSON,
  missing rate) is printed and reported as `None`. Callers see no other error
  signal.

Configuration
-------------
- RATE_API_URL      (default https://api.frankfurter.app)
- RATE_API_TIMEOUT  (seconds, default 10)
Both may be set in a local `.env` file; constructor arguments win.

Caveats
-------
- Results are not cached; each conversion is one request.
- The service expects ISO 4217 currency codes (e.g., "USD", "EUR", "GBP").
"""

import os
from typing import List, Optional

import requests
from dotenv import load_dotenv

from Unit import Unit

load_dotenv()
RATE_API_URL = os.getenv("RATE_API_URL", "https://api.frankfurter.app")
RATE_API_TIMEOUT = float(os.getenv("RATE_API_TIMEOUT", "10"))


class CurrencyConverter:
    """
    Convert amounts between currencies using the Frankfurter API.

    Attributes
    ----------
    base_url : str
        Service root, without a trailing slash.
    timeout : float
        Per-request timeout in seconds.
    session : requests.Session
        Shared HTTP session; injectable for tests.
    """
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or RATE_API_URL).rstrip("/")
        self.timeout = RATE_API_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()


    def convert(self, route, amount, from_unit, to_unit) -> Optional[float]:
        """
        Convert `amount` from `from_unit` into `to_unit`.

        Parameters
        ----------
        route : str
            Service route to query (e.g., "latest").
        amount : str
            The amount, passed through unchanged so no precision is lost.
        from_unit : str
        to_unit : str
            ISO 4217 currency codes.

        Returns
        -------
        float | None
            Converted amount, or None if the service gave no usable answer.
        """
        # Short-circuit identical currencies to avoid a network call.
        if from_unit == to_unit:
            return float(amount)

        response = self._get(route, {"amount": amount, "from": from_unit, "to": to_unit})
        if response is None:
            return None

        try:
            return float(response.json()["rates"][to_unit])
        except (ValueError, KeyError, TypeError) as e:
            print(f"Error: malformed conversion response from {route}: {e}")
            return None


    def get_units(self, route="currencies") -> Optional[List[Unit]]:
        """
        Fetch the currencies the service supports.

        Returns
        -------
        list[Unit] | None
            One unit per currency code, sorted by code, each with a conversion
            factor of 1.0 (rates are looked up per request, never by ratio).
            None if the list could not be fetched.
        """
        response = self._get(route)
        if response is None:
            return None

        try:
            codes = sorted(response.json().keys())
        except (ValueError, AttributeError) as e:
            print(f"Error: malformed unit list from {route}: {e}")
            return None
        return [Unit(code, 1.0) for code in codes]


    def _get(self, route, params=None):
        try:
            response = self.session.get(f"{self.base_url}/{route}", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            print(f"Error: request to {route} failed: {e}")
            return None

        if response.status_code != 200:
            print(f"Error: {response.status_code} - {response.text}")
            return None
        return response


if __name__ == "__main__":
    # Example usage; needs network access
    currency_converter = CurrencyConverter()
    print(currency_converter.convert("latest", "10", "USD", "GBP"))
    print(currency_converter.get_units())
