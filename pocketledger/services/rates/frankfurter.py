"""
Exchange Rates from the Frankfurter API

Frankfurter publishes ECB reference rates with EUR as the base:

    GET https://api.frankfurter.app/latest
    {"amount": 1.0, "base": "EUR", "date": "...", "rates": {"USD": 1.08, ...}}

Codes we don't support are ignored. EUR itself is never in the response
and is pinned to 1.0 by ExchangeRates.

Network errors are retried with exponential back-off. A malformed or
incomplete payload is not retried: asking again won't fix it.
"""

import json
from typing import Any, Callable, Optional
from urllib.request import Request, urlopen

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pocketledger.config import RatesSettings, get_settings
from pocketledger.models.currency import ExchangeRates
from pocketledger.services.rates.interface import ExchangeRateProvider, RateFetchError


class FrankfurterRateProvider(ExchangeRateProvider):
    """Fetches the latest EUR-based rates over HTTP."""

    def __init__(
        self,
        settings: Optional[RatesSettings] = None,
        opener: Optional[Callable[..., Any]] = None,
    ):
        """
        Args:
            settings: Rate service settings. Defaults to the global settings.
            opener: Replacement for urllib's urlopen (tests inject a fake).
        """
        self._settings = settings or get_settings().rates
        self._opener = opener or urlopen

    @property
    def source(self) -> str:
        return self._settings.url

    def _request(self) -> dict:
        request = Request(
            self._settings.url,
            headers={"Accept": "application/json", "User-Agent": "pocketledger/1.0"},
        )
        with self._opener(request, timeout=self._settings.timeout_seconds) as response:
            return json.loads(response.read().decode("utf-8"))

    def _parse(self, payload: Any) -> ExchangeRates:
        if not isinstance(payload, dict) or not isinstance(payload.get("rates"), dict):
            raise RateFetchError("Rate service response has no 'rates' object")

        raw = {
            code: value
            for code, value in payload["rates"].items()
            if isinstance(value, (int, float)) and not isinstance(value, bool)
        }
        try:
            return ExchangeRates.from_mapping(raw)
        except ValueError as e:
            raise RateFetchError(f"Rate service returned an unusable table: {e}") from e

    def fetch_rates(self) -> ExchangeRates:
        retrying = Retrying(
            stop=stop_after_attempt(self._settings.max_attempts),
            wait=wait_exponential(
                multiplier=1,
                min=self._settings.backoff_min_seconds,
                max=self._settings.backoff_max_seconds,
            ),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )

        try:
            payload = retrying(self._request)
        except OSError as e:  # URLError, HTTPError and timeouts
            raise RateFetchError(f"Failed to reach rate service {self.source}: {e}") from e
        except ValueError as e:
            raise RateFetchError(f"Rate service returned invalid JSON: {e}") from e

        return self._parse(payload)
