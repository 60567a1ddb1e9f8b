"""
Exchange Rate Service

Fetches the rate table once and hands the same immutable table to every
caller afterwards.

DESIGN DECISION: The first fetch is done at startup (create_app_components
calls get_rates()), so a dead rate service stops the application right away
instead of failing on some later conversion.
"""

import threading
from typing import Optional

from pocketledger.audit import AuditLogger
from pocketledger.models.currency import ExchangeRates
from pocketledger.services.rates.interface import ExchangeRateProvider, RateFetchError


class ExchangeRateService:
    """Single-assignment holder for the process-wide rate table."""

    def __init__(
        self,
        provider: ExchangeRateProvider,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._provider = provider
        self._audit_logger = audit_logger
        self._rates: Optional[ExchangeRates] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._rates is not None

    def get_rates(self) -> ExchangeRates:
        """
        Return the rate table, fetching it on first use.

        Raises:
            RateFetchError: If the first fetch fails
        """
        if self._rates is not None:
            return self._rates

        with self._lock:
            if self._rates is None:
                try:
                    rates = self._provider.fetch_rates()
                except RateFetchError as e:
                    if self._audit_logger:
                        self._audit_logger.log_rate_fetch_failed(
                            source=self._provider.source,
                            error_message=str(e),
                        )
                    raise

                if self._audit_logger:
                    self._audit_logger.log_rates_fetched(
                        source=self._provider.source,
                        currencies=sorted(c.value for c in rates.rates),
                    )
                self._rates = rates

        return self._rates
