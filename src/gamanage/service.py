"""Cached entrypoints for account summaries and column metadata.

Every API listing is memoized in a ResponseCache, so repeated calls for the same
account, property or view reuse the first response until the cache is cleared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .account_summaries import AccountSummaries
from .cache import ResponseCache, cache_key
from .client import ManagementClient
from .columns import populate_columns
from .config import ClientConfig
from .metadata import Metadata

ACCOUNT_SUMMARIES_KEY = "accountSummaries"
COLUMNS_KEY = "columns"


@dataclass(slots=True)
class AnalyticsManagement:
    """Account summaries and metadata over a shared response cache."""

    client: ManagementClient
    cache: ResponseCache = field(default_factory=ResponseCache)

    @classmethod
    def from_config(cls, config: ClientConfig) -> AnalyticsManagement:
        return cls(client=ManagementClient(config))

    def get_account_summaries(self, no_cache: bool = False) -> AccountSummaries:
        """Return the indexed account summaries, fetching them at most once.

        Args:
            no_cache: Drop any cached summaries and query the API again
        """
        if no_cache:
            self.cache.discard(ACCOUNT_SUMMARIES_KEY)
        return self.cache.get_or_fetch(
            ACCOUNT_SUMMARIES_KEY,
            lambda: AccountSummaries(self.client.list_account_summaries()),
        )

    def _columns(self) -> list[dict[str, Any]]:
        return self.cache.get_or_fetch(COLUMNS_KEY, self.client.list_columns)

    def get_metadata(self) -> Metadata:
        """Catalog over the unexpanded metadata columns."""
        return Metadata(self._columns())

    def get_authenticated_metadata(
        self,
        account_id: Any,
        property_id: Any,
        view_id: Any,
        is_premium: bool = False,
    ) -> Metadata:
        """Catalog with templates expanded for a specific view.

        Args:
            account_id: Account owning the property
            property_id: Property whose custom metrics/dimensions are used
            view_id: View whose goals are used
            is_premium: Use premium template bounds when available
        """
        columns = self._columns()
        custom_metrics = self.cache.get_or_fetch(
            cache_key("customMetrics", account_id, property_id),
            lambda: self.client.list_custom_metrics(account_id, property_id),
        )
        custom_dimensions = self.cache.get_or_fetch(
            cache_key("customDimensions", account_id, property_id),
            lambda: self.client.list_custom_dimensions(account_id, property_id),
        )
        goals = self.cache.get_or_fetch(
            cache_key("goals", account_id, property_id, view_id),
            lambda: self.client.list_goals(account_id, property_id, view_id),
        )
        return Metadata(
            populate_columns(columns, custom_metrics, custom_dimensions, goals, is_premium)
        )

    def clear_cache(self) -> None:
        self.cache.clear()
