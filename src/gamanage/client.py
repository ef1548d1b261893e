"""
Management API Client

Thin requests-based transport over the Google Analytics Management and Metadata
APIs (v3). Returns plain decoded items; caching lives in the service layer.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import ClientConfig
from .exceptions import ManagementApiError, NoAccountsError
from .models import ListResponse, Record

logger = logging.getLogger(__name__)


class ManagementClient:
    """Client for the list endpoints used by gamanage"""

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        if config.access_token:
            self.session.headers["Authorization"] = f"Bearer {config.access_token}"

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET a JSON resource

        Args:
            path: Path relative to the API root
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            ManagementApiError: On transport failure, HTTP error status or an
                error object in the response body
        """
        query = dict(params or {})
        if self.config.quota_user:
            query["quotaUser"] = self.config.quota_user

        url = self._url(path)
        logger.debug("GET %s %s", url, query)
        try:
            response = self.session.get(url, params=query, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            raise ManagementApiError(f"Request to {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        error = body.get("error") if isinstance(body, dict) else None
        if response.status_code >= 400 or error:
            message = error.get("message") if isinstance(error, dict) else None
            raise ManagementApiError(
                message or response.reason or "Unknown API error",
                status_code=response.status_code,
            )
        return body

    def _list_items(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Record]:
        page = ListResponse.model_validate(self.request(path, params))
        return page.items or []

    def list_account_summaries(self) -> List[Record]:
        """
        Fetch every account summary, following pagination

        Returns:
            Accounts from all pages, in page order

        Raises:
            NoAccountsError: If a page comes back without items
        """
        summaries: List[Record] = []
        start_index = 1
        while True:
            params: Dict[str, Any] = {"start-index": start_index}
            if self.config.max_results:
                params["max-results"] = self.config.max_results

            page = ListResponse.model_validate(
                self.request("management/accountSummaries", params)
            )
            if not page.items:
                raise NoAccountsError()
            summaries.extend(page.items)

            if not page.has_next_page():
                break
            start_index = page.next_start_index()

        logger.info("Fetched %d account summaries", len(summaries))
        return summaries

    def list_columns(self, report_type: str = "ga") -> List[Record]:
        """Fetch metadata.columns.list"""
        return self._list_items(f"metadata/{report_type}/columns", {"reportType": report_type})

    def list_custom_metrics(self, account_id: Any, property_id: Any) -> List[Record]:
        return self._list_items(
            f"management/accounts/{account_id}/webproperties/{property_id}/customMetrics"
        )

    def list_custom_dimensions(self, account_id: Any, property_id: Any) -> List[Record]:
        return self._list_items(
            f"management/accounts/{account_id}/webproperties/{property_id}/customDimensions"
        )

    def list_goals(self, account_id: Any, property_id: Any, view_id: Any) -> List[Record]:
        return self._list_items(
            f"management/accounts/{account_id}/webproperties/{property_id}"
            f"/profiles/{view_id}/goals"
        )
