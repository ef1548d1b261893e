"""
Exceptions raised by gamanage
"""

from typing import Optional, Sequence


class GAManageError(Exception):
    """Base exception for all gamanage errors"""


class AmbiguousSelectorError(GAManageError):
    """Raised when a lookup selector names more than one entity"""

    def __init__(self, keys: Sequence[str]):
        self.keys = list(keys)
        super().__init__(
            "get() only accepts a single selector: either account_id, property_id, "
            f"web_property_id, view_id or profile_id (got: {', '.join(self.keys)})"
        )


class ManagementApiError(GAManageError):
    """Raised when the Management or Metadata API request fails"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            message = f"[{status_code}] {message}"
        super().__init__(message)


class NoAccountsError(ManagementApiError):
    """Raised when the account summaries listing contains no accounts"""

    def __init__(self):
        super().__init__(
            "You do not have any Google Analytics accounts. "
            "Go to http://google.com/analytics to sign up."
        )
