"""
gamanage

Indexes Google Analytics account summaries and expands metadata column templates.
"""

__version__ = "0.1.0"

from .account_summaries import AccountSummaries
from .cache import ResponseCache
from .client import ManagementClient
from .columns import populate_columns
from .config import ClientConfig, load_config
from .exceptions import (
    AmbiguousSelectorError,
    GAManageError,
    ManagementApiError,
    NoAccountsError,
)
from .metadata import Metadata
from .service import AnalyticsManagement

__all__ = [
    "__version__",
    "AccountSummaries",
    "Metadata",
    "populate_columns",
    "AnalyticsManagement",
    "ManagementClient",
    "ResponseCache",
    "ClientConfig",
    "load_config",
    "GAManageError",
    "AmbiguousSelectorError",
    "ManagementApiError",
    "NoAccountsError",
]
