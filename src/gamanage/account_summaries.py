"""
Account Summaries Index

Flattens the account → property → view listing returned by
management.accountSummaries.list into per-level ID indexes.

Every property and view is indexed together with references to its ancestors, so
any node (or its parents) can be looked up by ID without walking the tree. The index
holds references to the caller's records, never copies.

Both vocabularies are supported: "webProperties"/"profiles" as returned by the API
and "properties"/"views". Each node that owns children gets both keys pointing at the
same list.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import AmbiguousSelectorError
from .models import IndexEntry, Record

logger = logging.getLogger(__name__)

# (canonical key, alias key) pairs for each container level
PROPERTY_KEYS = ("webProperties", "properties")
VIEW_KEYS = ("profiles", "views")


def _alias_children(node: Record, keys: tuple[str, str]) -> List[Record]:
    """
    Make both child-list keys of a node refer to the same list

    Args:
        node: Account or property record
        keys: (canonical, alias) key names

    Returns:
        The child list, or an empty list when the node owns no children
    """
    canonical, alias = keys
    children = node.get(canonical)
    if children is None:
        children = node.get(alias)
    if children is None:
        return []

    node[canonical] = children
    node[alias] = children
    return children


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


class AccountSummaries:
    """ID index over an account summaries listing"""

    def __init__(self, summaries: Sequence[Record]):
        self._summaries = summaries
        self._accounts_by_id: Dict[Any, IndexEntry] = {}
        self._properties_by_id: Dict[Any, IndexEntry] = {}
        self._views_by_id: Dict[Any, IndexEntry] = {}
        self._build()

    def _build(self) -> None:
        for account in self._summaries:
            self._accounts_by_id[account["id"]] = IndexEntry(node=account)

            for prop in _alias_children(account, PROPERTY_KEYS):
                self._properties_by_id[prop["id"]] = IndexEntry(node=prop, parent=account)

                for view in _alias_children(prop, VIEW_KEYS):
                    self._views_by_id[view["id"]] = IndexEntry(
                        node=view, parent=prop, grandparent=account
                    )

        logger.debug(
            "Indexed %d accounts, %d properties, %d views",
            len(self._accounts_by_id),
            len(self._properties_by_id),
            len(self._views_by_id),
        )

    def all(self) -> Sequence[Record]:
        """Return the summaries exactly as passed in"""
        return self._summaries

    def get(
        self,
        *,
        account_id: Any = None,
        property_id: Any = None,
        web_property_id: Any = None,
        view_id: Any = None,
        profile_id: Any = None,
    ) -> Optional[Record]:
        """
        Get an account, property or view by a single selector

        Views are checked first, then properties, then accounts.

        Args:
            account_id: Account ID
            property_id: Property ID (same as web_property_id)
            web_property_id: Web property ID
            view_id: View ID (same as profile_id)
            profile_id: Profile ID

        Returns:
            The matching record, or None

        Raises:
            AmbiguousSelectorError: If more than one selector is given
        """
        selector = {
            "account_id": account_id,
            "property_id": property_id,
            "web_property_id": web_property_id,
            "view_id": view_id,
            "profile_id": profile_id,
        }
        given = [key for key, value in selector.items() if _is_set(value)]
        if len(given) > 1:
            raise AmbiguousSelectorError(given)

        view_key = profile_id if _is_set(profile_id) else view_id
        property_key = web_property_id if _is_set(web_property_id) else property_id

        found = None
        if _is_set(view_key):
            found = self.get_view(view_key)
        if found is None and _is_set(property_key):
            found = self.get_property(property_key)
        if found is None and _is_set(account_id):
            found = self.get_account(account_id)
        return found

    def get_account(self, account_id: Any) -> Optional[Record]:
        entry = self._accounts_by_id.get(account_id)
        return entry.node if entry else None

    def get_property(self, property_id: Any) -> Optional[Record]:
        entry = self._properties_by_id.get(property_id)
        return entry.node if entry else None

    def get_view(self, view_id: Any) -> Optional[Record]:
        entry = self._views_by_id.get(view_id)
        return entry.node if entry else None

    def get_account_by_view_id(self, view_id: Any) -> Optional[Record]:
        """Get the account that owns the given view"""
        entry = self._views_by_id.get(view_id)
        return entry.grandparent if entry else None

    def get_property_by_view_id(self, view_id: Any) -> Optional[Record]:
        """Get the property that owns the given view"""
        entry = self._views_by_id.get(view_id)
        return entry.parent if entry else None

    def get_account_by_property_id(self, property_id: Any) -> Optional[Record]:
        """Get the account that owns the given property"""
        entry = self._properties_by_id.get(property_id)
        return entry.parent if entry else None

    # Management API vocabulary
    get_web_property = get_property
    get_profile = get_view
    get_account_by_profile_id = get_account_by_view_id
    get_web_property_by_profile_id = get_property_by_view_id
    get_account_by_web_property_id = get_account_by_property_id
