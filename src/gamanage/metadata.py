"""
Metadata Column Catalog

Wraps a list of metadata columns (raw or expanded) and exposes metric and dimension
views with optional filtering.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .models import Record

METRIC = "METRIC"
DIMENSION = "DIMENSION"

# Either {attribute: expected value} or predicate(attributes, column_id)
ColumnFilter = Union[Mapping[str, Any], Callable[[Record, str], bool]]


def apply_filter(columns: Sequence[Record], column_filter: ColumnFilter) -> List[Record]:
    """
    Return the columns passing a filter, in their original order

    Args:
        columns: Metadata columns
        column_filter: A mapping whose values must all equal the corresponding
            column attributes, or a callable invoked with the column's attributes
            and ID

    Returns:
        New list of matching columns
    """
    if callable(column_filter):
        return [
            column
            for column in columns
            if column_filter(column["attributes"], column["id"])
        ]

    missing = object()
    return [
        column
        for column in columns
        if all(
            _strict_equal(column["attributes"].get(key, missing), expected)
            for key, expected in column_filter.items()
        )
    ]


def _strict_equal(actual: Any, expected: Any) -> bool:
    # Value equality, except booleans never match numbers (True == 1 in Python).
    # Lists and dicts compare by content, not identity.
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


class Metadata:
    """Catalog of metadata columns"""

    def __init__(self, columns: Sequence[Record]):
        self._columns = columns
        self._metrics: List[Record] = []
        self._dimensions: List[Record] = []
        self._ids: Dict[str, Record] = {}

        for column in columns:
            attributes = column["attributes"]
            self._ids[column["id"]] = attributes

            if attributes.get("type") == METRIC:
                self._metrics.append(column)
            elif attributes.get("type") == DIMENSION:
                self._dimensions.append(column)

    def all(self, column_filter: Optional[ColumnFilter] = None) -> Sequence[Record]:
        """All columns, optionally filtered"""
        return apply_filter(self._columns, column_filter) if column_filter else self._columns

    def all_metrics(self, column_filter: Optional[ColumnFilter] = None) -> Sequence[Record]:
        """All METRIC columns, optionally filtered"""
        return apply_filter(self._metrics, column_filter) if column_filter else self._metrics

    def all_dimensions(self, column_filter: Optional[ColumnFilter] = None) -> Sequence[Record]:
        """All DIMENSION columns, optionally filtered"""
        return (
            apply_filter(self._dimensions, column_filter) if column_filter else self._dimensions
        )

    def get(self, column_id: str) -> Optional[Record]:
        """Get the attributes of a column by ID"""
        return self._ids.get(column_id)
