"""
Models for API list envelopes and hierarchy index entries.

Account, property, view and column records themselves stay plain dicts as decoded
from the API, so the index can hand back the caller's own objects.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

Record = Dict[str, Any]


class ListResponse(BaseModel):
    """One page of a Management / Metadata API list response"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: Optional[List[Record]] = None
    start_index: int = Field(1, alias="startIndex")
    items_per_page: int = Field(0, alias="itemsPerPage")
    total_results: int = Field(0, alias="totalResults")

    def has_next_page(self) -> bool:
        """Whether another page follows this one"""
        if self.items_per_page <= 0:
            return False
        return self.start_index + self.items_per_page <= self.total_results

    def next_start_index(self) -> int:
        return self.start_index + self.items_per_page


@dataclass(slots=True, frozen=True)
class IndexEntry:
    """A hierarchy node plus non-owning references to its ancestors"""

    node: Record
    parent: Optional[Record] = None
    grandparent: Optional[Record] = None
