"""
Storage helpers for reading saved API responses from disk.
"""

import json
from pathlib import Path
from typing import List

from .models import ListResponse, Record


def read_items(path: Path) -> List[Record]:
    """
    Read a list of records from a JSON file

    The file may hold either a bare JSON array or a list response envelope with an
    "items" field.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data
    return ListResponse.model_validate(data).items or []
