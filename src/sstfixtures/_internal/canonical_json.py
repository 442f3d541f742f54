"""Byte-stable JSON for run reports and record digests."""

import hashlib
import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """Serialize obj with sorted keys and no insignificant whitespace.

    List order is preserved, so record lists must already be in key order.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonical_sha256(obj: Any) -> str:
    """Hex sha256 of the UTF-8 encoding of canonical_dumps(obj)."""
    return hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()
