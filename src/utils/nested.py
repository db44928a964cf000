from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def dig(obj: Any, *path: str | int, default: Any = None) -> Any:
    """
    Walk `path` through nested mappings / sequences.

    String segments index mappings, int segments index lists/tuples.
    Any missing link (absent key, out-of-range index, wrong container type,
    None along the way) returns `default` instead of raising.

      dig({"name": {"common": "France"}}, "name", "common") -> "France"
      dig({"capital": ["Paris"]}, "capital", 0)            -> "Paris"
      dig({"name": "France"}, "name", "common")            -> None
    """
    cur = obj
    for seg in path:
        if cur is None:
            return default
        if isinstance(seg, int):
            # strings are sequences too, but never containers here
            if not isinstance(cur, Sequence) or isinstance(cur, (str, bytes)):
                return default
            if not -len(cur) <= seg < len(cur):
                return default
            cur = cur[seg]
        else:
            if not isinstance(cur, Mapping):
                return default
            if seg not in cur:
                return default
            cur = cur[seg]
    return default if cur is None else cur
