"""
URI helpers: query-string encoding, path template matching and lenient
query-parameter lookup.

Path templates are tuples of segments where ``{name}`` captures a parameter,
e.g. ``("ledgers", "{sequence}", "payments")``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import parse_qsl, quote, unquote, urlsplit

from ..core import InvalidPath, PathParamParseError

logger = logging.getLogger(__name__)

V = TypeVar("V")

_DIGITS = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

def encode_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join pairs as ``k=v&k=v``; values are percent-encoded, plain tokens pass as-is."""
    return "&".join(f"{k}={quote(v, safe='')}" for k, v in pairs)


def fill_template(template: Sequence[str], values: Dict[str, object]) -> str:
    """Render a template into a path (leading ``/``, segments percent-encoded)."""
    out: List[str] = []
    for seg in template:
        name = capture_name(seg)
        out.append(quote(str(values[name]), safe="") if name else seg)
    return "/" + "/".join(out)


def capture_name(segment: str) -> Optional[str]:
    if segment.startswith("{") and segment.endswith("}"):
        return segment[1:-1]
    return None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_path_param(name: str, raw: str, kind: type):
    """Convert a captured segment; only plain decimal digits are ints."""
    if kind is int:
        if not _DIGITS.fullmatch(raw):
            raise PathParamParseError(name, raw, int)
        return int(raw)
    if not raw:
        raise PathParamParseError(name, raw, kind)
    return raw


def match_path(template: Sequence[str], path: str) -> Dict[str, str]:
    """Match `path` against `template` and return the captured raw segments.

    Literal segments must be equal and the segment counts must agree.
    """
    segments = [unquote(s) for s in path.split("/") if s]
    expected = "/" + "/".join(template)
    if len(segments) != len(template):
        raise InvalidPath(path, expected)
    captured: Dict[str, str] = {}
    for seg, want in zip(segments, template):
        name = capture_name(want)
        if name:
            captured[name] = seg
        elif seg != want:
            raise InvalidPath(path, expected)
    return captured


class QueryParams:
    """Query string of an incoming URI, looked up by key.

    Lookups are lenient: a missing key or a value the parser rejects both
    read as None.
    """

    def __init__(self, query: str):
        self._values: Dict[str, str] = {}
        for k, v in parse_qsl(query, keep_blank_values=False):
            self._values.setdefault(k, v)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def get_parse(self, key: str, parse: Callable[[str], V]) -> Optional[V]:
        raw = self._values.get(key)
        if raw is None:
            return None
        try:
            return parse(raw)
        except (TypeError, ValueError) as exc:
            logger.debug("Ignoring query parameter %s=%r: %s", key, raw, exc)
            return None


def split_uri(uri: str) -> Tuple[str, QueryParams]:
    """Return (path, query params) of an absolute or origin-form URI."""
    parts = urlsplit(uri)
    return parts.path, QueryParams(parts.query)


__all__ = [
    "encode_query",
    "fill_template",
    "capture_name",
    "parse_path_param",
    "match_path",
    "QueryParams",
    "split_uri",
]
