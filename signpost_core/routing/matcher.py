"""Pattern Engine - Placeholder pattern matching and reverse generation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Patterns are plain paths with bracketed placeholders:

    posts/[:id]             any segment, captured as ``id``
    posts/[i:id]            digits only
    posts/[sp1:id]          custom match type ``sp1`` (see add_match_types)
    posts/[:id]?            optional, the preceding ``/`` goes with it
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(
    r"(?P<pre>[/.]?)\[(?P<type>[^:\]]*):(?P<param>[^:\]]+)\](?P<optional>\??)"
)

DEFAULT_MATCH_TYPES: Dict[str, str] = {
    "": r"[^/]+",
    "i": r"[0-9]+",
    "a": r"[0-9A-Za-z]+",
    "h": r"[0-9A-Fa-f]+",
}


class PatternEngineError(Exception):
    """Raised when a pattern can not be compiled or generated."""
    pass


@dataclass(frozen=True)
class EngineMatch:
    """Result of a successful match."""

    target: Any
    params: Dict[str, str] = field(default_factory=dict)
    name: Optional[str] = None


@dataclass(frozen=True)
class _Entry:
    methods: Tuple[str, ...]
    pattern: str
    target: Any
    name: Optional[str] = None


class PatternEngine:
    """Ordered placeholder-pattern matcher.

    Usage:
        engine = PatternEngine("/api/")
        engine.add_match_types({"year": r"[0-9]{4}"})
        engine.map(["GET"], "archive/[year:year]/", handler, name="archive")

        engine.match("/api/archive/2024/", "GET").params  # {"year": "2024"}
        engine.generate("archive", {"year": 2024})         # "/api/archive/2024/"
    """

    def __init__(self, base_path: str = "/"):
        self.base_path = base_path
        self._match_types: Dict[str, str] = dict(DEFAULT_MATCH_TYPES)
        self._entries: List[_Entry] = []
        self._named: Dict[str, _Entry] = {}
        self._cache: Dict[str, Tuple[re.Pattern, Dict[str, str]]] = {}

    def add_match_types(self, match_types: Mapping[str, str]) -> None:
        """Register custom placeholder types bound to a regex."""
        self._match_types.update(match_types)

    def map(
        self,
        methods: Sequence[str],
        pattern: str,
        target: Any,
        name: Optional[str] = None,
    ) -> None:
        """Register a pattern for the given methods."""
        self._compile(pattern)
        entry = _Entry(tuple(m.upper() for m in methods), pattern, target, name)
        self._entries.append(entry)

        if name is not None:
            if name in self._named:
                logger.debug(f"Route name {name!r} now points at {pattern!r}")
            self._named[name] = entry

    def match(self, path: str, method: str) -> Optional[EngineMatch]:
        """Match a request path and method against registered patterns.

        The path is taken as-is, any query string must already be split off.

        Returns:
            EngineMatch for the first registered entry that matches, None otherwise
        """
        remainder = self._strip_base_path(path)
        if remainder is None:
            return None

        method = method.upper()
        for entry in self._entries:
            if method not in entry.methods:
                continue

            regex, groups = self._compile(entry.pattern)
            match = regex.fullmatch(remainder)
            if match:
                params = {
                    groups[group]: value
                    for group, value in match.groupdict().items()
                    if value is not None
                }
                return EngineMatch(entry.target, params, entry.name)

        return None

    def generate(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the URL of a named pattern.

        Every supplied value must satisfy its placeholder's match type, so the
        generated URL always matches the pattern it came from.
        """
        entry = self._named.get(name)
        if entry is None:
            raise PatternEngineError(f"Route `{name}` does not exist")

        params = params or {}
        parts = [self.base_path]
        last_end = 0

        for block in _BLOCK_RE.finditer(entry.pattern):
            parts.append(entry.pattern[last_end:block.start()])
            param = block.group("param")
            if params.get(param) is not None:
                value = str(params[param])
                if not re.fullmatch(self._match_types[block.group("type")], value):
                    raise PatternEngineError(
                        f"Value `{value}` for `{param}` does not fit route `{name}`"
                    )
                parts.append(block.group("pre") + value)
            elif not block.group("optional"):
                raise PatternEngineError(
                    f"Route `{name}` requires a value for `{param}`"
                )
            last_end = block.end()

        parts.append(entry.pattern[last_end:])
        return "".join(parts)

    def _strip_base_path(self, path: str) -> Optional[str]:
        """Return the part of path below the base path, None if outside it."""
        if path.startswith(self.base_path):
            return path[len(self.base_path):]
        if path == self.base_path.rstrip("/"):
            return ""
        return None

    def _compile(self, pattern: str) -> Tuple[re.Pattern, Dict[str, str]]:
        """Compile pattern to regex (cached).

        Capture groups are numbered, the returned dict maps them back to
        parameter names, so parameter names need not be valid identifiers.
        """
        if pattern in self._cache:
            return self._cache[pattern]

        groups: Dict[str, str] = {}
        regex_parts = []
        last_end = 0

        for index, block in enumerate(_BLOCK_RE.finditer(pattern)):
            regex_parts.append(re.escape(pattern[last_end:block.start()]))

            type_id = block.group("type")
            if type_id not in self._match_types:
                raise PatternEngineError(
                    f"Unknown match type `{type_id}` in pattern `{pattern}`"
                )

            group = f"p{index}"
            groups[group] = block.group("param")
            part = (
                f"{re.escape(block.group('pre'))}"
                f"(?P<{group}>(?:{self._match_types[type_id]}))"
            )
            if block.group("optional"):
                part = f"(?:{part})?"
            regex_parts.append(part)
            last_end = block.end()

        regex_parts.append(re.escape(pattern[last_end:]))
        try:
            regex = re.compile("".join(regex_parts))
        except re.error as exc:
            raise PatternEngineError(
                f"Pattern `{pattern}` does not compile: {exc}"
            ) from exc

        self._cache[pattern] = (regex, groups)
        return regex, groups


__all__ = [
    "DEFAULT_MATCH_TYPES",
    "EngineMatch",
    "PatternEngine",
    "PatternEngineError",
]
