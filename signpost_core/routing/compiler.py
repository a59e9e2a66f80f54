"""ParamPattern Compiler - URI templates to engine patterns.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from signpost_core.utils.helpers import remove_trailing_slash

_TOKEN_RE = re.compile(r"{\s*([a-zA-Z0-9_]+\??)\s*}")


@dataclass(frozen=True)
class ParamSpec:
    """A placeholder found in a URI template."""

    name: str
    optional: bool = False
    tag: Optional[str] = None


@dataclass(frozen=True)
class CompiledTemplate:
    """Engine-ready form of a URI template."""

    pattern: str
    params: Tuple[ParamSpec, ...] = ()
    match_types: Dict[str, str] = field(default_factory=dict)

    @property
    def param_names(self) -> Tuple[str, ...]:
        return tuple(param.name for param in self.params)

    @property
    def canonical(self) -> str:
        """Pattern with a trailing slash, used for URL generation."""
        bare = self.bare
        return bare + "/" if bare else bare

    @property
    def bare(self) -> str:
        """Pattern without a trailing slash."""
        return remove_trailing_slash(self.pattern)


class ParamPatternCompiler:
    """Compiles ``{name}`` / ``{name?}`` templates into engine patterns.

    Constrained parameters get a fresh match type tag each, so two routes can
    reuse a parameter name with different constraints. Tags only need to be
    unique within one engine, so each router owns its own compiler.

    Usage:
        compiler = ParamPatternCompiler()
        compiled = compiler.compile("posts/{id}/{slug?}", {"id": "[0-9]+"})
        compiled.pattern      # "posts/[sp1:id]/[:slug]?"
        compiled.match_types  # {"sp1": "[0-9]+"}
    """

    def __init__(self, tag_prefix: str = "sp"):
        self.tag_prefix = tag_prefix
        self._counter = itertools.count(1)

    def compile(
        self,
        uri_template: str,
        param_constraints: Optional[Mapping[str, str]] = None,
    ) -> CompiledTemplate:
        """Compile a URI template.

        Args:
            uri_template: Template such as ``posts/{ postId }/comments``
            param_constraints: Parameter name to regex

        Returns:
            CompiledTemplate with the pattern, parameters in template order
            and the match types the pattern relies on
        """
        param_constraints = param_constraints or {}
        params = []
        match_types: Dict[str, str] = {}

        def replace(token: re.Match) -> str:
            param_key = token.group(1)
            optional = param_key.endswith("?")
            param_key = param_key.rstrip("?")

            tag = None
            regex = param_constraints.get(param_key)
            if regex:
                tag = f"{self.tag_prefix}{next(self._counter)}"
                match_types[tag] = regex

            params.append(ParamSpec(param_key, optional, tag))
            return f"[{tag or ''}:{param_key}]" + ("?" if optional else "")

        pattern = _TOKEN_RE.sub(replace, uri_template).lstrip(" /")

        return CompiledTemplate(pattern, tuple(params), match_types)


__all__ = [
    "ParamSpec",
    "CompiledTemplate",
    "ParamPatternCompiler",
]
