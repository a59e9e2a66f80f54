"""Utils module - Configuration and path helpers."""

from signpost_core.utils.config import (
    RouterConfig,
    env_overrides,
    load_config,
)
from signpost_core.utils.helpers import (
    add_leading_slash,
    add_trailing_slash,
    parse_query,
    remove_trailing_slash,
    split_query,
    trim_slashes,
)

__all__ = [
    "RouterConfig",
    "env_overrides",
    "load_config",
    "add_leading_slash",
    "add_trailing_slash",
    "remove_trailing_slash",
    "parse_query",
    "split_query",
    "trim_slashes",
]
