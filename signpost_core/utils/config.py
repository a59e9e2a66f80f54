"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")


@dataclass
class RouterConfig:
    """Router configuration."""

    # Prefix applied ahead of every route
    base_path: str = "/"

    # Body of the response for unmatched requests
    not_found_body: str = "Resource not found"

    # Content type for wrapped handler results
    content_type: str = "text/html"

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in (data or {}).items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls: Type[T], prefix: str = "SIGNPOST_") -> T:
        """Load config from environment variables."""
        return cls.from_dict(env_overrides(prefix))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, overrides: Dict[str, Any]) -> "RouterConfig":
        """Return a copy with overrides applied (overrides take precedence)."""
        data = self.to_dict()
        data.update(overrides)
        return type(self).from_dict(data)


def env_overrides(prefix: str = "SIGNPOST_") -> Dict[str, str]:
    """Collect config values set through environment variables."""
    data = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            data[key[len(prefix):].lower()] = value

    return data


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "SIGNPOST_",
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = RouterConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = RouterConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    return config.merge(env_overrides(env_prefix))


__all__ = [
    "RouterConfig",
    "env_overrides",
    "load_config",
]
