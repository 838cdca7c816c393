"""YAML parsing for SML object files."""

from __future__ import annotations

from typing import Any

import yaml


def parse_yaml(content: str) -> Any:
    """
    Parse one YAML document into plain Python values.

    Raises:
        yaml.YAMLError: On malformed syntax (including multi-document input)
    """
    return yaml.safe_load(content)
