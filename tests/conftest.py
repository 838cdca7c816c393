"""Shared fixtures for sml-reader tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml

WriteObject = Callable[..., Path]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo configure_logging side effects after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sml = logging.getLogger("sml_reader")
    sml_level = sml.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sml.setLevel(sml_level)
    structlog.reset_defaults()


@pytest.fixture
def write_object(tmp_path: Path) -> WriteObject:
    """Write one SML object file below tmp_path and return its path."""

    def _write(
        relative_path: str,
        object_type: str,
        label: str,
        unique_name: str,
        **extra: Any,
    ) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        document = {
            "object_type": object_type,
            "label": label,
            "unique_name": unique_name,
            **extra,
        }
        path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return path

    return _write
