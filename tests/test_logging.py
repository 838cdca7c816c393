"""Tests for structlog configuration."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from sml_reader.ingestion import read_sml_objects
from sml_reader.logging_config import configure_logging, relativize_path


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("sml_reader").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("sml_reader").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("sml_reader.test")
        log.warning("json test", unique_name="dim.age")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["unique_name"] == "dim.age"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "sml_reader.test"
        assert "timestamp" in parsed

    def test_debug_suppressed_when_not_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("sml_reader.ingestion.reader").debug("Reading folder")
        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_read_warning_path_relative_to_root(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        """Warnings from a read name the file relative to the folder read."""
        (tmp_path / "settings").mkdir()
        (tmp_path / "settings" / "model.yml").write_text(
            "object_type: model_settings\nlabel: S\nunique_name: s1\n",
            encoding="utf-8",
        )
        configure_logging(verbose=False, log_json=True)

        read_sml_objects(tmp_path)

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == (
            "Model settings object not implemented - skipping object"
        )
        assert parsed["path"] == "settings/model.yml"
        assert parsed["root"] == str(tmp_path)
        assert parsed["unique_name"] == "s1"


class TestRelativizePath:
    def test_path_below_root(self) -> None:
        event = relativize_path(
            None, "warning", {"root": "/models", "path": "/models/dim/age.yml"}
        )
        assert event["path"] == "dim/age.yml"

    def test_path_outside_root_unchanged(self) -> None:
        event = relativize_path(
            None, "warning", {"root": "/models", "path": "/elsewhere/age.yml"}
        )
        assert event["path"] == "/elsewhere/age.yml"

    def test_no_root_bound(self) -> None:
        event = relativize_path(None, "debug", {"path": "/models/dim"})
        assert event == {"path": "/models/dim"}
