"""SMLFolderReader - walks a folder tree and aggregates SML objects."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Iterable
from pathlib import Path
from typing import Any, TypeVar

import structlog
import yaml
from typing_extensions import assert_never

from sml_reader.domain import (
    AnySMLObject,
    SMLCatalog,
    SMLCompositeModel,
    SMLConnection,
    SMLDataset,
    SMLDimension,
    SMLGlobalSettings,
    SMLMetric,
    SMLMetricCalculated,
    SMLModel,
    SMLModelSettings,
    SMLReadResult,
    SMLResultBuilder,
    SMLRowSecurity,
)
from sml_reader.errors import MaxRecursionDepthError
from sml_reader.ingestion.classifier import classify
from sml_reader.ingestion.filesystem import is_sml_file, list_folder, read_text
from sml_reader.ingestion.parser import parse_yaml

MAX_RECURSION_DEPTH = 100

T = TypeVar("T")

log = structlog.get_logger(__name__)


async def _run_all(coros: Iterable[Coroutine[Any, Any, T]]) -> list[T]:
    """Run coroutines as one task group and return their results in order.

    The first failure is re-raised as-is instead of wrapped in an
    ExceptionGroup; the remaining tasks are cancelled.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(coro) for coro in coros]
    except BaseExceptionGroup as errors:
        raise errors.exceptions[0] from None
    return [task.result() for task in tasks]


class SMLFolderReader:
    """
    Read every SML object below a folder.

    Handles:
    - Recursing into sub-folders, bounded by max_depth
    - Loading .yml/.yaml files of one folder concurrently
    - Routing each recognized object into a SMLResultBuilder

    Listing, reading and YAML errors are not caught: one bad file fails
    the whole read.
    """

    def __init__(
        self, logger: Any = None, max_depth: int = MAX_RECURSION_DEPTH
    ) -> None:
        self._log = logger if logger is not None else log
        self.max_depth = max_depth

    @classmethod
    def create(cls, logger: Any = None) -> SMLFolderReader:
        return cls(logger)

    async def read(self, folder_path: str | Path) -> SMLReadResult:
        """
        Read all SML objects from folder_path and its sub-folders.

        Raises:
            MaxRecursionDepthError: If nesting reaches max_depth
            FileNotFoundError: If a folder cannot be listed
            yaml.YAMLError: If any candidate file is malformed
            UnicodeDecodeError: If any candidate file is not UTF-8
        """
        builder = SMLResultBuilder()
        root = Path(folder_path)
        # Every task spawned below inherits `root` for its log events
        with structlog.contextvars.bound_contextvars(root=str(root)):
            await self._read_folder(root, builder, depth=0)
            result = builder.finalize()
            self._log.debug("Read complete", path=str(root), objects=result.total)
        return result

    async def _read_folder(
        self, folder: Path, builder: SMLResultBuilder, depth: int
    ) -> None:
        if depth >= self.max_depth:
            raise MaxRecursionDepthError(folder, depth)

        listing = await list_folder(folder)
        self._log.debug(
            "Reading folder",
            path=str(folder),
            depth=depth,
            files=len(listing.files),
            folders=len(listing.folders),
        )

        paths = [folder / name for name in listing.files if is_sml_file(name)]
        objects = await _run_all(self._load_object(path) for path in paths)

        # Builder is only touched here, between awaits
        for path, sml_object in zip(paths, objects):
            if sml_object is not None:
                self._add_object(builder, sml_object, path)

        await _run_all(
            self._read_folder(folder / name, builder, depth + 1)
            for name in listing.folders
        )

    async def _load_object(self, path: Path) -> AnySMLObject | None:
        try:
            value = parse_yaml(await read_text(path))
        except (UnicodeDecodeError, yaml.YAMLError) as e:
            # Neither error knows which file it came from
            e.add_note(f"while reading {path}")
            raise
        return classify(value)

    def _add_object(
        self, builder: SMLResultBuilder, sml_object: AnySMLObject, path: Path
    ) -> None:
        match sml_object:
            case SMLCatalog():
                builder.catalog = sml_object
            case SMLModel():
                builder.add_model(sml_object)
            case SMLDimension():
                builder.add_dimension(sml_object)
            case SMLDataset():
                builder.add_dataset(sml_object)
            case SMLMetric():
                builder.add_metric(sml_object)
            case SMLMetricCalculated():
                builder.add_metric_calculated(sml_object)
            case SMLConnection():
                builder.add_connection(sml_object)
            case SMLRowSecurity():
                builder.add_row_security(sml_object)
            case SMLCompositeModel():
                builder.add_composite_model(sml_object)
            case SMLModelSettings():
                self._log.warning(
                    "Model settings object not implemented - skipping object",
                    path=str(path),
                    unique_name=sml_object.unique_name,
                )
                return
            case SMLGlobalSettings():
                self._log.warning(
                    "Global settings object not implemented - skipping object",
                    path=str(path),
                    unique_name=sml_object.unique_name,
                )
                return
            case _:
                assert_never(sml_object)

        self._log.debug(
            "Added object",
            object_type=sml_object.object_type,
            unique_name=sml_object.unique_name,
            path=str(path),
        )


def read_sml_objects(
    folder_path: str | Path,
    *,
    logger: Any = None,
    max_depth: int = MAX_RECURSION_DEPTH,
) -> SMLReadResult:
    """Blocking wrapper around SMLFolderReader.read for callers without a loop."""
    reader = SMLFolderReader(logger, max_depth=max_depth)
    return asyncio.run(reader.read(folder_path))
