"""SMLReadResult - everything aggregated from one folder read."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from sml_reader.domain.objects import (
    SMLCatalog,
    SMLCompositeModel,
    SMLConnection,
    SMLDataset,
    SMLDimension,
    SMLMetric,
    SMLMetricCalculated,
    SMLModel,
    SMLObject,
    SMLRowSecurity,
)

# Order used by counts() and the CLI summary
COLLECTION_NAMES = (
    "models",
    "dimensions",
    "datasets",
    "metrics",
    "metrics_calculated",
    "connections",
    "row_securities",
    "composite_models",
)


class SMLReadResult(BaseModel):
    """
    Immutable snapshot of a completed read.

    Order inside each collection follows completion order of the
    concurrent walk and must not be relied upon.
    """

    catalog: SMLCatalog | None = None
    models: tuple[SMLModel, ...] = ()
    dimensions: tuple[SMLDimension, ...] = ()
    datasets: tuple[SMLDataset, ...] = ()
    metrics: tuple[SMLMetric, ...] = ()
    metrics_calculated: tuple[SMLMetricCalculated, ...] = ()
    connections: tuple[SMLConnection, ...] = ()
    row_securities: tuple[SMLRowSecurity, ...] = ()
    composite_models: tuple[SMLCompositeModel, ...] = ()

    model_config = {"frozen": True}

    def counts(self) -> dict[str, int]:
        counts = {"catalog": 1 if self.catalog is not None else 0}
        for name in COLLECTION_NAMES:
            counts[name] = len(getattr(self, name))
        return counts

    @property
    def total(self) -> int:
        return sum(self.counts().values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def all_objects(self) -> Iterator[SMLObject]:
        """Iterate over every aggregated object, catalog first."""
        if self.catalog is not None:
            yield self.catalog
        for name in COLLECTION_NAMES:
            yield from getattr(self, name)

    def summary(self) -> str:
        catalog = self.catalog.unique_name if self.catalog else "none"
        return (
            f"SMLReadResult(catalog={catalog}): "
            f"{len(self.models)} models, "
            f"{len(self.dimensions)} dimensions, "
            f"{len(self.datasets)} datasets, "
            f"{len(self.metrics)} metrics, "
            f"{len(self.metrics_calculated)} calculated metrics, "
            f"{len(self.connections)} connections, "
            f"{len(self.row_securities)} row securities, "
            f"{len(self.composite_models)} composite models"
        )


class SMLResultBuilder:
    """
    Mutable accumulator filled while a folder tree is walked.

    No deduplication: every inserted object is kept, except the catalog
    slot where the last assignment wins.
    """

    def __init__(self) -> None:
        self.catalog: SMLCatalog | None = None
        self._models: list[SMLModel] = []
        self._dimensions: list[SMLDimension] = []
        self._datasets: list[SMLDataset] = []
        self._metrics: list[SMLMetric] = []
        self._metrics_calculated: list[SMLMetricCalculated] = []
        self._connections: list[SMLConnection] = []
        self._row_securities: list[SMLRowSecurity] = []
        self._composite_models: list[SMLCompositeModel] = []

    def add_model(self, model: SMLModel) -> None:
        self._models.append(model)

    def add_dimension(self, dimension: SMLDimension) -> None:
        self._dimensions.append(dimension)

    def add_dataset(self, dataset: SMLDataset) -> None:
        self._datasets.append(dataset)

    def add_metric(self, metric: SMLMetric) -> None:
        self._metrics.append(metric)

    def add_metric_calculated(self, metric: SMLMetricCalculated) -> None:
        self._metrics_calculated.append(metric)

    def add_connection(self, connection: SMLConnection) -> None:
        self._connections.append(connection)

    def add_row_security(self, row_security: SMLRowSecurity) -> None:
        self._row_securities.append(row_security)

    def add_composite_model(self, composite_model: SMLCompositeModel) -> None:
        self._composite_models.append(composite_model)

    def finalize(self) -> SMLReadResult:
        """Snapshot the current contents; later builder mutation does not leak in."""
        return SMLReadResult(
            catalog=self.catalog,
            models=tuple(self._models),
            dimensions=tuple(self._dimensions),
            datasets=tuple(self._datasets),
            metrics=tuple(self._metrics),
            metrics_calculated=tuple(self._metrics_calculated),
            connections=tuple(self._connections),
            row_securities=tuple(self._row_securities),
            composite_models=tuple(self._composite_models),
        )
