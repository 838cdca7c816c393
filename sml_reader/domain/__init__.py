"""Domain layer - SML object kinds and the aggregated read result.

Objects are validated only on their shared header; everything else an
object file declares is carried through untouched.
"""

from sml_reader.domain.objects import (
    SML_OBJECT_ADAPTER,
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
    SMLObject,
    SMLObjectType,
    SMLRowSecurity,
)
from sml_reader.domain.result import COLLECTION_NAMES, SMLReadResult, SMLResultBuilder

__all__ = [
    # Objects
    "AnySMLObject",
    "SML_OBJECT_ADAPTER",
    "SMLCatalog",
    "SMLCompositeModel",
    "SMLConnection",
    "SMLDataset",
    "SMLDimension",
    "SMLGlobalSettings",
    "SMLMetric",
    "SMLMetricCalculated",
    "SMLModel",
    "SMLModelSettings",
    "SMLObject",
    "SMLObjectType",
    "SMLRowSecurity",
    # Result
    "COLLECTION_NAMES",
    "SMLReadResult",
    "SMLResultBuilder",
]
