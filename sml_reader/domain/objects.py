"""
SML object domain - one pydantic model per object kind.

Only the shared header (object_type, label, unique_name) is validated.
Kind-specific fields pass through as extras.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, StrictStr, TypeAdapter

# =============================================================================
# Types
# =============================================================================


class SMLObjectType(str, Enum):
    """Object kinds, as written in the `object_type` field."""

    CATALOG = "catalog"
    MODEL = "model"
    MODEL_SETTINGS = "model_settings"
    GLOBAL_SETTINGS = "global_settings"
    DIMENSION = "dimension"
    DATASET = "dataset"
    METRIC = "metric"
    METRIC_CALC = "metric_calc"
    CONNECTION = "connection"
    ROW_SECURITY = "row_security"
    COMPOSITE_MODEL = "composite_model"


# =============================================================================
# Objects
# =============================================================================


class SMLObject(BaseModel):
    """Common header of every SML object."""

    object_type: str
    label: StrictStr
    unique_name: StrictStr

    model_config = {"frozen": True, "extra": "allow"}

    @property
    def kind(self) -> SMLObjectType:
        return SMLObjectType(self.object_type)


class SMLCatalog(SMLObject):
    object_type: Literal["catalog"]


class SMLModel(SMLObject):
    object_type: Literal["model"]


class SMLModelSettings(SMLObject):
    object_type: Literal["model_settings"]


class SMLGlobalSettings(SMLObject):
    object_type: Literal["global_settings"]


class SMLDimension(SMLObject):
    object_type: Literal["dimension"]


class SMLDataset(SMLObject):
    object_type: Literal["dataset"]


class SMLMetric(SMLObject):
    object_type: Literal["metric"]


class SMLMetricCalculated(SMLObject):
    object_type: Literal["metric_calc"]


class SMLConnection(SMLObject):
    object_type: Literal["connection"]


class SMLRowSecurity(SMLObject):
    object_type: Literal["row_security"]


class SMLCompositeModel(SMLObject):
    object_type: Literal["composite_model"]


AnySMLObject = Annotated[
    Union[
        SMLCatalog,
        SMLModel,
        SMLModelSettings,
        SMLGlobalSettings,
        SMLDimension,
        SMLDataset,
        SMLMetric,
        SMLMetricCalculated,
        SMLConnection,
        SMLRowSecurity,
        SMLCompositeModel,
    ],
    Field(discriminator="object_type"),
]

SML_OBJECT_ADAPTER: TypeAdapter[AnySMLObject] = TypeAdapter(AnySMLObject)
