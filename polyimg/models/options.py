"""Conversion options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from polyimg.config import settings


class ConversionOptions(BaseModel):
    """Recognized conversion options. camelCase aliases are accepted."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tolerance: float = Field(default=0.0, ge=0, description="Simplification distance, document units")
    scale: float = Field(default=1.0, gt=0, description="Uniform document scale")
    sample_count: int = Field(default=1000, ge=1, alias="sampleCount", description="Samples per cubic curve")
    origin_x: float = Field(default=0.0, alias="originX")
    origin_y: float = Field(default=0.0, alias="originY")
    number_format: str = Field(
        default="int",
        alias="numberFormat",
        description='"int", "float", or anything else for a plain decimal list',
    )
    # Reserved device cap: reported when exceeded, never enforced
    max_points: int = Field(default=63, ge=1, alias="maxPoints")
    max_nodes: int = Field(default_factory=lambda: settings.polyimg_max_nodes, ge=1, alias="maxNodes")
