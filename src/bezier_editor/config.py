"""
Configuration model and loader for the curve editor.

Values come from an optional YAML file; every field has a default so an
empty file, or no file at all, yields the stock editor behaviour.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, conint, field_validator

from .core.curve import DEFAULT_SAMPLE_STEPS, CurveEvaluator
from .core.editor import CurveEditor
from .core.hit_test import DEFAULT_SELECTION_RADIUS, HitTester
from .settings import get_settings


Color = Tuple[int, int, int]
DragModifier = Literal["control", "shift", "alt", "meta"]


class EditorConfig(BaseModel):
    """Interaction and display parameters."""

    model_config = ConfigDict(extra="forbid")

    selection_radius: PositiveFloat = Field(
        default=DEFAULT_SELECTION_RADIUS,
        description="Maximum cursor distance at which a point becomes active",
    )
    point_size: PositiveFloat = Field(
        default=4.0, description="Half-diagonal of the diamond point marker in pixels"
    )
    sample_steps: conint(ge=2) = Field(
        default=DEFAULT_SAMPLE_STEPS,
        description="Parameter subdivisions used to sample the curve for display",
    )
    include_end: bool = Field(
        default=False,
        description="Append the t=1 sample so the drawn curve reaches the last point",
    )
    drag_modifier: DragModifier = Field(
        default="control",
        description="Modifier that suppresses point insertion and enables dragging",
    )
    canvas_size: Tuple[conint(gt=0), conint(gt=0)] = Field(
        default=(800, 600), description="(width, height) of the drawing area"
    )
    polygon_color: Color = Field(default=(0, 0, 0))
    curve_color: Color = Field(default=(0, 160, 0))
    marker_color: Color = Field(default=(0, 0, 0))
    background_color: Color = Field(default=(255, 255, 255))

    @field_validator("polygon_color", "curve_color", "marker_color", "background_color")
    @classmethod
    def _validate_color(cls, value: Color) -> Color:
        if any(channel < 0 or channel > 255 for channel in value):
            raise ValueError(f"Color channels must be within 0-255: {value}")
        return value


def load_editor_config(path: Union[str, Path]) -> EditorConfig:
    """
    Load and validate editor configuration from a YAML file.

    Parameters
    ----------
    path:
        Path to the YAML configuration file.

    Returns
    -------
    EditorConfig
        Parsed and validated configuration object.
    """

    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle) or {}

    return EditorConfig.model_validate(raw_data)


def resolve_editor_config(path: Optional[Union[str, Path]] = None) -> EditorConfig:
    """Load ``path``, else the file named by the settings, else defaults."""
    if path is None:
        path = get_settings().config_path
    if path is None:
        return EditorConfig()
    return load_editor_config(path)


def build_editor(config: Optional[EditorConfig] = None) -> CurveEditor:
    """Create an empty editor wired with the configured radius and sampling."""
    config = config or EditorConfig()
    return CurveEditor(
        hit_tester=HitTester(config.selection_radius),
        evaluator=CurveEvaluator(steps=config.sample_steps, include_end=config.include_end),
    )
