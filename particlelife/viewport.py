"""Screen layout of one camera view per displayed simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

Point = tuple[float, float]
Line = tuple[Point, Point]


@dataclass(frozen=True)
class Viewport:
    """A rectangle in physical pixels, origin at the bottom left."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class CameraView:
    """A camera showing one simulation in its viewport."""

    simulation_id: int
    order: int
    viewport: Viewport
    distance: float

    @property
    def render_layers(self) -> tuple[int, int]:
        """Shared layer 0 plus the simulation's own layer."""
        return (0, self.simulation_id + 1)


def _to_pixels(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


def _grid_shape(total: int) -> tuple[int, int]:
    cols = math.ceil(math.sqrt(total))
    rows = math.ceil(total / cols)
    return cols, rows


def viewport_rect(
    index: int,
    total: int,
    available_width: float,
    available_height: float,
    ui_top: float,
    window_height: float,
) -> tuple[int, int, int, int]:
    """Position and size (x, y, w, h) of viewport ``index`` of ``total``."""
    if total < 1:
        raise ValueError("total must be at least 1")
    if not 0 <= index < total:
        raise ValueError("index out of range")

    if total == 1:
        x, y_top, w, h = 0.0, 0.0, available_width, available_height
    elif total in (2, 3):
        w = available_width / total
        x, y_top, h = index * w, 0.0, available_height
    else:
        cols, rows = (2, 2) if total == 4 else _grid_shape(total)
        w = available_width / cols
        h = available_height / rows
        row, col = divmod(index, cols)
        x, y_top = col * w, row * h

    y = window_height - ui_top - y_top - h
    return _to_pixels(x), _to_pixels(y), _to_pixels(w), _to_pixels(h)


def layout_viewports(
    selected_simulations: Iterable[int],
    window_width: float,
    window_height: float,
    scale_factor: float = 1.0,
    right_panel_width: float = 0.0,
    top_panel_height: float = 0.0,
) -> list[CameraView]:
    """Camera views for the selected simulations, sorted by id.

    Window sizes are physical pixels; panel sizes are logical pixels.
    """
    ui_top = top_panel_height * scale_factor
    available_width = window_width - right_panel_width * scale_factor
    available_height = window_height - ui_top
    if available_width <= 0.0 or available_height <= 0.0:
        return []

    selected = sorted(selected_simulations)
    count = len(selected)
    distance = 600.0 + count * 100.0
    views = []
    for index, simulation_id in enumerate(selected):
        x, y, w, h = viewport_rect(
            index, count, available_width, available_height, ui_top, window_height
        )
        if w == 0 or h == 0:
            continue
        views.append(CameraView(simulation_id, index, Viewport(x, y, w, h), distance))
    return views


def viewport_border_lines(
    selected_count: int,
    window_width: float,
    window_height: float,
    right_panel_width: float = 0.0,
    top_panel_height: float = 0.0,
) -> list[Line]:
    """Separator lines between viewports, in logical pixels from the top."""
    if selected_count <= 1:
        return []
    available_width = window_width - right_panel_width
    if available_width <= 0.0:
        return []

    top = top_panel_height

    def vertical(x: float) -> Line:
        return ((x, top), (x, window_height))

    def horizontal(y: float) -> Line:
        return ((0.0, y), (available_width, y))

    if selected_count in (2, 3):
        width = available_width / selected_count
        return [vertical(i * width) for i in range(1, selected_count)]
    if selected_count == 4:
        half_height = (window_height - top) / 2.0
        return [vertical(available_width / 2.0), horizontal(top + half_height)]

    cols, rows = _grid_shape(selected_count)
    width = available_width / cols
    height = (window_height - top) / rows
    return [vertical(i * width) for i in range(1, cols)] + [
        horizontal(top + i * height) for i in range(1, rows)
    ]