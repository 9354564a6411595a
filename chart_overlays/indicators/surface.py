from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Protocol, Sequence


DEFAULT_STROKE = "#000000"
DEFAULT_FILL = "#000000"
DEFAULT_LINE_WIDTH = 1.0


class DrawingSurface(Protocol):
    """
    Immediate-mode 2D drawing target shared by every indicator renderer.

    Style is carried by the three attributes plus the dash pattern; path
    commands accumulate until `stroke()` or `fill()` consumes the current path.
    """

    stroke_style: str
    fill_style: str
    line_width: float

    def set_line_dash(self, segments: Sequence[float]) -> None:
        ...

    def get_line_dash(self) -> List[float]:
        ...

    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def begin_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def close_path(self) -> None:
        ...

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        ...

    def stroke(self) -> None:
        ...

    def fill(self) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...


def reset_style(surface: DrawingSurface) -> None:
    surface.stroke_style = DEFAULT_STROKE
    surface.fill_style = DEFAULT_FILL
    surface.line_width = DEFAULT_LINE_WIDTH
    surface.set_line_dash([])


@contextmanager
def drawing_session(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    # Styles never leak between renderers, even when a renderer raises mid-draw.
    surface.save()
    try:
        reset_style(surface)
        yield surface
    finally:
        surface.restore()
