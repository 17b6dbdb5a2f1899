"""Drawing surfaces the chart renderer can target.

A surface exposes five primitives: ``draw_rect``, ``draw_line``,
``draw_text``, ``measure_text`` and ``draw_path``. Coordinates are in
device-independent units with the origin at the top-left corner and ``y``
growing downward.

* :class:`RecordingSurface` keeps an ordered list of immutable operations.
* :class:`SvgSurface` serialises the same calls into an SVG document.
* :class:`PdfSurface` draws onto a ReportLab canvas and returns PDF bytes.
"""

from __future__ import annotations

import io
from dataclasses import asdict, dataclass
from typing import List, Protocol, Sequence, Tuple, Union
from xml.sax.saxutils import escape

Point = Tuple[float, float]

# Rough advance width of a sans-serif glyph relative to the font size.
_CHAR_WIDTH = 0.55


class Surface(Protocol):
    def draw_rect(self, x: float, y: float, w: float, h: float, color: str, opacity: float = 1.0) -> None: ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1.0, opacity: float = 1.0
    ) -> None: ...

    def draw_text(self, text: str, x: float, y: float, color: str, size: float) -> None: ...

    def measure_text(self, text: str, size: float) -> float: ...

    def draw_path(
        self, points: Sequence[Point], color: str, width: float, cap: str = "round", opacity: float = 1.0
    ) -> None: ...


def estimate_text_width(text: str, size: float) -> float:
    return len(text) * size * _CHAR_WIDTH


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    w: float
    h: float
    color: str
    opacity: float
    kind: str = "rect"


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float
    opacity: float
    kind: str = "line"


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    color: str
    size: float
    kind: str = "text"


@dataclass(frozen=True)
class PathOp:
    points: Tuple[Point, ...]
    color: str
    width: float
    cap: str
    opacity: float
    kind: str = "path"


DrawOp = Union[RectOp, LineOp, TextOp, PathOp]


class RecordingSurface:
    """Surface that only remembers what was drawn, in order."""

    def __init__(self) -> None:
        self.ops: List[DrawOp] = []

    def draw_rect(self, x, y, w, h, color, opacity=1.0):
        self.ops.append(RectOp(x, y, w, h, color, opacity))

    def draw_line(self, x1, y1, x2, y2, color, width=1.0, opacity=1.0):
        self.ops.append(LineOp(x1, y1, x2, y2, color, width, opacity))

    def draw_text(self, text, x, y, color, size):
        self.ops.append(TextOp(text, x, y, color, size))

    def measure_text(self, text, size):
        return estimate_text_width(text, size)

    def draw_path(self, points, color, width, cap="round", opacity=1.0):
        self.ops.append(PathOp(tuple(points), color, width, cap, opacity))

    def of_kind(self, kind: str) -> List[DrawOp]:
        return [op for op in self.ops if op.kind == kind]

    def to_dicts(self) -> List[dict]:
        out = []
        for op in self.ops:
            d = asdict(op)
            if op.kind == "path":
                d["points"] = [list(p) for p in op.points]
            out.append(d)
        return out


class SvgSurface:
    """Accumulates SVG fragments; call :meth:`to_svg` once drawing is done."""

    def __init__(self, width: float, height: float, font_family: str = "system-ui, sans-serif") -> None:
        self.width = width
        self.height = height
        self.font_family = font_family
        self._parts: List[str] = []

    def draw_rect(self, x, y, w, h, color, opacity=1.0):
        self._parts.append(
            f'<rect x="{x:.1f}" y="{y:.1f}" width="{w:.1f}" height="{h:.1f}" fill="{color}"'
            f' fill-opacity="{opacity:.2f}"/>'
        )

    def draw_line(self, x1, y1, x2, y2, color, width=1.0, opacity=1.0):
        self._parts.append(
            f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" stroke="{color}"'
            f' stroke-width="{width:g}" stroke-opacity="{opacity:.2f}"/>'
        )

    def draw_text(self, text, x, y, color, size):
        self._parts.append(
            f'<text x="{x:.1f}" y="{y:.1f}" style="font:400 {size:g}px {self.font_family}; fill:{color}">'
            f"{escape(text)}</text>"
        )

    def measure_text(self, text, size):
        return estimate_text_width(text, size)

    def draw_path(self, points, color, width, cap="round", opacity=1.0):
        if not points:
            return
        head, *rest = points
        d = [f"M{head[0]:.1f} {head[1]:.1f}"] + [f"L{x:.1f} {y:.1f}" for x, y in rest]
        self._parts.append(
            f'<path d="{" ".join(d)}" fill="none" stroke="{color}" stroke-width="{width:g}"'
            f' stroke-linecap="{cap}" stroke-linejoin="round" stroke-opacity="{opacity:.2f}"/>'
        )

    def to_svg(self) -> str:
        w, h = self.width, self.height
        head = f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}" height="{h:g}" viewBox="0 0 {w:g} {h:g}">'
        return head + "".join(self._parts) + "</svg>"


_CAPS = {"butt": 0, "round": 1, "square": 2}


class PdfSurface:
    """ReportLab-backed surface producing a single-page PDF."""

    def __init__(self, width: float, height: float, font: str = "Helvetica", title: str | None = None) -> None:
        from reportlab.pdfgen import canvas  # type: ignore

        self.width = width
        self.height = height
        self.font = font
        self._buf = io.BytesIO()
        self._c = canvas.Canvas(self._buf, pagesize=(width, height))
        if title:
            self._c.setTitle(title)

    def _y(self, y: float) -> float:
        return self.height - y

    def draw_rect(self, x, y, w, h, color, opacity=1.0):
        from reportlab.lib.colors import HexColor  # type: ignore

        self._c.setFillColor(HexColor(color), alpha=opacity)
        self._c.rect(x, self._y(y + h), w, h, stroke=0, fill=1)

    def draw_line(self, x1, y1, x2, y2, color, width=1.0, opacity=1.0):
        from reportlab.lib.colors import HexColor  # type: ignore

        self._c.setStrokeColor(HexColor(color), alpha=opacity)
        self._c.setLineWidth(width)
        self._c.setLineCap(0)
        self._c.line(x1, self._y(y1), x2, self._y(y2))

    def draw_text(self, text, x, y, color, size):
        from reportlab.lib.colors import HexColor  # type: ignore

        self._c.setFillColor(HexColor(color), alpha=1.0)
        self._c.setFont(self.font, size)
        self._c.drawString(x, self._y(y), text)

    def measure_text(self, text, size):
        from reportlab.pdfbase.pdfmetrics import stringWidth  # type: ignore

        return stringWidth(text, self.font, size)

    def draw_path(self, points, color, width, cap="round", opacity=1.0):
        from reportlab.lib.colors import HexColor  # type: ignore

        if not points:
            return
        path = self._c.beginPath()
        head, *rest = points
        path.moveTo(head[0], self._y(head[1]))
        for x, y in rest:
            path.lineTo(x, self._y(y))
        self._c.setStrokeColor(HexColor(color), alpha=opacity)
        self._c.setLineWidth(width)
        self._c.setLineCap(_CAPS.get(cap, 1))
        self._c.setLineJoin(1)
        self._c.drawPath(path, stroke=1, fill=0)

    def to_pdf(self) -> bytes:
        self._c.showPage()
        self._c.save()
        return self._buf.getvalue()
