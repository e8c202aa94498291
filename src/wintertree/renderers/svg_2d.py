"""SVG renderer for a composed Scene.

Produces a standalone SVG document (or a full-viewport HTML page wrapping
it for st.components.v1.html()). The viewBox is the scene's own pixel
space, so the browser handles all scaling.

Gradients are written once each into <defs> with
gradientUnits="userSpaceOnUse" because every paint carries absolute
coordinates. Groups keep their rotation and scale as SVG transforms rather
than being flattened.
"""

from __future__ import annotations

from wintertree.compute import Scene
from wintertree.drawing import (
    Color,
    DrawCommand,
    FillCircle,
    FillOval,
    FillPath,
    FillRect,
    Group,
    Line,
    LinearGradient,
    Paint,
    RadialGradient,
    Shadow,
    SolidPaint,
    StrokePath,
    Text,
    paint_stops,
)
from wintertree.text import DEFAULT_FONT_FAMILY

_BG = "#0b1026"


def _n(v: float) -> str:
    """Compact number formatting for attributes."""
    return f"{v:.3f}".rstrip("0").rstrip(".") or "0"


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _stops(colors: tuple[Color, ...]) -> str:
    return "".join(
        f'<stop offset="{_n(offset)}" stop-color="{c.to_hex()}" stop-opacity="{_n(c.a)}"/>'
        for offset, c in paint_stops(colors)
    )


class _SvgWriter:
    """Accumulates <defs> entries while emitting body elements."""

    def __init__(self) -> None:
        self.defs: list[str] = []
        self._paint_ids: dict[Paint, str] = {}
        self._filter_ids: dict[Shadow, str] = {}

    def paint(self, paint: Paint) -> tuple[str, str]:
        """(fill value, opacity) for a paint."""
        if isinstance(paint, SolidPaint):
            return paint.color.to_hex(), _n(paint.color.a)
        gid = self._paint_ids.get(paint)
        if gid is None:
            gid = f"g{len(self._paint_ids)}"
            self._paint_ids[paint] = gid
            if isinstance(paint, LinearGradient):
                (x1, y1), (x2, y2) = paint.start, paint.end
                self.defs.append(
                    f'<linearGradient id="{gid}" gradientUnits="userSpaceOnUse"'
                    f' x1="{_n(x1)}" y1="{_n(y1)}" x2="{_n(x2)}" y2="{_n(y2)}">'
                    f"{_stops(paint.colors)}</linearGradient>"
                )
            elif isinstance(paint, RadialGradient):
                cx, cy = paint.center
                self.defs.append(
                    f'<radialGradient id="{gid}" gradientUnits="userSpaceOnUse"'
                    f' cx="{_n(cx)}" cy="{_n(cy)}" r="{_n(paint.radius)}">'
                    f"{_stops(paint.colors)}</radialGradient>"
                )
        return f"url(#{gid})", "1"

    def shadow(self, shadow: Shadow | None) -> str:
        """filter attribute (with leading space) for a shadow, or ''."""
        if shadow is None:
            return ""
        fid = self._filter_ids.get(shadow)
        if fid is None:
            fid = f"f{len(self._filter_ids)}"
            self._filter_ids[shadow] = fid
            # Blur radius in the draw model is roughly two standard deviations.
            self.defs.append(
                f'<filter id="{fid}" x="-50%" y="-50%" width="200%" height="200%">'
                f'<feDropShadow dx="{_n(shadow.dx)}" dy="{_n(shadow.dy)}"'
                f' stdDeviation="{_n(shadow.blur / 2.0)}"'
                f' flood-color="{shadow.color.to_hex()}" flood-opacity="{_n(shadow.color.a)}"/>'
                f"</filter>"
            )
        return f' filter="url(#{fid})"'

    def fill_attrs(self, paint: Paint, shadow: Shadow | None = None) -> str:
        fill, opacity = self.paint(paint)
        attrs = f' fill="{fill}"'
        if opacity != "1":
            attrs += f' fill-opacity="{opacity}"'
        return attrs + self.shadow(shadow)

    def element(self, cmd: DrawCommand, indent: str = "  ") -> str:
        if isinstance(cmd, Group):
            px, py = cmd.pivot
            transform = (
                f"translate({_n(px)} {_n(py)}) rotate({_n(cmd.rotation)})"
                f" scale({_n(cmd.scale)}) translate({_n(-px)} {_n(-py)})"
            )
            label = f' class="{_escape(cmd.label)}"' if cmd.label else ""
            inner = "\n".join(self.element(c, indent + "  ") for c in cmd.commands)
            return f'{indent}<g{label} transform="{transform}">\n{inner}\n{indent}</g>'
        if isinstance(cmd, FillPath):
            return f'{indent}<path d="{cmd.path.to_svg()}"{self.fill_attrs(cmd.paint, cmd.shadow)}/>'
        if isinstance(cmd, StrokePath):
            dash = ""
            if cmd.dash is not None:
                dash = f' stroke-dasharray="{_n(cmd.dash[0])} {_n(cmd.dash[1])}"'
            return (
                f'{indent}<path d="{cmd.path.to_svg()}" fill="none"'
                f' stroke="{cmd.color.to_hex()}" stroke-opacity="{_n(cmd.color.a)}"'
                f' stroke-width="{_n(cmd.width)}" stroke-linecap="round"{dash}/>'
            )
        if isinstance(cmd, FillCircle):
            cx, cy = cmd.center
            return (
                f'{indent}<circle cx="{_n(cx)}" cy="{_n(cy)}" r="{_n(cmd.radius)}"'
                f"{self.fill_attrs(cmd.paint, cmd.shadow)}/>"
            )
        if isinstance(cmd, FillRect):
            x, y = cmd.top_left
            return (
                f'{indent}<rect x="{_n(x)}" y="{_n(y)}" width="{_n(cmd.width)}"'
                f' height="{_n(cmd.height)}"{self.fill_attrs(cmd.paint)}/>'
            )
        if isinstance(cmd, FillOval):
            x, y = cmd.top_left
            rx, ry = cmd.width / 2.0, cmd.height / 2.0
            return (
                f'{indent}<ellipse cx="{_n(x + rx)}" cy="{_n(y + ry)}" rx="{_n(rx)}" ry="{_n(ry)}"'
                f"{self.fill_attrs(cmd.paint, cmd.shadow)}/>"
            )
        if isinstance(cmd, Line):
            (x1, y1), (x2, y2) = cmd.start, cmd.end
            cap = "round" if cmd.round_cap else "butt"
            return (
                f'{indent}<line x1="{_n(x1)}" y1="{_n(y1)}" x2="{_n(x2)}" y2="{_n(y2)}"'
                f' stroke="{cmd.color.to_hex()}" stroke-opacity="{_n(cmd.color.a)}"'
                f' stroke-width="{_n(cmd.width)}" stroke-linecap="{cap}"/>'
            )
        if isinstance(cmd, Text):
            x, y = cmd.position
            weight = "bold" if cmd.bold else "normal"
            return (
                f'{indent}<text x="{_n(x)}" y="{_n(y)}" text-anchor="middle"'
                f" font-family=\"'{DEFAULT_FONT_FAMILY}', sans-serif\" font-weight=\"{weight}\""
                f' font-size="{_n(cmd.font_size)}" fill="{cmd.color.to_hex()}"'
                f' fill-opacity="{_n(cmd.color.a)}"{self.shadow(cmd.shadow)}>{_escape(cmd.text)}</text>'
            )
        raise TypeError(f"Unsupported command: {type(cmd).__name__}")


def render_svg(scene: Scene) -> str:
    """Return a standalone SVG document for the scene.

    Each layer becomes a top-level <g> with the layer name as its id, in
    painter's order.

    Args:
        scene: A composed frame.

    Returns:
        SVG markup sized to the scene's viewport.
    """
    writer = _SvgWriter()
    w, h = scene.viewport.width, scene.viewport.height
    layer_parts: list[str] = []
    for layer in scene.layers:
        body = "\n".join(writer.element(cmd, "    ") for cmd in layer.commands)
        layer_parts.append(f'  <g id="layer-{layer.name}">\n{body}\n  </g>')

    defs_svg = "\n    ".join(writer.defs)
    layers_svg = "\n".join(layer_parts)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {_n(w)} {_n(h)}"'
        f' width="{_n(w)}" height="{_n(h)}" preserveAspectRatio="xMidYMid meet">\n'
        f"  <defs>\n    {defs_svg}\n  </defs>\n"
        f"{layers_svg}\n"
        f"</svg>"
    )


def render_svg_html(scene: Scene, background: str = _BG) -> str:
    """Return a self-contained HTML page with the scene filling the window.

    Args:
        scene: A composed frame.
        background: Page color shown around the scene when aspect ratios differ.

    Returns:
        HTML string suitable for st.components.v1.html().
    """
    svg = render_svg(scene)
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{
    width: 100%;
    height: 100%;
    background: {background};
    overflow: hidden;
}}
svg {{
    display: block;
    width: 100%;
    height: 100%;
}}
</style>
</head>
<body>
{svg}
</body>
</html>"""
