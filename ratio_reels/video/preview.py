"""
Vista previa SVG de un frame.
Dibuja un boceto del árbol visual: textos en flujo vertical, imágenes como
marcadores, subtítulo y barra de progreso. No sustituye al renderizador real.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..domain.models import CaptionState, FrameOutput, Node
from ..primitives.palette import GOLD, NAVY, NAVY_CARD, NAVY_MID, SANS, TEXT, TEXT_SEC

logger = logging.getLogger(__name__)

# Nodos sin representación en el boceto
SKIPPED_KINDS = {"vignette", "film_grain", "glow", "radial_glow", "ambient_glow", "shimmer", "glare", "flash"}
PLACEHOLDER_KINDS = {"image", "radar", "grid", "podium", "polygon"}


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def svg_header(width: float, height: float, bg_top: str, bg_bot: str) -> str:
    return f'''<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <defs>
    <linearGradient id="bg" x1="0" y1="0" x2="0" y2="1">
      <stop offset="0%" stop-color="{bg_top}"/>
      <stop offset="50%" stop-color="{bg_bot}"/>
      <stop offset="100%" stop-color="{bg_top}"/>
    </linearGradient>
  </defs>
  <rect width="{width}" height="{height}" fill="url(#bg)"/>'''


def svg_footer() -> str:
    return "</svg>"


def svg_rounded_rect(x: float, y: float, w: float, h: float, rx: float = 12, fill: str = NAVY_CARD,
                     stroke: str = GOLD, stroke_width: float = 1, opacity: float = 1.0) -> str:
    return (f'  <rect x="{x:.1f}" y="{y:.1f}" width="{w:.1f}" height="{h:.1f}" '
            f'rx="{rx:.1f}" fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}" '
            f'opacity="{opacity:.3f}"/>')


def svg_text(x: float, y: float, text: str, size: float = 14, fill: str = TEXT,
             anchor: str = "middle", weight: Union[int, str] = 400, opacity: float = 1.0,
             font: str = SANS) -> str:
    return (f'  <text x="{x:.1f}" y="{y:.1f}" font-family="{_escape(font)}" '
            f'font-size="{size:.1f}" font-weight="{weight}" fill="{fill}" '
            f'text-anchor="{anchor}" opacity="{opacity:.3f}">{_escape(text)}</text>')


class SvgPreview:
    """Convierte un FrameOutput en un SVG de boceto."""

    def __init__(self, scale: float = 1.0, line_gap: float = 8):
        self.scale = scale
        self.line_gap = line_gap

    def _background(self, tree: Node) -> tuple:
        for child in tree.children:
            if child.kind == "background":
                gradient = child.props.get("gradient") or [NAVY, NAVY_MID]
                return gradient[0], gradient[1] if len(gradient) > 1 else gradient[0]
        return NAVY, NAVY_MID

    def _flow(self, n: Node, parts: List[str], cursor: List[float], width: float, opacity: float) -> None:
        """Coloca los nodos uno debajo de otro; cursor[0] es la coordenada y actual."""
        if n.kind in SKIPPED_KINDS:
            return
        opacity *= float(n.props.get("opacity", 1.0))
        if opacity <= 0.001:
            return
        dy = float(n.props.get("translate_y", 0))

        if n.kind in ("text", "word", "counter") and n.props.get("text") is not None:
            size = float(n.props.get("font_size", 14))
            cursor[0] += size
            parts.append(svg_text(width / 2, cursor[0] + dy, str(n.props["text"]), size=size,
                                  fill=n.props.get("color", TEXT), weight=n.props.get("font_weight", 400),
                                  opacity=opacity, font=n.props.get("font_family", SANS)))
            cursor[0] += self.line_gap
            return

        if n.kind in PLACEHOLDER_KINDS:
            w = min(float(n.props.get("width", width * 0.6)), width - 32)
            h = 60
            parts.append(svg_rounded_rect((width - w) / 2, cursor[0] + dy, w, h, opacity=opacity * 0.6))
            label = n.props.get("src") or n.kind
            parts.append(svg_text(width / 2, cursor[0] + dy + h / 2 + 4, str(label), size=9,
                                  fill=TEXT_SEC, opacity=opacity))
            cursor[0] += h + self.line_gap
            return

        for child in n.children:
            self._flow(child, parts, cursor, width, opacity)

    def _caption(self, caption: CaptionState, width: float, height: float) -> str:
        spans = "".join(
            f'<tspan fill="{TEXT if lit else TEXT_SEC}">{_escape(word)} </tspan>'
            for word, lit in zip(caption.words, caption.highlighted)
        )
        y = height - 40 + caption.offset_y
        return (f'  <text x="{width / 2:.1f}" y="{y:.1f}" font-family="{_escape(SANS)}" font-size="14" '
                f'text-anchor="middle" opacity="{caption.opacity:.3f}">{spans}</text>')

    def render(self, output: FrameOutput) -> str:
        tree = output.tree
        width = float(tree.props.get("width", 393))
        height = float(tree.props.get("height", 852))
        bg_top, bg_bot = self._background(tree)

        parts = [svg_header(width * self.scale, height * self.scale, bg_top, bg_bot)]
        if self.scale != 1.0:
            parts.append(f'  <g transform="scale({self.scale})">')

        for child in tree.children:
            if child.kind == "scene":
                parts.append(f'  <g id="{_escape(str(child.props.get("id")))}">')
                self._flow(child, parts, [height * 0.2], width, 1.0)
                parts.append("  </g>")
            elif child.kind == "progress_bar":
                fraction = float(child.props.get("width_fraction", 0))
                bar_h = float(child.props.get("height", 2))
                parts.append(f'  <rect x="0" y="{height - bar_h:.1f}" width="{width * fraction:.1f}" '
                             f'height="{bar_h:.1f}" fill="{GOLD}" opacity="{child.props.get("opacity", 1):.3f}"/>')

        if output.caption is not None:
            parts.append(self._caption(output.caption, width, height))
        parts.append(svg_text(8, 14, f"{output.composition_id} #{output.frame}", size=9,
                              fill=TEXT_SEC, anchor="start"))

        if self.scale != 1.0:
            parts.append("  </g>")
        parts.append(svg_footer())
        return "\n".join(parts)

    def write(self, output: FrameOutput, path: Union[str, Path], svg: Optional[str] = None) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(svg if svg is not None else self.render(output), encoding="utf-8")
        logger.debug(f"Preview escrita: {path}")
        return path


def render_preview(output: FrameOutput, scale: float = 1.0, path: Optional[Union[str, Path]] = None) -> str:
    """Atajo: devuelve el SVG y, si se indica ruta, lo guarda."""
    preview = SvgPreview(scale=scale)
    svg = preview.render(output)
    if path is not None:
        preview.write(output, path, svg)
    return svg
