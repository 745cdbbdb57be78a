"""
Exportador de subtítulos en formato ASS (karaoke palabra a palabra) y SRT.
Los tiempos salen de los frames de cada frase; el video final lo quema el renderizador externo.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..domain.models import CaptionPhrase
from ..primitives.palette import STORY_FPS, STORY_HEIGHT, STORY_WIDTH

logger = logging.getLogger(__name__)


class CaptionExporter:
    """Escribe las frases de una composición como archivos de subtítulos."""

    # Colores ASS en &HAABBGGRR: texto crema resaltado, 55% de opacidad antes de su turno
    DEFAULT_STYLE = {
        "name": "Default",
        "fontname": "DM Sans",
        "fontsize": 14,
        "primary_color": "&H00E6EDF2",
        "secondary_color": "&H73E6EDF2",
        "outline_color": "&H00201C0C",
        "back_color": "&H80201C0C",
        "bold": 0,
        "italic": 0,
        "underline": 0,
        "strikeout": 0,
        "scale_x": 100,
        "scale_y": 100,
        "spacing": 0,
        "angle": 0,
        "border_style": 3,  # Caja opaca
        "outline": 1,
        "shadow": 0,
        "alignment": 2,  # Centrado abajo
        "margin_l": 24,
        "margin_r": 24,
        "margin_v": 40,
        "encoding": 1,
    }

    # Frase de cierre con la marca en dorado
    BRAND_STYLE = {
        **DEFAULT_STYLE,
        "name": "Brand",
        "primary_color": "&H004CA8C9",
        "bold": -1,
    }

    def __init__(self, output_dir: Union[str, Path] = "./output", fps: int = STORY_FPS):
        """
        Args:
            output_dir: Directorio para archivos de salida
            fps: Frames por segundo para convertir frames a tiempo
        """
        self.output_dir = Path(output_dir)
        self.fps = fps

    def _seconds(self, frame: int) -> float:
        return frame / self.fps

    def _format_time(self, seconds: float) -> str:
        """Formato ASS (H:MM:SS.cc)."""
        total_cs = int(round(seconds * 100))
        hours, rest = divmod(total_cs, 360000)
        minutes, rest = divmod(rest, 6000)
        secs, centisecs = divmod(rest, 100)
        return f"{hours}:{minutes:02d}:{secs:02d}.{centisecs:02d}"

    def _format_srt_time(self, seconds: float) -> str:
        """Formato SRT (HH:MM:SS,mmm)."""
        total_ms = int(round(seconds * 1000))
        hours, rest = divmod(total_ms, 3600000)
        minutes, rest = divmod(rest, 60000)
        secs, millis = divmod(rest, 1000)
        return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"

    def _style_to_line(self, style: dict) -> str:
        fields = ["name", "fontname", "fontsize", "primary_color", "secondary_color", "outline_color",
                  "back_color", "bold", "italic", "underline", "strikeout", "scale_x", "scale_y",
                  "spacing", "angle", "border_style", "outline", "shadow", "alignment",
                  "margin_l", "margin_r", "margin_v", "encoding"]
        return "Style: " + ",".join(str(style[f]) for f in fields)

    def _create_header(self, title: str, width: int = STORY_WIDTH, height: int = STORY_HEIGHT) -> str:
        style_lines = "\n".join(self._style_to_line(s) for s in (self.DEFAULT_STYLE, self.BRAND_STYLE))
        return f"""[Script Info]
Title: {title}
ScriptType: v4.00+
WrapStyle: 0
ScaledBorderAndShadow: yes
PlayResX: {width}
PlayResY: {height}

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
{style_lines}

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
"""

    def _format_text_for_ass(self, text: str) -> str:
        # Las llaves abren tags en ASS
        return text.replace("\n", "\\N").replace("{", "(").replace("}", ")")

    def karaoke(self, phrase: CaptionPhrase) -> str:
        """
        Texto con tags \\k: la duración de la frase se reparte entre sus palabras.
        El resto de la división entera se suma a la última palabra.
        """
        words = phrase.words
        if not words:
            return ""
        total_cs = max(0, round((phrase.end + 1 - phrase.start) * 100 / self.fps))
        share, remainder = divmod(total_cs, len(words))
        parts = []
        for i, word in enumerate(words):
            cs = share + (remainder if i == len(words) - 1 else 0)
            parts.append(f"{{\\k{cs}}}{self._format_text_for_ass(word)}")
        return " ".join(parts)

    def to_ass(self, captions: Sequence[CaptionPhrase], title: str = "RATIO",
               width: int = STORY_WIDTH, height: int = STORY_HEIGHT) -> str:
        content = self._create_header(title, width, height)
        for phrase in captions:
            # El intervalo es cerrado: el último frame visible también cuenta
            start = self._format_time(self._seconds(phrase.start))
            end = self._format_time(self._seconds(phrase.end + 1))
            style = "Brand" if phrase.text.startswith("RATIO") else "Default"
            content += f"Dialogue: 0,{start},{end},{style},,0,0,0,,{{\\fad(267,267)}}{self.karaoke(phrase)}\n"
        return content

    def to_srt(self, captions: Sequence[CaptionPhrase]) -> str:
        blocks = []
        for i, phrase in enumerate(captions, start=1):
            start = self._format_srt_time(self._seconds(phrase.start))
            end = self._format_srt_time(self._seconds(phrase.end + 1))
            blocks.append(f"{i}\n{start} --> {end}\n{phrase.text}\n")
        return "\n".join(blocks)

    def export(self, captions: Sequence[CaptionPhrase], output_filename: str, fmt: str = "ass",
               title: Optional[str] = None) -> Path:
        """
        Escribe el archivo de subtítulos.

        Args:
            captions: Frases de la composición
            output_filename: Nombre sin extensión
            fmt: "ass" o "srt"
            title: Título del script ASS (por defecto el nombre del archivo)

        Returns:
            Ruta al archivo generado
        """
        if fmt not in ("ass", "srt"):
            raise ValueError(f"Formato de subtítulos no soportado: {fmt}")
        if not captions:
            logger.warning(f"{output_filename}: sin subtítulos, el archivo quedará vacío")

        content = self.to_ass(captions, title or output_filename) if fmt == "ass" else self.to_srt(captions)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / f"{output_filename}.{fmt}"
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        logger.info(f"Subtítulos generados: {output_path}")
        return output_path
