"""
Subtítulos y escritores de salida.
Los escritores (subtitles, preview, exporter) se importan por módulo para no
crear un ciclo con compositions.composition, que depende de video.captions.
"""

from .captions import caption_overlay, find_overlaps, resolve_caption

__all__ = ["caption_overlay", "find_overlaps", "resolve_caption"]
