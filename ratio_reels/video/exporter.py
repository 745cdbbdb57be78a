"""
Exportación por lotes de frames.
render(frame) es puro, así que un rango se puede repartir entre procesos
y el resultado no depende del orden en que terminen.
"""

import json
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Union

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from ..compositions.composition import Composition
from ..registry import default_registry, is_builtin
from .preview import SvgPreview

logger = logging.getLogger(__name__)
console = Console()

ExportFormat = Literal["json", "svg"]
CHUNK_SIZE = 30


def _render_json(composition: Composition, frames: Sequence[int]) -> List[str]:
    return [composition.render(frame).to_json() for frame in frames]


def _render_svg(composition: Composition, frames: Sequence[int], frames_dir: Path, scale: float) -> List[str]:
    preview = SvgPreview(scale=scale)
    paths = []
    for frame in frames:
        path = preview.write(composition.render(frame), frames_dir / f"frame_{frame:05d}.svg")
        paths.append(str(path))
    return paths


def _render_chunk(composition_id: str, frames: Sequence[int], fmt: str,
                  frames_dir: Optional[str], scale: float) -> List[str]:
    """Trabajo de un proceso: recrea la composición por id y renderiza su tramo."""
    composition = default_registry().get(composition_id)
    if fmt == "json":
        return _render_json(composition, frames)
    return _render_svg(composition, frames, Path(frames_dir), scale)


def _chunks(frames: Sequence[int], size: int) -> Iterable[Sequence[int]]:
    for i in range(0, len(frames), size):
        yield frames[i:i + size]


class FrameExporter:
    """Renderiza rangos de frames de una composición a disco."""

    def __init__(self, output_dir: Union[str, Path] = "./output", workers: int = 1, preview_scale: float = 1.0):
        """
        Args:
            output_dir: Directorio de salida
            workers: Procesos en paralelo (1 = en el proceso actual)
            preview_scale: Escala de los SVG exportados
        """
        self.output_dir = Path(output_dir)
        self.workers = max(1, workers)
        self.preview_scale = preview_scale

    def _frame_range(self, composition: Composition, start: int, end: Optional[int]) -> List[int]:
        end = composition.duration_in_frames if end is None else end
        if start < 0 or end > composition.duration_in_frames or start >= end:
            raise ValueError(
                f"Rango inválido [{start}, {end}) para {composition.id} "
                f"(0-{composition.duration_in_frames})"
            )
        return list(range(start, end))

    def _can_parallelize(self, composition: Composition) -> bool:
        if self.workers == 1:
            return False
        # Los procesos recrean la composición por id: solo vale para las del proyecto
        if not is_builtin(composition):
            logger.warning(f"{composition.id} no es una composición del registro, exportando en un solo proceso")
            return False
        return True

    def export(self, composition: Composition, start: int = 0, end: Optional[int] = None,
               fmt: ExportFormat = "json") -> Path:
        """
        Exporta el rango [start, end).

        Returns:
            Archivo .jsonl (fmt="json") o directorio con un SVG por frame (fmt="svg")
        """
        if fmt not in ("json", "svg"):
            raise ValueError(f"Formato de exportación no soportado: {fmt}")

        frames = self._frame_range(composition, start, end)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        frames_dir = self.output_dir / f"{composition.id}_frames"
        if fmt == "svg":
            frames_dir.mkdir(parents=True, exist_ok=True)

        chunks = list(_chunks(frames, CHUNK_SIZE))
        results: Dict[int, List[str]] = {}

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:
            task = progress.add_task(f"Renderizando {composition.id}...", total=len(frames))

            if self._can_parallelize(composition):
                with ProcessPoolExecutor(max_workers=self.workers) as pool:
                    futures = {
                        pool.submit(_render_chunk, composition.id, chunk, fmt,
                                    str(frames_dir), self.preview_scale): i
                        for i, chunk in enumerate(chunks)
                    }
                    for future in as_completed(futures):
                        index = futures[future]
                        results[index] = future.result()
                        progress.advance(task, len(chunks[index]))
            else:
                for i, chunk in enumerate(chunks):
                    if fmt == "json":
                        results[i] = _render_json(composition, chunk)
                    else:
                        results[i] = _render_svg(composition, chunk, frames_dir, self.preview_scale)
                    progress.advance(task, len(chunk))

            progress.update(task, description=f"[green]✓ {composition.id}: {len(frames)} frames")

        if fmt == "svg":
            logger.info(f"{len(frames)} SVG exportados en {frames_dir}")
            return frames_dir

        output_path = self.output_dir / f"{composition.id}_{frames[0]}-{frames[-1]}.jsonl"
        with open(output_path, "w", encoding="utf-8") as f:
            for i in range(len(chunks)):
                for line in results[i]:
                    f.write(line + "\n")
        logger.info(f"{len(frames)} frames exportados: {output_path}")
        return output_path

    def manifest(self, compositions: Iterable[Composition], filename: str = "manifest.json") -> Path:
        """
        Manifiesto para el renderizador y el mezclador externos:
        fps, frames, tamaño y ventanas de audio de cada composición.
        """
        items = []
        for composition in compositions:
            entry = composition.entry
            items.append({
                **entry.model_dump(),
                "duration_seconds": round(entry.duration_seconds, 3),
                "scenes": [s.model_dump() for s in composition.scenes],
                "captions": len(composition.captions),
                "audio": [cue.model_dump(mode="json", exclude_none=True) for cue in composition.audio],
            })

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump({"compositions": items}, f, indent=2, ensure_ascii=False)

        logger.info(f"Manifiesto generado: {output_path} ({len(items)} composiciones)")
        return output_path
