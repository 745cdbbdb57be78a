"""
Timeline Loader
Convierte un documento declarativo (JSON o YAML) en una Composition renderizable.
Cada escena lista elementos tipados; cada tipo se resuelve con una primitiva.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..animation.timeline import DEFAULT_BUFFER, DEFAULT_FADE_IN
from ..compositions.common import backdrop, cinematic_layers, navy_layers
from ..compositions.composition import Composition
from ..domain.models import AudioCue, CaptionPhrase, ChatMessage, Node, Scene, ScoreDimension
from ..errors import TimelineLoadError
from ..primitives.charts import counter, dimension_bars, radar_chart, score_ring
from ..primitives.chat import chat_thread
from ..primitives.palette import GOLD, STORY_FPS, STORY_HEIGHT, STORY_WIDTH, TEXT
from ..primitives.phone import CSS_PHONE, SCREENSHOT_PHONE, phone_mockup
from ..primitives.text import accent_line, text, text_reveal

logger = logging.getLogger(__name__)


class ElementSpec(BaseModel):
    """Elemento de una escena; los parámetros extra van a la primitiva."""
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    delay: int = 0

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class SceneSpec(Scene):
    elements: List[ElementSpec] = Field(default_factory=list)


class OverlaySpec(BaseModel):
    vignette: float = 0.5
    grain: float = 0.03
    progress: bool = True


class TimelineDocument(BaseModel):
    """Documento completo de una composición declarativa."""
    id: str
    duration_in_frames: int = Field(..., gt=0)
    fps: int = STORY_FPS
    width: int = STORY_WIDTH
    height: int = STORY_HEIGHT
    fade_in: int = Field(DEFAULT_FADE_IN, ge=0)
    buffer: int = Field(DEFAULT_BUFFER, ge=0)
    particles: int = Field(0, ge=0)
    scenes: List[SceneSpec]
    captions: List[CaptionPhrase] = Field(default_factory=list)
    audio: List[AudioCue] = Field(default_factory=list)
    overlays: OverlaySpec = Field(default_factory=OverlaySpec)


def _text(frame: int, p: Dict[str, Any], delay: int) -> Node:
    content = text(p["content"], size=p.get("size", 14), serif=p.get("serif", False),
                   color=p.get("color", TEXT), weight=p.get("weight", 400))
    return text_reveal(frame, content, delay=delay, direction=p.get("direction", "up"),
                       duration=p.get("duration", 25))


def _accent_line(frame: int, p: Dict[str, Any], delay: int) -> Node:
    return accent_line(frame, p.get("width", 60), delay=delay, thickness=p.get("thickness", 1),
                       color=p.get("color", GOLD))


def _phone(frame: int, p: Dict[str, Any], delay: int) -> Node:
    motion = SCREENSHOT_PHONE if p.get("variant") == "screenshot" else CSS_PHONE
    return phone_mockup(frame, p["src"], delay=delay, tilt=p.get("tilt", "left"),
                        ken_burns_mode=p.get("ken_burns"), motion=motion)


def _score_ring(frame: int, p: Dict[str, Any], delay: int) -> Node:
    return score_ring(frame, p["score"], start=delay + p.get("start", 10), end=delay + p.get("end", 50))


def _dimension_bars(frame: int, p: Dict[str, Any], delay: int) -> Node:
    dimensions = [ScoreDimension(**d) for d in p["dimensions"]]
    return dimension_bars(frame, dimensions, first_delay=delay + p.get("first_delay", 20))


def _radar(frame: int, p: Dict[str, Any], delay: int) -> Node:
    return radar_chart(frame, p["values"], p["labels"], start=delay + p.get("start", 15),
                       end=delay + p.get("end", 60))


def _counter(frame: int, p: Dict[str, Any], delay: int) -> Node:
    return counter(frame, p["target"], delay=delay, duration=p.get("duration", 40), suffix=p.get("suffix", ""))


def _chat(frame: int, p: Dict[str, Any], delay: int) -> Node:
    messages = [ChatMessage(**m) for m in p["messages"]]
    return chat_thread(messages, frame - delay)


ELEMENT_BUILDERS: Dict[str, Callable[[int, Dict[str, Any], int], Node]] = {
    "text": _text,
    "accent_line": _accent_line,
    "phone": _phone,
    "score_ring": _score_ring,
    "dimension_bars": _dimension_bars,
    "radar": _radar,
    "counter": _counter,
    "chat": _chat,
}


def _strip_fences(raw: str) -> str:
    """Quita bloques de código markdown (```json, ```yaml) si existen."""
    for fence in ("```json", "```yaml", "```yml", "```"):
        raw = raw.replace(fence, "")
    return raw.strip()


class TimelineLoader:
    """Carga y valida timelines declarativos."""

    def parse(self, raw_input: Union[str, Path, Dict[str, Any]]) -> TimelineDocument:
        """
        Convierte JSON/YAML (texto, ruta o dict) en un TimelineDocument validado.

        Raises:
            TimelineLoadError: Si el documento no se puede leer o no es válido
        """
        if isinstance(raw_input, Path):
            try:
                raw_input = raw_input.read_text(encoding="utf-8")
            except OSError as e:
                raise TimelineLoadError(f"No se pudo leer {raw_input}: {e}") from e

        if isinstance(raw_input, str):
            try:
                # YAML es superconjunto de JSON: un solo parser para ambos
                data = yaml.safe_load(_strip_fences(raw_input))
            except yaml.YAMLError as e:
                logger.error(f"Error decodificando timeline: {e}")
                raise TimelineLoadError("El timeline no es JSON ni YAML válido") from e
        else:
            data = raw_input

        if not isinstance(data, dict):
            raise TimelineLoadError("El timeline debe ser un objeto con id, duración y escenas")

        try:
            document = TimelineDocument(**data)
        except ValidationError as e:
            logger.error(f"Timeline inválido: {e}")
            raise TimelineLoadError(f"Timeline inválido: {e.error_count()} error(es)") from e

        for scene in document.scenes:
            for element in scene.elements:
                if element.type not in ELEMENT_BUILDERS:
                    raise TimelineLoadError(
                        f"Escena {scene.id}: tipo de elemento desconocido '{element.type}' "
                        f"(válidos: {', '.join(sorted(ELEMENT_BUILDERS))})"
                    )
        return document

    def _scene_renderer(self, scene: SceneSpec) -> Callable[[int], Node]:
        elements = list(scene.elements)

        def render(frame: int) -> Node:
            return backdrop(*[
                ELEMENT_BUILDERS[e.type](frame, e.params, e.delay) for e in elements
            ])
        return render

    def build(self, document: TimelineDocument) -> Composition:
        """Construye la composición y la renderiza una vez para detectar parámetros faltantes."""
        renderers = {scene.id: self._scene_renderer(scene) for scene in document.scenes}
        composition = Composition(
            id=document.id,
            duration_in_frames=document.duration_in_frames,
            scenes=[Scene(**scene.model_dump(exclude={"elements"})) for scene in document.scenes],
            renderers=renderers,
            captions=document.captions,
            audio=document.audio,
            background=navy_layers(particles=document.particles),
            overlays=cinematic_layers(document.duration_in_frames, document.overlays.vignette,
                                      document.overlays.grain, progress=document.overlays.progress),
            fade_in=document.fade_in,
            buffer=document.buffer,
            fps=document.fps,
            width=document.width,
            height=document.height,
        )

        for scene_id, renderer in renderers.items():
            try:
                renderer(0)
            except (KeyError, TypeError, ValueError) as e:
                raise TimelineLoadError(f"Escena {scene_id}: parámetros inválidos ({e})") from e

        logger.info(f"Timeline cargado: {composition}")
        return composition

    def load(self, raw_input: Union[str, Path, Dict[str, Any]]) -> Composition:
        return self.build(self.parse(raw_input))

    def load_file(self, path: Union[str, Path]) -> Composition:
        return self.load(Path(path))
