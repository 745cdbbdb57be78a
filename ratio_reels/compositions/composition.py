"""
Ensamblado de composiciones.
Una composición declara escenas, subtítulos, audio y qué primitivas instancia
cada escena. render(frame) es una función pura del frame.
"""

from typing import Callable, Dict, List, Optional, Sequence

from ..animation.timeline import DEFAULT_BUFFER, DEFAULT_FADE_IN, scene_states
from ..domain.models import AudioCue, CaptionPhrase, FrameOutput, Node, RegistryEntry, Scene, node
from ..primitives.palette import STORY_FPS, STORY_HEIGHT, STORY_WIDTH
from ..video.captions import caption_overlay, resolve_caption

# frame local de la escena → fragmento visual
SceneRenderer = Callable[[int], Node]
# frame absoluto → capas de fondo o de primer plano
LayerRenderer = Callable[[int], List[Node]]


def _no_layers(frame: int) -> List[Node]:
    return []


class Composition:
    """Video procedural completo; sin estado mutable entre frames."""

    def __init__(
        self,
        id: str,
        duration_in_frames: int,
        scenes: Sequence[Scene],
        renderers: Dict[str, SceneRenderer],
        captions: Sequence[CaptionPhrase] = (),
        audio: Sequence[AudioCue] = (),
        background: LayerRenderer = _no_layers,
        overlays: LayerRenderer = _no_layers,
        fade_in: int = DEFAULT_FADE_IN,
        buffer: int = DEFAULT_BUFFER,
        fps: int = STORY_FPS,
        width: int = STORY_WIDTH,
        height: int = STORY_HEIGHT,
    ):
        """
        Args:
            id: Nombre registrado de la composición
            duration_in_frames: Duración total
            scenes: Escenas declaradas (estáticas)
            renderers: Función de render por id de escena
            captions: Frases de subtítulo
            audio: Ventanas de audio, se entregan sin evaluar
            background: Capas detrás de las escenas
            overlays: Capas delante de las escenas (viñeta, grano, progreso)
            fade_in: Frames de entrada por defecto de cada escena
            buffer: Margen de visibilidad a cada lado de la escena
        """
        self.id = id
        self.duration_in_frames = duration_in_frames
        self.scenes = tuple(scenes)
        self.renderers = dict(renderers)
        self.captions = tuple(captions)
        self.audio = tuple(audio)
        self.background = background
        self.overlays = overlays
        self.fade_in = fade_in
        self.buffer = buffer
        self.fps = fps
        self.width = width
        self.height = height

    @property
    def entry(self) -> RegistryEntry:
        return RegistryEntry(
            id=self.id,
            fps=self.fps,
            duration_in_frames=self.duration_in_frames,
            width=self.width,
            height=self.height,
        )

    def scene(self, scene_id: str) -> Optional[Scene]:
        return next((s for s in self.scenes if s.id == scene_id), None)

    def render_scenes(self, frame: int) -> List[Node]:
        """Escenas visibles apiladas por z-index, cada una con su opacidad."""
        layers = []
        for state in scene_states(self.scenes, frame, self.fade_in, self.buffer):
            renderer = self.renderers.get(state.scene.id)
            content = renderer(state.local_frame) if renderer else None
            layers.append(node(
                "scene",
                content,
                id=state.scene.id,
                local_frame=state.local_frame,
                opacity=state.opacity,
                z_index=state.scene.z_index,
            ))
        return layers

    def render(self, frame: int) -> FrameOutput:
        """
        Describe el frame completo.

        No valida el rango: pedir solo frames en [0, duration_in_frames) es
        responsabilidad del renderizador externo.
        """
        tree = node(
            "composition",
            *self.background(frame),
            *self.render_scenes(frame),
            *self.overlays(frame),
            caption_overlay(frame, self.captions),
            id=self.id,
            width=self.width,
            height=self.height,
        )
        return FrameOutput(
            composition_id=self.id,
            frame=frame,
            tree=tree,
            caption=resolve_caption(self.captions, frame),
            audio=list(self.audio),
        )

    def __repr__(self) -> str:
        return f"Composition(id={self.id!r}, frames={self.duration_in_frames}, scenes={len(self.scenes)})"
