"""
Piezas compartidas entre composiciones: capas cinemáticas y ventanas de audio.
"""

from typing import Callable, List, Optional, Sequence

from ..domain.models import AudioCue, Node, VolumeEnvelope, node
from ..primitives.overlays import background, film_grain, progress_bar, vignette
from ..primitives.palette import NAVY
from ..primitives.particles import golden_particles

WHOOSH = "audio/sfx/whoosh.mp3"
CHIME = "audio/sfx/chime.mp3"

CTA_URL = "ratiothedigitalcourtsociety.com"


def navy_layers(ambient_glow: bool = False, particles: int = 0) -> Callable[[int], List[Node]]:
    """Fondo azul marino con resplandor ambiental y partículas opcionales."""
    def render(frame: int) -> List[Node]:
        layers = [background()]
        if ambient_glow:
            layers.append(node("ambient_glow", color="rgba(30, 48, 80, 0.2)", ellipse=[80, 50], top="30%"))
        if particles:
            layers.append(golden_particles(frame, particles))
        return layers
    return render


def cinematic_layers(
    duration_in_frames: int,
    vignette_intensity: float = 0.5,
    grain_opacity: float = 0.03,
    progress: bool = True,
    progress_fade: Sequence[float] = (80, 100),
    progress_opacity: float = 0.5,
    progress_height: float = 2,
) -> Callable[[int], List[Node]]:
    """Viñeta, grano y barra de progreso por encima de las escenas."""
    def render(frame: int) -> List[Node]:
        layers = []
        if vignette_intensity > 0:
            layers.append(vignette(vignette_intensity))
        if grain_opacity > 0:
            layers.append(film_grain(frame, grain_opacity))
        if progress:
            layers.append(progress_bar(frame, duration_in_frames, progress_fade[0], progress_fade[1],
                                       progress_opacity, progress_height))
        return layers
    return render


def music(asset_ref: str, frames: Sequence[int], volumes: Sequence[float]) -> AudioCue:
    """Música de fondo con envolvente multipunto."""
    return AudioCue(
        asset_ref=asset_ref,
        start_frame=0,
        volume=max(volumes),
        envelope=VolumeEnvelope(frames=list(frames), volumes=list(volumes)),
    )


def cue(asset_ref: str, start: int, duration: Optional[int], volume: float) -> AudioCue:
    return AudioCue(asset_ref=asset_ref, start_frame=start, duration_in_frames=duration, volume=volume)


def whooshes(frames: Sequence[int], volume: float = 0.04, duration: int = 15) -> List[AudioCue]:
    """Transiciones entre escenas, casi imperceptibles."""
    return [cue(WHOOSH, f, duration, volume) for f in frames]


def voiceovers(folder: str, starts: Sequence[int], durations: Sequence[int], volume: float = 0.9) -> List[AudioCue]:
    """Pistas de locución numeradas scene-01, scene-02, ..."""
    return [
        cue(f"{folder}/scene-{i + 1:02d}.mp3", start, duration, volume)
        for i, (start, duration) in enumerate(zip(starts, durations))
    ]


def title_block(*lines: Node, gap: float = 0) -> Node:
    """Columna centrada de elementos."""
    return node("stack", *lines, align="center", gap=gap)


def backdrop(*children: Node) -> Node:
    """Contenedor de escena a pantalla completa sobre azul marino."""
    return node("stack", *children, align="center", background=NAVY, fill=True)
