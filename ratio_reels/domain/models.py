"""
Modelos de Dominio (Clean Architecture)
Definen los datos estáticos de una composición y la salida de cada frame.
Todos son inmutables: se declaran una vez por composición y nunca se mutan.
"""
import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Scene(BaseModel):
    """
    Un segmento contiguo de la línea de tiempo, medido en frames.
    Puede solaparse con la siguiente escena dentro de su crossfade.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identificador único de la escena")
    start: int = Field(..., description="Frame absoluto donde empieza la escena")
    duration: int = Field(..., description="Duración en frames")
    crossfade: int = Field(0, description="Frames finales en los que la escena se desvanece")
    z_index: int = Field(0, description="Orden de apilado entre escenas visibles")
    fade_in: Optional[int] = Field(None, description="Frames de entrada propios (None = valor de la composición)")

    @property
    def end(self) -> int:
        return self.start + self.duration


class CaptionPhrase(BaseModel):
    """Frase de subtítulo visible en el intervalo cerrado [start, end]."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    start: int = Field(..., alias="from", description="Primer frame visible")
    end: int = Field(..., alias="to", description="Último frame visible")

    @property
    def words(self) -> List[str]:
        return self.text.split()


class ChatMessage(BaseModel):
    """Mensaje de la simulación de sesión (juez o abogado)."""
    model_config = ConfigDict(frozen=True)

    role: Literal["judge", "advocate"]
    text: str
    typing_start: int = Field(..., description="Frame en que aparece el indicador de escritura")
    message_start: int = Field(..., description="Frame en que empieza a revelarse el texto")
    chars_per_frame: float = Field(2.5, description="Velocidad de la máquina de escribir")
    voice_duration_frames: Optional[int] = Field(None, description="Duración del clip de voz del juez")
    label: Optional[str] = None

    @property
    def is_judge(self) -> bool:
        return self.role == "judge"


class ScoreDimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    score: float = Field(..., ge=0, le=100)


class VolumeEnvelope(BaseModel):
    """Curva de volumen multipunto (frames → volumen), evaluada por el mezclador."""
    model_config = ConfigDict(frozen=True)

    frames: List[int]
    volumes: List[float]


class AudioCue(BaseModel):
    """
    Ventana de audio declarativa.
    El compositor la entrega tal cual al mezclador externo, sin evaluarla.
    """
    model_config = ConfigDict(frozen=True)

    asset_ref: str = Field(..., description="Ruta simbólica, la resuelve el entorno")
    start_frame: int = 0
    duration_in_frames: Optional[int] = Field(None, description="None = hasta el final")
    volume: float = 1.0
    envelope: Optional[VolumeEnvelope] = None

    def volume_at(self, frame: int) -> float:
        """Volumen efectivo en un frame absoluto (0 fuera de la ventana)."""
        if frame < self.start_frame:
            return 0.0
        if self.duration_in_frames is not None and frame >= self.start_frame + self.duration_in_frames:
            return 0.0
        if self.envelope is None:
            return self.volume
        from ..animation.interpolation import interpolate
        return interpolate(frame, self.envelope.frames, self.envelope.volumes)


class RegistryEntry(BaseModel):
    """Contrato que usa el renderizador externo para saber qué frames pedir."""
    model_config = ConfigDict(frozen=True)

    id: str
    fps: int
    duration_in_frames: int
    width: int
    height: int

    @property
    def duration_seconds(self) -> float:
        return self.duration_in_frames / self.fps


class Node(BaseModel):
    """Fragmento del árbol visual devuelto por las primitivas."""
    model_config = ConfigDict(frozen=True)

    kind: str
    props: Dict[str, Any] = Field(default_factory=dict)
    children: List["Node"] = Field(default_factory=list)

    def find(self, kind: str) -> List["Node"]:
        """Todos los nodos del subárbol (incluido este) con el tipo dado."""
        found = [self] if self.kind == kind else []
        for child in self.children:
            found.extend(child.find(kind))
        return found


Node.model_rebuild()


def node(kind: str, *children: Optional[Node], **props: Any) -> Node:
    """Atajo para construir nodos; los hijos None se descartan."""
    return Node(kind=kind, props=props, children=[c for c in children if c is not None])


class CaptionState(BaseModel):
    """Estado resuelto del subtítulo activo en un frame."""
    model_config = ConfigDict(frozen=True)

    text: str
    words: List[str]
    word_index: int
    highlighted: List[bool]
    opacity: float
    offset_y: float


class FrameOutput(BaseModel):
    """Descripción completa de un frame: árbol visual, subtítulo y audio."""
    model_config = ConfigDict(frozen=True)

    composition_id: str
    frame: int
    tree: Node
    caption: Optional[CaptionState] = None
    audio: List[AudioCue] = Field(default_factory=list)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialización canónica (claves ordenadas), idéntica byte a byte entre llamadas."""
        separators = (",", ":") if indent is None else None
        return json.dumps(self.model_dump(mode="json"), sort_keys=True,
                          indent=indent, separators=separators, ensure_ascii=False)
