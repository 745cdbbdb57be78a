"""
Validador de composiciones.
Revisa escenas, subtítulos y audio antes de entregar la composición al renderizador.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..compositions.composition import Composition
from ..errors import TimelineValidationError
from ..video.captions import find_overlaps

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Resultado de la validación."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def __bool__(self):
        return self.is_valid

    @property
    def issues(self) -> List[str]:
        return self.errors + self.warnings


class TimelineValidator:
    """Validador de composiciones declaradas."""

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Si es True, cualquier error o advertencia lanza TimelineValidationError
        """
        self.strict = strict

    def _validate_scenes(self, composition: Composition) -> tuple[List[str], List[str]]:
        errors = []
        warnings = []

        seen = set()
        for scene in composition.scenes:
            if scene.id in seen:
                errors.append(f"Escena duplicada: {scene.id}")
            seen.add(scene.id)

            if scene.duration <= 0:
                errors.append(f"Escena {scene.id}: duración no positiva ({scene.duration})")
            if scene.crossfade > scene.duration:
                errors.append(f"Escena {scene.id}: crossfade ({scene.crossfade}) mayor que la duración")
            if scene.end > composition.duration_in_frames:
                warnings.append(f"Escena {scene.id}: termina en {scene.end}, "
                                f"después del final ({composition.duration_in_frames})")
            if scene.id not in composition.renderers:
                warnings.append(f"Escena {scene.id}: sin renderer, se dibujará vacía")

        # Solape permitido: crossfade de la anterior + fade-in de la siguiente
        ordered = sorted(composition.scenes, key=lambda s: s.start)
        for prev, nxt in zip(ordered, ordered[1:]):
            overlap = prev.end - nxt.start
            fade_in = nxt.fade_in if nxt.fade_in is not None else composition.fade_in
            allowed = prev.crossfade + fade_in
            if overlap > allowed:
                warnings.append(f"Escenas {prev.id} y {nxt.id}: solapan {overlap} frames "
                                f"(máximo esperado {allowed})")

        for scene_id in composition.renderers:
            if composition.scene(scene_id) is None:
                warnings.append(f"Renderer sin escena: {scene_id}")

        return errors, warnings

    def _validate_captions(self, composition: Composition) -> tuple[List[str], List[str]]:
        errors = []
        warnings = []

        for i, phrase in enumerate(composition.captions):
            if phrase.start >= phrase.end:
                errors.append(f"Subtítulo {i+1}: from ({phrase.start}) >= to ({phrase.end})")
            if phrase.end > composition.duration_in_frames:
                warnings.append(f"Subtítulo {i+1}: termina después del final del video")
            if not phrase.words:
                warnings.append(f"Subtítulo {i+1}: texto vacío")

        for first, second in find_overlaps(composition.captions):
            warnings.append(
                f"Subtítulos solapados: '{first.text}' ({first.start}-{first.end}) oculta "
                f"'{second.text}' ({second.start}-{second.end}) mientras coinciden"
            )

        return errors, warnings

    def _validate_audio(self, composition: Composition) -> tuple[List[str], List[str]]:
        errors = []
        warnings = []

        for cue in composition.audio:
            if cue.start_frame >= composition.duration_in_frames:
                warnings.append(f"Audio {cue.asset_ref}: empieza después del final ({cue.start_frame})")
            elif cue.duration_in_frames is not None:
                if cue.duration_in_frames <= 0:
                    errors.append(f"Audio {cue.asset_ref}: duración no positiva")
                elif cue.start_frame + cue.duration_in_frames > composition.duration_in_frames:
                    warnings.append(f"Audio {cue.asset_ref}: se corta al final del video")

        return errors, warnings

    def validate(self, composition: Composition) -> ValidationResult:
        """
        Valida una composición completa.

        Args:
            composition: Composición a revisar

        Returns:
            ValidationResult con errores y advertencias

        Raises:
            TimelineValidationError: En modo estricto, si hay cualquier problema
        """
        errors: List[str] = []
        warnings: List[str] = []

        for check in (self._validate_scenes, self._validate_captions, self._validate_audio):
            e, w = check(composition)
            errors.extend(e)
            warnings.extend(w)

        result = ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

        if errors:
            logger.error(f"{composition.id}: {len(errors)} errores de validación")
        for warning in warnings:
            logger.warning(f"{composition.id}: {warning}")

        if self.strict and result.issues:
            raise TimelineValidationError(result.issues)
        return result
