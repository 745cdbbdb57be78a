"""Modelos de dominio inmutables"""

from .models import (
    AudioCue,
    CaptionPhrase,
    CaptionState,
    ChatMessage,
    FrameOutput,
    Node,
    RegistryEntry,
    Scene,
    ScoreDimension,
    VolumeEnvelope,
    node,
)

__all__ = [
    "AudioCue", "CaptionPhrase", "CaptionState", "ChatMessage", "FrameOutput",
    "Node", "RegistryEntry", "Scene", "ScoreDimension", "VolumeEnvelope", "node",
]
