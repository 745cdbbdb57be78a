"""
Configuración del proyecto.
Orden de precedencia: valores por defecto < config/config.yaml < variables de entorno (.env incluido).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./config/config.yaml"

# variable de entorno → campo de Settings
ENV_OVERRIDES = {
    "RATIO_REELS_OUTPUT_DIR": "output_dir",
    "RATIO_REELS_LOG_LEVEL": "log_level",
    "RATIO_REELS_STRICT": "strict_validation",
    "RATIO_REELS_WORKERS": "workers",
}


class Settings(BaseModel):
    """Ajustes de la CLI y de los escritores de salida."""
    output_dir: str = "./output"
    log_level: str = "INFO"
    strict_validation: bool = False
    workers: int = Field(default=4, ge=1)
    default_composition: str = "RatioShowcase"
    preview_scale: float = Field(default=1.0, gt=0)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Archivo de configuración no encontrado: {path}, usando valores por defecto")
        return {}

    section = config.get("ratio_reels", config) if isinstance(config, dict) else None
    if not isinstance(section, dict):
        logger.warning(f"Configuración sin formato de diccionario en {path}, usando valores por defecto")
        return {}
    return dict(section)


def load_settings(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Carga la configuración.

    Args:
        path: Ruta al YAML; si no existe se usan los valores por defecto

    Returns:
        Settings validado (pydantic lanza ValidationError si un valor es inválido)
    """
    load_dotenv()
    values = _read_yaml(Path(path))

    for env_name, field in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is not None:
            values[field] = raw
            logger.debug(f"{field} sobrescrito por {env_name}")

    return Settings(**values)
