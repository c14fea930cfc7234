"""Perfil institucional do restaurante.

Carregado de YAML (config/assets/restaurant.yaml ou RESTAURANT_PROFILE_PATH)
e usado apenas pelos renderizadores de mensagens.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_PROFILE_PATH = Path(__file__).resolve().parents[1] / "assets" / "restaurant.yaml"


class RestaurantProfileError(Exception):
    """Erro ao carregar o perfil do restaurante."""


@dataclass(frozen=True)
class RestaurantProfile:
    """Dados do restaurante exibidos nos emails e no WhatsApp."""

    name: str = "DWICH62"
    address: str = ""
    phone: str = ""
    timezone: str = "Europe/Paris"
    pickup_ready_minutes: str = "15-20"
    delivery_eta_minutes: str = "30-45"

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RestaurantProfile:
        known = {name: data[name] for name in cls.__dataclass_fields__ if name in data}
        return cls(**{key: str(value) for key, value in known.items()})


def _profile_path() -> Path:
    override = os.getenv("RESTAURANT_PROFILE_PATH", "")
    return Path(override) if override else _DEFAULT_PROFILE_PATH


def load_restaurant_profile(path: Path | None = None) -> RestaurantProfile:
    """Lê o perfil do YAML, com fallback para os valores padrão.

    Raises:
        RestaurantProfileError: Se o YAML existir mas não for um mapeamento
    """
    profile_path = path or _profile_path()
    if not profile_path.exists():
        logger.warning(
            "restaurant_profile_not_found",
            extra={"path": str(profile_path)},
        )
        return RestaurantProfile()

    try:
        with profile_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("restaurant_profile_invalid_yaml", extra={"error": str(exc)})
        return RestaurantProfile()

    if not isinstance(data, dict):
        raise RestaurantProfileError("YAML do perfil deve ser um dicionário")
    return RestaurantProfile.from_mapping(data)


@lru_cache(maxsize=1)
def get_restaurant_profile() -> RestaurantProfile:
    """Retorna instância cacheada do perfil."""
    return load_restaurant_profile()
