"""
Modelos de datos para BattleMetricsPresence.
Incluye Enums, dataclasses y estructuras de datos.
By Killerbite95
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Dict, Any, Union

import discord

DEFAULT_API_BASE_URL = "https://api.battlemetrics.com/servers"
DEFAULT_JOINING_FIELD = "details.rust_queued_players"
DEFAULT_UPDATE_INTERVAL = 60
MIN_UPDATE_INTERVAL = 15
REQUEST_TIMEOUT = 10.0

Number = Union[int, float]


class PresenceMood(Enum):
    """Estado general que se muestra en la presencia del bot."""
    NORMAL = auto()
    ERROR = auto()

    @property
    def activity_type(self) -> discord.ActivityType:
        """Retorna el tipo de actividad correspondiente al estado."""
        if self == PresenceMood.NORMAL:
            return discord.ActivityType.listening
        return discord.ActivityType.watching

    @property
    def status(self) -> discord.Status:
        """Retorna el status de Discord correspondiente al estado."""
        if self == PresenceMood.NORMAL:
            return discord.Status.online
        return discord.Status.dnd


@dataclass(frozen=True)
class Settings:
    """Configuración del proceso, construida una sola vez al arrancar."""
    discord_token: str = field(repr=False)
    server_id: str
    update_interval: int = DEFAULT_UPDATE_INTERVAL
    joining_field: str = DEFAULT_JOINING_FIELD
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT


@dataclass
class FetchResult:
    """Resultado de una consulta a la API de BattleMetrics."""
    success: bool
    attributes: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, attributes: Dict[str, Any], status_code: int = 200) -> "FetchResult":
        return cls(success=True, attributes=attributes, status_code=status_code)

    @classmethod
    def failure(cls, message: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(success=False, error_message=message, status_code=status_code)


@dataclass(frozen=True)
class StatusSnapshot:
    """Valores extraídos de un documento de atributos en un ciclo."""
    players: Number
    max_players: Number
    joining_players: Number = 0
    server_name: str = "Unknown Server"


@dataclass(frozen=True)
class PresenceState:
    """Texto y estado que se publican como presencia del bot."""
    text: str
    mood: PresenceMood = PresenceMood.NORMAL

    @classmethod
    def normal(cls, text: str) -> "PresenceState":
        return cls(text=text, mood=PresenceMood.NORMAL)

    @classmethod
    def api_error(cls) -> "PresenceState":
        return cls(text="API Error", mood=PresenceMood.ERROR)

    @classmethod
    def data_error(cls) -> "PresenceState":
        return cls(text="Data Error", mood=PresenceMood.ERROR)

    @classmethod
    def init_error(cls) -> "PresenceState":
        return cls(text="Init Error", mood=PresenceMood.ERROR)


@dataclass
class PublishResult:
    """Resultado de publicar una presencia; nunca se propaga como excepción."""
    success: bool
    state: PresenceState
    error: Optional[BaseException] = None
