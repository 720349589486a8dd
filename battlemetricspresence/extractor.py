"""
Extracción de campos y formato del texto de estado para BattleMetricsPresence.
By Killerbite95
"""

import logging
from typing import Any, Mapping

from .exceptions import ExtractionError
from .models import Number, StatusSnapshot

logger = logging.getLogger("killerbite95.battlemetricspresence.extractor")


class _Missing:
    """Marcador para rutas que no existen en el documento."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_nested_value(document: Any, path: str) -> Any:
    """
    Recorre un documento anidado siguiendo una ruta separada por puntos.

    Args:
        document: Mapping raíz (normalmente el documento de atributos)
        path: Ruta del tipo 'details.rust_queued_players'

    Returns:
        El valor encontrado o MISSING si algún segmento no existe
    """
    value = document
    for key in path.split("."):
        if not isinstance(value, Mapping) or key not in value:
            return MISSING
        value = value[key]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Number) -> str:
    """Formatea un número en su forma decimal natural (45.0 -> '45')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_status_text(players: Number, max_players: Number, joining_players: Number = 0) -> str:
    """
    Genera el texto de estado.

    Returns:
        '[players/max]' o '[players/max - N joining]' si hay jugadores en cola
    """
    content = f"{_format_number(players)}/{_format_number(max_players)}"
    if joining_players > 0:
        content += f" - {_format_number(joining_players)} joining"
    return f"[{content}]"


def _coerce_joining(value: Any, path: str) -> Number:
    if value is MISSING or value is None:
        return 0
    if _is_number(value):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug(f"Valor no numérico en '{path}': {value!r}, usando 0")
        return 0


def extract_snapshot(attributes: Mapping[str, Any], joining_field: str) -> StatusSnapshot:
    """
    Extrae los datos de estado del documento de atributos.

    Args:
        attributes: Documento `data.attributes` de BattleMetrics
        joining_field: Ruta con puntos al contador de jugadores en cola

    Returns:
        StatusSnapshot con los valores extraídos

    Raises:
        ExtractionError: Si faltan `players` o `maxPlayers`
    """
    server_name = attributes.get("name") or "Unknown Server"
    players = attributes.get("players")
    max_players = attributes.get("maxPlayers")

    missing = [
        key for key, value in (("players", players), ("maxPlayers", max_players))
        if value is None
    ]
    if missing:
        raise ExtractionError(server_name, missing)

    joining = _coerce_joining(get_nested_value(attributes, joining_field), joining_field)

    return StatusSnapshot(
        players=players,
        max_players=max_players,
        joining_players=joining,
        server_name=server_name
    )
