"""
Carga y validación de la configuración desde variables de entorno.
By Killerbite95
"""

import logging
import os
import sys
from typing import Dict, List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .models import (
    Settings, DEFAULT_JOINING_FIELD, DEFAULT_UPDATE_INTERVAL, MIN_UPDATE_INTERVAL
)

logger = logging.getLogger("killerbite95.battlemetricspresence.config")

ENV_DISCORD_TOKEN = "DISCORD_TOKEN"
ENV_SERVER_ID = "BATTLEMETRICS_SERVER_ID"
ENV_UPDATE_INTERVAL = "UPDATE_INTERVAL_SECONDS"
ENV_JOINING_FIELD = "BM_JOINING_FIELD"


def _get(environ: Mapping[str, str], key: str) -> str:
    return (environ.get(key) or "").strip()


def load_settings(environ: Mapping[str, str]) -> Settings:
    """
    Construye la configuración a partir de un mapping de entorno.

    Args:
        environ: Variables de entorno (normalmente os.environ)

    Returns:
        Settings validado

    Raises:
        ConfigurationError: Con todas las claves ausentes o inválidas
    """
    missing: List[str] = []
    invalid: Dict[str, str] = {}

    token = _get(environ, ENV_DISCORD_TOKEN)
    server_id = _get(environ, ENV_SERVER_ID)
    if not token:
        missing.append(ENV_DISCORD_TOKEN)
    if not server_id:
        missing.append(ENV_SERVER_ID)

    raw_interval = _get(environ, ENV_UPDATE_INTERVAL) or str(DEFAULT_UPDATE_INTERVAL)
    interval = DEFAULT_UPDATE_INTERVAL
    if not (raw_interval.isascii() and raw_interval.isdigit()):
        invalid[ENV_UPDATE_INTERVAL] = f"'{raw_interval}' is not an integer"
    else:
        interval = int(raw_interval)
        if interval < MIN_UPDATE_INTERVAL:
            invalid[ENV_UPDATE_INTERVAL] = f"must be a number >= {MIN_UPDATE_INTERVAL}"

    if missing or invalid:
        raise ConfigurationError(missing=missing, invalid=invalid)

    return Settings(
        discord_token=token,
        server_id=server_id,
        update_interval=interval,
        joining_field=_get(environ, ENV_JOINING_FIELD) or DEFAULT_JOINING_FIELD
    )


def load_settings_or_exit(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Carga el `.env` (sin pisar variables existentes) y valida la configuración.
    Termina el proceso con código 1 si la configuración no es válida.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ

    try:
        return load_settings(environ)
    except ConfigurationError as e:
        logger.error(f"{e.message}. Please check your .env file or environment variables.")
        sys.exit(1)
