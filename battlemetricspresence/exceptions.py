"""
Excepciones personalizadas para BattleMetricsPresence.
By Killerbite95
"""

from typing import Dict, List, Optional


class BattleMetricsPresenceError(Exception):
    """Excepción base para todos los errores de BattleMetricsPresence."""

    def __init__(self, message: str = "Error en BattleMetricsPresence"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(BattleMetricsPresenceError):
    """Se lanza cuando la configuración del entorno es inválida o incompleta."""

    def __init__(
        self,
        missing: Optional[List[str]] = None,
        invalid: Optional[Dict[str, str]] = None
    ):
        self.missing = list(missing or [])
        self.invalid = dict(invalid or {})

        parts = []
        if self.missing:
            parts.append(f"Critical configuration missing: {', '.join(self.missing)}")
        for key, reason in self.invalid.items():
            parts.append(f"Invalid {key}: {reason}")
        message = ". ".join(parts) or "Invalid configuration"
        super().__init__(message)


class FetchError(BattleMetricsPresenceError):
    """Excepción base para errores al consultar la API de BattleMetrics."""

    def __init__(self, server_id: str, message: Optional[str] = None):
        self.server_id = server_id
        self.message = message or f"Error al consultar BattleMetrics para el servidor {server_id}"
        super().__init__(self.message)


class ApiRequestError(FetchError):
    """Se lanza ante errores de transporte o HTTP (conexión, timeout, status)."""

    def __init__(self, server_id: str, reason: str, status: Optional[int] = None):
        self.reason = reason
        self.status = status
        status_str = status if status is not None else "N/A"
        message = f"HTTP error fetching BattleMetrics data: {reason}. Status: {status_str}"
        super().__init__(server_id, message)


class ApiResponseError(FetchError):
    """Se lanza cuando la respuesta no es 200 o no tiene `data.attributes`."""

    def __init__(self, server_id: str, status: Optional[int], reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        message = (
            f"Received invalid data structure or non-200 status ({status}) "
            f"from BattleMetrics"
        )
        if reason:
            message += f": {reason}"
        super().__init__(server_id, message)


class ExtractionError(BattleMetricsPresenceError):
    """Se lanza cuando faltan campos obligatorios en el documento de atributos."""

    def __init__(self, server_name: str, fields: List[str]):
        self.server_name = server_name
        self.fields = list(fields)
        message = (
            f"Could not extract player counts ({', '.join(self.fields)}) "
            f"from API response for server {server_name}"
        )
        super().__init__(message)
