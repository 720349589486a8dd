"""
Cliente HTTP para la API de servidores de BattleMetrics.
By Killerbite95
"""

import asyncio
import logging
from typing import Any, Dict, Mapping

import aiohttp

from .exceptions import ApiRequestError, ApiResponseError, FetchError
from .models import FetchResult, DEFAULT_API_BASE_URL, REQUEST_TIMEOUT

logger = logging.getLogger("killerbite95.battlemetricspresence.fetcher")


class BattleMetricsFetcher:
    """
    Obtiene el documento de atributos de un servidor.
    Una petición por ciclo, sin reintentos ni caché.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def build_url(self, server_id: str) -> str:
        return f"{self.base_url}/{server_id}"

    async def _request(self, server_id: str) -> Dict[str, Any]:
        """
        Realiza la petición y valida la forma de la respuesta.

        Raises:
            ApiRequestError: Error de transporte, timeout o status distinto de 200
            ApiResponseError: Cuerpo inválido o sin `data.attributes`
        """
        url = self.build_url(server_id)
        try:
            async with self.session.get(url, timeout=self.timeout) as response:
                if response.status != 200:
                    raise ApiRequestError(server_id, f"status {response.status}", response.status)
                try:
                    body = await response.json(content_type=None)
                except ValueError as e:
                    raise ApiResponseError(server_id, response.status, f"invalid JSON ({e})")
        except asyncio.TimeoutError:
            raise ApiRequestError(server_id, f"timeout after {self.timeout.total}s")
        except aiohttp.ClientResponseError as e:
            raise ApiRequestError(server_id, e.message, e.status)
        except aiohttp.ClientError as e:
            raise ApiRequestError(server_id, str(e) or e.__class__.__name__)

        data = body.get("data") if isinstance(body, Mapping) else None
        attributes = data.get("attributes") if isinstance(data, Mapping) else None
        if not isinstance(attributes, Mapping):
            raise ApiResponseError(server_id, response.status, "missing data.attributes")
        return dict(attributes)

    async def fetch(self, server_id: str) -> FetchResult:
        """
        Consulta la API para un servidor.

        Args:
            server_id: ID del servidor en BattleMetrics

        Returns:
            FetchResult con los atributos, o un fallo con el motivo
        """
        logger.info(f"Fetching data from BattleMetrics for server {server_id}...")
        try:
            attributes = await self._request(server_id)
        except FetchError as e:
            logger.error(e.message)
            return FetchResult.failure(e.message, getattr(e, "status", None))
        except Exception as e:
            logger.exception("Failed to fetch BattleMetrics data.")
            return FetchResult.failure(str(e) or e.__class__.__name__)

        return FetchResult.ok(attributes)

