"""
BattleMetricsPresence - Bot de Discord
Refleja el estado de un servidor de BattleMetrics en la presencia del bot.
By Killerbite95
"""

import asyncio
import logging
import signal
from typing import Any, List, Optional

import aiohttp
import discord
from discord.ext import tasks

from .exceptions import ExtractionError
from .extractor import extract_snapshot, format_status_text
from .fetcher import BattleMetricsFetcher
from .models import (
    Settings, PresenceState, PublishResult, DEFAULT_UPDATE_INTERVAL
)
from .presence import PresencePublisher

# Configuración de logging
logger = logging.getLogger("killerbite95.battlemetricspresence.bot")


class BattleMetricsPresence(discord.Client):
    """Actualiza la presencia del bot con los jugadores de un servidor. By Killerbite95"""

    __author__ = "Killerbite95"
    __version__ = "1.0.0"

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        **kwargs: Any
    ) -> None:
        intents = discord.Intents.none()
        intents.guilds = True
        super().__init__(intents=intents, **kwargs)

        self.settings: Settings = settings
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session: bool = session is None
        self.fetcher: Optional[BattleMetricsFetcher] = None
        self.publisher: PresencePublisher = PresencePublisher(self)

        self.status_loop.change_interval(seconds=settings.update_interval)

    async def setup_hook(self) -> None:
        """Se ejecuta tras el login, antes de conectar al gateway."""
        if self.session is None:
            self.session = aiohttp.ClientSession()
        self.fetcher = BattleMetricsFetcher(
            self.session,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout
        )
        self.status_loop.start()

    async def close(self) -> None:
        """Limpieza al cerrar: tarea, sesión HTTP y conexión."""
        self.status_loop.cancel()
        if self._owns_session and self.session is not None and not self.session.closed:
            await self.session.close()
        await super().close()

    async def on_error(self, event_method: str, /, *args: Any, **kwargs: Any) -> None:
        logger.exception(f"Discord client error in {event_method}:")

    # ==================== Ciclo de actualización ====================

    async def refresh_server_status(self) -> PublishResult:
        """
        Ejecuta un ciclo completo: consulta, extracción, formato y publicación.

        Returns:
            PublishResult de la presencia publicada
        """
        result = await self.fetcher.fetch(self.settings.server_id)
        if not result.success:
            status = result.status_code if result.status_code is not None else "N/A"
            logger.debug(f"Consulta fallida para {self.settings.server_id} (status {status})")
            return await self._publish(PresenceState.api_error())

        try:
            snapshot = extract_snapshot(result.attributes, self.settings.joining_field)
        except ExtractionError as e:
            logger.error(e.message)
            return await self._publish(PresenceState.data_error())

        status_text = format_status_text(
            snapshot.players, snapshot.max_players, snapshot.joining_players
        )
        logger.info(f"Server: {snapshot.server_name} | Status: {status_text}")
        return await self._publish(PresenceState.normal(status_text))

    async def _publish(self, state: PresenceState) -> PublishResult:
        publish_result = await self.publisher.publish(state)
        if not publish_result.success:
            logger.debug(f"Presencia '{state.text}' no publicada; se reintentará en el próximo ciclo")
        return publish_result

    async def _initial_refresh(self) -> None:
        try:
            await self.refresh_server_status()
        except Exception:
            logger.exception("Error during initial status update.")
            await self._publish(PresenceState.init_error())

    @tasks.loop(seconds=DEFAULT_UPDATE_INTERVAL)
    async def status_loop(self) -> None:
        """Tarea principal; la primera iteración es la actualización inicial."""
        if self.status_loop.current_loop == 0:
            await self._initial_refresh()
            return

        try:
            await self.refresh_server_status()
        except Exception:
            logger.exception("Unexpected error during status update.")

    @status_loop.before_loop
    async def before_status_loop(self) -> None:
        """Espera a que el bot esté listo antes de iniciar las actualizaciones."""
        await self.wait_until_ready()
        logger.info(f"Logged in as {self.user}")
        logger.info(
            f"Starting status updates for server ID {self.settings.server_id} "
            f"every {self.settings.update_interval} seconds."
        )


async def run_bot(settings: Settings, bot: Optional[BattleMetricsPresence] = None) -> int:
    """
    Inicia sesión y mantiene el bot conectado hasta recibir SIGINT/SIGTERM.

    Returns:
        Código de salida: 0 en apagado ordenado, 1 si el login falla
    """
    if bot is None:
        bot = BattleMetricsPresence(settings)
    loop = asyncio.get_running_loop()
    shutdown_tasks: List[asyncio.Task] = []

    def _request_shutdown(signame: str) -> None:
        logger.info(f"{signame} received. Shutting down bot...")
        shutdown_tasks.append(loop.create_task(bot.close()))

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_shutdown, sig.name)
        except (NotImplementedError, RuntimeError):
            # Windows: SIGINT llega como KeyboardInterrupt
            pass

    async with bot:
        try:
            logger.info("Attempting to log in to Discord...")
            await bot.login(settings.discord_token)
        except Exception:
            logger.exception("Failed to log in to Discord. Check the token.")
            return 1
        await bot.connect()
        if shutdown_tasks:
            await asyncio.gather(*shutdown_tasks)

    return 0
