"""
Publicación de la presencia del bot en Discord.
By Killerbite95
"""

import asyncio
import logging

import discord

from .models import PresenceState, PublishResult

logger = logging.getLogger("killerbite95.battlemetricspresence.presence")


class PresencePublisher:
    """Publica un PresenceState en el cliente de Discord (best-effort)."""

    def __init__(self, client: discord.Client):
        self.client = client
        self._lock = asyncio.Lock()

    @staticmethod
    def build_activity(state: PresenceState) -> discord.Activity:
        """Construye la actividad de Discord para un estado."""
        return discord.Activity(type=state.mood.activity_type, name=state.text)

    async def publish(self, state: PresenceState) -> PublishResult:
        """
        Actualiza la presencia del bot.

        Args:
            state: Texto y estado a publicar

        Returns:
            PublishResult; los errores se registran y nunca se propagan
        """
        async with self._lock:
            try:
                await self.client.change_presence(
                    activity=self.build_activity(state),
                    status=state.mood.status
                )
            except Exception as e:
                logger.error("Failed to update Discord presence.", exc_info=e)
                return PublishResult(success=False, state=state, error=e)

        logger.debug(f"Presencia actualizada: {state.text} ({state.mood.name})")
        return PublishResult(success=True, state=state)
