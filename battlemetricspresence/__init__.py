"""
BattleMetricsPresence - Bot de Discord
Muestra los jugadores de un servidor de BattleMetrics en la presencia del bot.

By Killerbite95

Estructura del paquete:
    - bot.py: Cliente de Discord con la tarea de actualización y el ciclo de vida
    - config.py: Carga y validación de variables de entorno
    - fetcher.py: Cliente HTTP para la API de BattleMetrics
    - extractor.py: Extracción de campos y formato del texto de estado
    - presence.py: Publicación de la presencia en Discord
    - models.py: Dataclasses y Enums para estructuración de datos
    - exceptions.py: Excepciones personalizadas
    - log.py: Configuración de logging
"""

from .bot import BattleMetricsPresence, run_bot

__all__ = ["BattleMetricsPresence", "run_bot"]
__version__ = "1.0.0"
__author__ = "Killerbite95"
