"""
Punto de entrada: `python -m battlemetricspresence` o `battlemetrics-presence`.
By Killerbite95
"""

import asyncio
import logging
import sys

from .bot import run_bot
from .config import load_settings_or_exit
from .log import setup_logging

logger = logging.getLogger("killerbite95.battlemetricspresence")


def main() -> None:
    setup_logging()
    settings = load_settings_or_exit()

    try:
        exit_code = asyncio.run(run_bot(settings))
    except KeyboardInterrupt:
        logger.info("SIGINT received. Shutting down bot...")
        exit_code = 0

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
