import pytest

from battlemetricspresence.models import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(discord_token="token-123", server_id="4242", update_interval=30)


@pytest.fixture
def attributes() -> dict:
    """Documento `data.attributes` típico de un servidor de Rust."""
    return {
        "name": "Rustafied.com - US Long III",
        "players": 45,
        "maxPlayers": 100,
        "status": "online",
        "details": {
            "map": "Procedural Map",
            "rust_queued_players": 0,
        },
    }
