"""Pre-flight health check for the local Cosmos DB emulator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

import httpx

if TYPE_CHECKING:
    from editorial_workflow.config import Settings

logger = logging.getLogger(__name__)


async def check_emulators(settings: Settings) -> bool:
    """Verify the Cosmos DB emulator is reachable. Return False if it is down."""
    cosmos_url = settings.cosmos.endpoint
    if not cosmos_url:
        logger.error("COSMOS_ENDPOINT is not set, add it to .env (see .env.example)")
        return False
    if cosmos_url.startswith("https://"):
        return True

    async with httpx.AsyncClient(timeout=3) as client:
        try:
            await client.get(f"{cosmos_url.rstrip('/')}/")
        except httpx.ConnectError:
            parsed = urlparse(cosmos_url)
            logger.error("Cosmos DB emulator is not running at %s", parsed.netloc)
            logger.error("Start the Cosmos DB emulator or set COSMOS_ENDPOINT to a cloud account")
            return False
    return True
