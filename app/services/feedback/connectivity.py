"""
Connectivity Monitor Module

Decides whether the network sources of the feedback pipeline should be tried at all.
Offline mode short-circuits straight to local feedback; an optional probe URL lets a
deployment detect a lost uplink before spending the remote retry budget.

Dependencies:
- httpx: For the optional reachability probe.
- loguru: For logging operations.

Author: @kcaparas1630
"""

from typing import Optional
import httpx
from loguru import logger

PROBE_TIMEOUT_SECONDS = 2.0


class ConnectivityMonitor:
    def __init__(
        self,
        offline_mode: bool = False,
        probe_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.offline_mode = offline_mode
        self.probe_url = probe_url
        self.client = client

    async def is_online(self) -> bool:
        if self.offline_mode:
            logger.info("[CONNECTIVITY] Offline mode enabled")
            return False
        if not self.probe_url:
            return True

        try:
            if self.client is not None:
                await self.client.head(self.probe_url, timeout=PROBE_TIMEOUT_SECONDS)
            else:
                async with httpx.AsyncClient() as client:
                    await client.head(self.probe_url, timeout=PROBE_TIMEOUT_SECONDS)
            return True
        except httpx.HTTPError as e:
            logger.warning(f"[CONNECTIVITY] Probe to {self.probe_url} failed, treating as offline: {e}")
            return False
