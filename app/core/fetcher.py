import asyncio
import logging

import aiohttp

from app.core.errors import FetchError

logger = logging.getLogger("mrt.fetcher")

DEFAULT_TIMEOUT = 10.0


class Fetcher:
    """Single-shot GET against the upstream site.

    A new session is opened per call and closed before returning; there is no
    retry or caching, the first failure is raised as `FetchError`.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        # a total <= 0 would disable the aiohttp timeout altogether
        self.timeout = timeout if timeout > 0 else DEFAULT_TIMEOUT

    async def fetch(self, url: str) -> bytes:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as resp:
                    if not 200 <= resp.status < 300:
                        logger.warning(f"Upstream {url} returned status {resp.status}")
                        raise FetchError(f"Upstream returned status {resp.status}", status=resp.status)
                    data = await resp.read()
        except asyncio.TimeoutError as e:
            logger.warning(f"Timed out after {self.timeout}s fetching {url}")
            raise FetchError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise FetchError(f"Request to {url} failed: {e}") from e
        logger.debug(f"Fetched {len(data)} bytes from {url}")
        return data
