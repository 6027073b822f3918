import logging
from typing import Iterable, List

import aiohttp
from pydantic import TypeAdapter, ValidationError

from services.models import Achievement, DailySet
from utils.config import GW2_API_BASE

logger = logging.getLogger(__name__)

_ACHIEVEMENTS = TypeAdapter(List[Achievement])


class Gw2ApiError(Exception):
    """Base error for failed Guild Wars 2 API calls"""

    label = "API Error"

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return f"{self.label}: {self.cause}"


class NetworkError(Gw2ApiError):
    label = "Network Error"


class DecodeError(Gw2ApiError):
    label = "Decode Error"


class Gw2Client:
    """Client for the two achievement endpoints the bot reads"""

    def __init__(self, base_url: str = GW2_API_BASE, session_factory=aiohttp.ClientSession):
        self.base_url = base_url.rstrip('/')
        self._session_factory = session_factory

    def dailies_uri(self) -> str:
        return f"{self.base_url}/achievements/daily/tomorrow"

    def achievements_uri(self, ids: Iterable[int]) -> str:
        # An empty id list is sent as-is, the API decides what that means
        return f"{self.base_url}/achievements?ids={','.join(str(i) for i in ids)}"

    async def fetch_dailies(self) -> DailySet:
        """Get tomorrow's dailies"""
        body = await self._get_text(self.dailies_uri())
        try:
            return DailySet.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(e) from e

    async def fetch_achievements(self, ids: Iterable[int]) -> List[Achievement]:
        """Get achievements by id, in the order the API returns them"""
        body = await self._get_text(self.achievements_uri(ids))
        try:
            return _ACHIEVEMENTS.validate_json(body)
        except ValidationError as e:
            raise DecodeError(e) from e

    async def _get_text(self, uri: str) -> str:
        logger.info(f"Uri Requested: {uri}")
        try:
            async with self._session_factory() as session:
                async with session.get(uri) as response:
                    response.raise_for_status()
                    return await response.text()
        except UnicodeDecodeError as e:
            raise DecodeError(e) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise NetworkError(e) from e
