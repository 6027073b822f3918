import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from services.gw2_api import Gw2Client
from services.models import Achievement, DailySet

logger = logging.getLogger(__name__)

# The achievements come back in requested order: three recommended fractals,
# then four tiers for each of three daily fractals. The API does not promise
# this layout, so a short response is rejected rather than guessed at.
RECOMMENDED_INDICES = (0, 1, 2)
DAILY_INDICES = (6, 10, 14)
REQUIRED_ACHIEVEMENTS = max(RECOMMENDED_INDICES + DAILY_INDICES) + 1

DAILY_FIELD = "Daily Fractals"
RECOMMENDED_FIELD = "Recommended Fractals"


class FractalIndexError(IndexError):
    def __init__(self, count: int):
        super().__init__(
            f"Expected at least {REQUIRED_ACHIEVEMENTS} fractal achievements, got {count}"
        )
        self.count = count


@dataclass(frozen=True)
class FractalSummary:
    daily: Tuple[str, ...]
    recommended: Tuple[str, ...]

    @property
    def daily_text(self) -> str:
        return ", ".join(self.daily)

    @property
    def recommended_text(self) -> str:
        return ", ".join(self.recommended)

    def fields(self) -> List[Tuple[str, str]]:
        return [(DAILY_FIELD, self.daily_text), (RECOMMENDED_FIELD, self.recommended_text)]


def fractal_ids(dailies: DailySet) -> List[int]:
    return [entry.id for entry in dailies.fractals]


def select_fractals(achievements: Sequence[Achievement]) -> FractalSummary:
    if len(achievements) < REQUIRED_ACHIEVEMENTS:
        raise FractalIndexError(len(achievements))

    return FractalSummary(
        daily=tuple(achievements[i].name for i in DAILY_INDICES),
        recommended=tuple(achievements[i].name for i in RECOMMENDED_INDICES)
    )


async def resolve_fractals(client: Gw2Client) -> FractalSummary:
    """Fetch tomorrow's fractal dailies and name them"""
    dailies = await client.fetch_dailies()
    ids = fractal_ids(dailies)
    achievements = await client.fetch_achievements(ids)
    logger.debug(f"Resolved {len(achievements)} fractal achievements for ids {ids}")
    return select_fractals(achievements)
