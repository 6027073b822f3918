"""Shared test fixtures. No Discord or GW2 API connection is ever made."""
from pathlib import Path

import pytest

from services.models import Achievement, DailySet

HELLO_IMAGE = str(Path(__file__).resolve().parent.parent / "assets" / "hello.png")

FRACTAL_IDS = list(range(101, 116))


def make_daily(daily_id, access=("GuildWars2",)):
    return {"id": daily_id, "level": {"min": 1, "max": 80}, "required_access": list(access)}


def make_achievement(achievement_id, name, **overrides):
    data = {
        "id": achievement_id,
        "name": name,
        "description": "",
        "requirement": f"Complete {name}.",
        "locked_text": "",
        "type": "Default",
        "flags": ["Pve", "Daily"],
        "tiers": [{"count": 1, "points": 0}],
        "rewards": [{"type": "Item", "id": 70877, "count": 1}],
        "icon": "https://render.guildwars2.com/file/fractal.png",
    }
    data.update(overrides)
    return data


@pytest.fixture
def dailies_payload():
    return {
        "pve": [make_daily(1984), make_daily(2918, access=("HeartOfThorns", "PathOfFire"))],
        "pvp": [make_daily(3449)],
        "wvw": [make_daily(1844)],
        "fractals": [make_daily(i) for i in FRACTAL_IDS],
    }


@pytest.fixture
def dailies(dailies_payload):
    return DailySet.model_validate(dailies_payload)


@pytest.fixture
def achievements_payload():
    return [make_achievement(fid, f"Ach{i}") for i, fid in enumerate(FRACTAL_IDS)]


@pytest.fixture
def achievements(achievements_payload):
    return [Achievement.model_validate(a) for a in achievements_payload]


class FakeGw2Client:
    """Stands in for Gw2Client and records what the pipeline asked for"""

    def __init__(self, dailies=None, achievements=None, dailies_error=None, achievements_error=None):
        self.dailies = dailies
        self.achievements = achievements
        self.dailies_error = dailies_error
        self.achievements_error = achievements_error
        self.dailies_calls = 0
        self.requested_ids = []

    async def fetch_dailies(self):
        self.dailies_calls += 1
        if self.dailies_error:
            raise self.dailies_error
        return self.dailies

    async def fetch_achievements(self, ids):
        self.requested_ids.append(list(ids))
        if self.achievements_error:
            raise self.achievements_error
        return self.achievements
