from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Gw2Model(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        """Serialize back to the API's JSON shape"""
        return self.model_dump(mode="json", exclude_none=True)


class Expansion(str, Enum):
    GUILD_WARS_2 = "GuildWars2"
    HEART_OF_THORNS = "HeartOfThorns"
    PATH_OF_FIRE = "PathOfFire"


class Level(Gw2Model):
    min: StrictInt
    max: StrictInt


class DailyEntry(Gw2Model):
    id: StrictInt
    level: Level
    required_access: List[Expansion]


class DailySet(Gw2Model):
    """Tomorrow's dailies, one list per game mode"""

    pve: List[DailyEntry]
    pvp: List[DailyEntry]
    wvw: List[DailyEntry]
    fractals: List[DailyEntry]


class Tier(Gw2Model):
    count: StrictInt
    points: StrictInt


class Item(Gw2Model):
    type: StrictStr
    id: StrictInt
    count: StrictInt


class Achievement(Gw2Model):
    id: StrictInt
    name: StrictStr
    description: StrictStr
    requirement: StrictStr
    locked_text: StrictStr
    type: StrictStr
    flags: List[StrictStr]
    tiers: List[Tier]
    # The API leaves out rewards and icon for some achievements
    rewards: List[Item] = Field(default_factory=list)
    icon: Optional[StrictStr] = None
