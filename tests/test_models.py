import pytest
from pydantic import ValidationError

from services.models import Achievement, DailySet, Expansion

from conftest import make_achievement, make_daily


def test_daily_set_round_trip(dailies_payload):
    dailies = DailySet.model_validate(dailies_payload)

    assert dailies.to_dict() == dailies_payload


def test_daily_set_decodes_expansions(dailies):
    assert dailies.pve[1].required_access == [Expansion.HEART_OF_THORNS, Expansion.PATH_OF_FIRE]
    assert dailies.fractals[0].level.max == 80


def test_achievement_round_trip():
    payload = make_achievement(
        2275, "Daily Tier 4 Nightmare",
        tiers=[{"count": 1, "points": 0}, {"count": 5, "points": 10}],
        flags=["Pve", "Daily", "Permanent"],
    )

    assert Achievement.model_validate(payload).to_dict() == payload


def test_achievement_without_icon_or_rewards():
    payload = make_achievement(1, "Daily Recommended Fractal Scale 2")
    del payload["icon"]
    del payload["rewards"]

    achievement = Achievement.model_validate(payload)

    assert achievement.icon is None
    assert achievement.rewards == []
    assert "icon" not in achievement.to_dict()


def test_records_are_frozen(achievements):
    with pytest.raises(ValidationError):
        achievements[0].name = "Renamed"


def test_unknown_expansion_is_rejected():
    with pytest.raises(ValidationError):
        DailySet.model_validate({
            "pve": [make_daily(1, access=("Cantha",))], "pvp": [], "wvw": [], "fractals": []
        })


@pytest.mark.parametrize("bad_id", ["7", True, 7.0])
def test_id_must_be_an_integer(bad_id):
    with pytest.raises(ValidationError):
        Achievement.model_validate(make_achievement(bad_id, "Bad id"))


def test_missing_mode_is_rejected(dailies_payload):
    del dailies_payload["wvw"]

    with pytest.raises(ValidationError, match="wvw"):
        DailySet.model_validate(dailies_payload)
