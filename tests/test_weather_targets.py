import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.weather_targets import derive_target
from models.weather import Weather


@pytest.mark.parametrize(
    "temp_c, outer_required, base_warmth, outer_warmth",
    [
        (-10, True, 3, 5),
        (5, True, 3, 5),
        (5.1, True, 2, 4),
        (12, True, 2, 4),
        (12.5, False, 2, 3),
        (19, False, 2, 3),
        (19.5, False, 1, 0),
        (30, False, 1, 0),
    ],
)
def test_temperature_bands(temp_c, outer_required, base_warmth, outer_warmth):
    target = derive_target(Weather(temp_c=temp_c, chance_of_rain=0.0, wind_kph=0))

    assert target.outer_required is outer_required
    assert target.top_warmth == target.bottom_warmth == target.shoe_warmth == base_warmth
    assert target.outer_warmth == outer_warmth
    assert target.need_waterproof is False


def test_wind_raises_outerwear_target_but_caps_at_five():
    assert derive_target(Weather(temp_c=10, chance_of_rain=0.0, wind_kph=20)).outer_warmth == 5
    assert derive_target(Weather(temp_c=15, chance_of_rain=0.0, wind_kph=35)).outer_warmth == 4
    assert derive_target(Weather(temp_c=0, chance_of_rain=0.0, wind_kph=60)).outer_warmth == 5
    assert derive_target(Weather(temp_c=10, chance_of_rain=0.0, wind_kph=19.9)).outer_warmth == 4


def test_wind_does_not_change_base_layers_or_requirement():
    target = derive_target(Weather(temp_c=25, chance_of_rain=0.0, wind_kph=40))

    assert target.outer_required is False
    assert target.top_warmth == 1
    assert target.outer_warmth == 1


@pytest.mark.parametrize(
    "chance_of_rain, is_snow, expected",
    [
        (0.39, False, False),
        (0.4, False, True),
        (0.9, False, True),
        (0.0, True, True),
    ],
)
def test_waterproofing_threshold(chance_of_rain, is_snow, expected):
    target = derive_target(Weather(temp_c=8, chance_of_rain=chance_of_rain, wind_kph=5, is_snow=is_snow))

    assert target.need_waterproof is expected
