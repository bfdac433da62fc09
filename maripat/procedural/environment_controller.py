from __future__ import annotations

from dataclasses import dataclass

from ..classes.mission_objects import WeatherSnapshot
from .randomizer import Randomizer

WEATHER_CONDITIONS = ["CLEAR", "PARTLY CLOUDY", "OVERCAST", "LIGHT RAIN", "MODERATE RAIN"]


@dataclass
class EnvironmentController:
    """Samples the weather snapshot printed in the briefing."""
    rng: Randomizer

    def sample_weather(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            condition=self.rng.choice(WEATHER_CONDITIONS),
            wind_direction_deg=self.rng.randint(0, 359),
            wind_speed_kt=self.rng.randint(5, 29),
            visibility_sm=self.rng.randint(3, 10),
            ceiling_ft=self.rng.randint(5000, 24999),
            temperature_c=self.rng.randint(5, 34),
            pressure_inhg=round(self.rng.uniform(29.50, 30.50), 2),
        )
