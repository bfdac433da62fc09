from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..classes.mission_objects import Communications
from .randomizer import Randomizer

COUNTRY_CALLSIGNS: Dict[str, List[str]] = {
    "USA": ["POSEIDON", "CLIPPER", "SEAHAWK", "NEPTUNE", "MARINER"],
    "UK": ["KINGFISHER", "NIMROD", "GUARDIAN", "SENTINEL", "PHOENIX"],
    "France": ["ATLANTIQUE", "FALCON", "DAUPHIN", "MISTRAL", "NAVAL"],
    "Germany": ["ORION", "SEAKING", "HURRICANE", "VIKING", "MARITIME"],
    "Italy": ["ATLANTICO", "SPARTAN", "HARRIER", "VESUVIO", "MARE"],
    "Canada": ["AURORA", "MAPLE", "ARCTIC", "PACIFIC", "ATLANTIC"],
    "Australia": ["WEDGETAIL", "SOUTHERN", "PACIFIC", "ANZAC", "CORAL"],
    "Netherlands": ["ORANGE", "FALCON", "SEAHORSE", "NORDKAPP", "ZUIDERZEE"],
    "Norway": ["POLAR", "VIKING", "ARCTIC", "FJORD", "MIDNIGHT"],
    "Spain": ["EAGLE", "IBERIAN", "ATLANTIC", "PELICAN", "GIBRALTAR"],
    "Portugal": ["NAVIGATOR", "ATLANTIC", "AZORES", "CORMORANT", "MAGELLAN"],
}

BASE_TYPE_CALLSIGNS: Dict[str, List[str]] = {
    "AIR_FORCE": ["EAGLE", "FALCON", "HAWK", "VIPER", "THUNDER"],
    "NAVAL_AIR": ["TRIDENT", "POSEIDON", "NEPTUNE", "ANCHOR", "WAVE"],
    "MARINE_AIR": ["DEVIL", "WARRIOR", "COBRA", "STORM", "LIGHTNING"],
    "NAVAL_BASE": ["FLEET", "HARBOR", "TIDE", "CURRENT", "DEPTH"],
}

NATO_ALPHABET = [
    "ALPHA", "BRAVO", "CHARLIE", "DELTA", "ECHO", "FOXTROT",
    "GOLF", "HOTEL", "INDIA", "JULIET", "KILO", "LIMA",
    "MIKE", "NOVEMBER", "OSCAR", "PAPA", "QUEBEC", "ROMEO",
    "SIERRA", "TANGO", "UNIFORM", "VICTOR", "WHISKEY", "XRAY",
    "YANKEE", "ZULU",
]

# Military UHF aviation band used for tactical nets (MHz)
UHF_BAND_MHZ = (250.0, 400.0)
GUARD_MHZ = "121.500"
EMERGENCY_MHZ = "243.000"


def callsign_words(country: str, base_type: Optional[str] = None) -> List[str]:
    """Country list first, then the base-type list, then the USA list."""
    if country in COUNTRY_CALLSIGNS:
        return COUNTRY_CALLSIGNS[country]
    if base_type in BASE_TYPE_CALLSIGNS:
        return BASE_TYPE_CALLSIGNS[base_type]
    return COUNTRY_CALLSIGNS["USA"]


@dataclass
class RadioCommsHelper:
    """Generates the radio plan: callsign, frequencies, authentication and IFF codes."""
    rng: Randomizer

    def callsign(self, country: str, base_type: Optional[str] = None) -> str:
        word = self.rng.choice(callsign_words(country, base_type))
        return f"{word} {self.rng.randint(1, 99):02d}"

    def frequency(self) -> str:
        return f"{self.rng.uniform(*UHF_BAND_MHZ):.3f}"

    def auth_code(self) -> str:
        first = self.rng.choice(NATO_ALPHABET)
        second = self.rng.choice(NATO_ALPHABET)
        return f"{first}-{second}-{self.rng.randint(0, 99):02d}"

    def build(self, country: str, base_type: Optional[str] = None) -> Communications:
        """Sample a complete Communications block."""
        return Communications(
            callsign=self.callsign(country, base_type),
            primary_mhz=self.frequency(),
            secondary_mhz=self.frequency(),
            maritime_mhz=self.frequency(),
            sar_mhz=self.frequency(),
            guard_mhz=GUARD_MHZ,
            emergency_mhz=EMERGENCY_MHZ,
            satcom_channel=f"SATCOM-{self.rng.randint(1, 9)}",
            authentication=self.auth_code(),
            iff_mode1=self.rng.digits(2),
            iff_mode3=self.rng.digits(4),
        )
