from __future__ import annotations

import math
from typing import Dict, Tuple

from .randomizer import Randomizer

# (level, probability); sampled by cumulative threshold in this order
THREAT_LEVELS: Tuple[Tuple[str, float], ...] = (
    ("LOW", 0.40),
    ("MODERATE", 0.35),
    ("ELEVATED", 0.20),
    ("HIGH", 0.05),
)

THREAT_DESCRIPTIONS: Dict[str, str] = {
    "LOW": "Routine patrol environment. Standard precautions apply.",
    "MODERATE": "Heightened awareness required. Additional reporting protocols in effect.",
    "ELEVATED": "Increased security measures. Avoid unnecessary risks.",
    "HIGH": "Significant threat indicators. Mission-critical security protocols active.",
}


def check_weights(levels: Tuple[Tuple[str, float], ...] = THREAT_LEVELS) -> None:
    """Raise ValueError unless the weights are non-negative and sum to 1."""
    total = sum(weight for _, weight in levels)
    if any(weight < 0 for _, weight in levels) or not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"Threat level weights must be non-negative and sum to 1.0, got {total}")


check_weights()


def sample_threat_level(rng: Randomizer, levels: Tuple[Tuple[str, float], ...] = THREAT_LEVELS) -> str:
    return rng.weighted_choice(levels)


def describe_threat(level: str) -> str:
    """Briefing text for a level; unknown levels read as LOW."""
    return THREAT_DESCRIPTIONS.get(level, THREAT_DESCRIPTIONS["LOW"])
