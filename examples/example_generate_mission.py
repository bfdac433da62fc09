"""
Example: generate a maritime patrol mission and export its briefing.

A fixed seed makes the mission reproducible (apart from the clock); set
SEED = None for a different mission every run.
"""
import os
import sys

# Add maripat to path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from maripat import (
    InvalidParameters,
    MissionGenerator,
    PlanningSession,
    Randomizer,
    setup_logger,
)

BASE_ID = "KNHK"                 # NAS Patuxent River
MISSION_TYPE = "MARITIME_PATROL"
PATROL_AREA = None               # None: the base's own region
SEED = 42
OUTPUT_DIR = os.path.join(ROOT, "briefings")


def main():
    setup_logger(log_file=os.path.join(OUTPUT_DIR, "missions.log"), console=False)

    generator = MissionGenerator(randomizer=Randomizer(seed=SEED), verbose=True)
    session = PlanningSession(generator)
    try:
        session.generate(BASE_ID, MISSION_TYPE, PATROL_AREA)
    except InvalidParameters as e:
        print(f"Mission generation failed: {e}")
        return 1

    print(session.briefing())
    path = session.export(OUTPUT_DIR)
    print(f"\n✓ Briefing saved: {path}")

    print("\n" + "="*60)
    print("MISSION SUMMARY:")
    print("="*60)
    for key, value in session.summary().items():
        print(f"  {key:>13}: {value}")
    if generator.last_gaps:
        print("\nFilled from defaults:")
        for gap in generator.last_gaps:
            print(f"  {gap.table}[{gap.key}] -> {gap.fallback}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
