"""
Example demonstrating base lookup and patrol area matching.

This example shows:
1. Bases grouped by country, as a base picker would list them
2. Primary and secondary patrol areas for a few bases
3. Patrol areas ranked by distance from a base
4. The default four-point patrol pattern and a denser eight-point one
"""
import os
import sys

# Add maripat to path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from maripat import get_catalog, format_coordinate
from maripat.procedural import area_options, generate_waypoints, resolve_patrol_areas
from maripat.procedural.area_matching import rank_patrol_areas_by_distance


def main():
    catalog = get_catalog()

    print("\n" + "="*60)
    print("BASES BY COUNTRY:")
    print("="*60)
    for country, bases in catalog.bases_by_country().items():
        print(f"  {country}: {', '.join(b.display_code for b in bases)}")

    print("\n" + "="*60)
    print("PATROL AREA MATCHING:")
    print("="*60)
    for base_id in ("KNHK", "EDXF", "LPMT", "PHNL"):
        base = catalog.get_base(base_id)
        selection = resolve_patrol_areas(base)
        print(f"\n{base.name} ({base.display_code}) at {format_coordinate(base.coordinates)}")
        print(f"  Primary:   {', '.join(selection.primary)}")
        print(f"  Secondary: {', '.join(selection.secondary) or '-'}")
        for area_id, name, group in area_options(base, catalog.patrol_areas):
            print(f"    [{group}] {name}")

        nearest = rank_patrol_areas_by_distance(base, catalog.patrol_areas)[:3]
        print("  Nearest area centres: " + ", ".join(f"{a} ({d:.0f} km)" for a, d in nearest))

    print("\n" + "="*60)
    print("PATROL PATTERNS:")
    print("="*60)
    for area_id in ("Atlantic", "Pacific"):
        area = catalog.get_patrol_area(area_id)
        for count in (4, 8):
            print(f"\n{area.name}, {count} waypoints:")
            for wp in generate_waypoints(area, count):
                print(f"  {wp.name}: {format_coordinate(wp.coordinate)}")


if __name__ == "__main__":
    main()
