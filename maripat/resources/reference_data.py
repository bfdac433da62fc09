"""
Typed, in-memory reference tables: bases, patrol areas and mission types.

The tables are built once from the JSON package data and never mutated.
``get_catalog()`` returns the shared instance; tests and embedding
applications can build their own with ``ReferenceCatalog.from_raw``.

Base records come from a single unified schema. Fields that only some bases
carry (ICAO code, runway, tower frequency, elevation, capabilities) are
optional and default to ``None`` or an empty tuple.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from ..classes.mission_objects import (
    Base,
    Bounds,
    Coordinate,
    MissionTypeDefinition,
    PatrolArea,
)
from ..misc.logger import create_logger
from ..misc.validation_framework import CatalogValidator, ValidationResult
from .resources import (
    get_base_database,
    get_mission_type_database,
    get_patrol_area_database,
)


def _base_from_raw(base_id: str, raw: Mapping) -> Base:
    return Base(
        id=base_id,
        name=raw["name"],
        country=raw["country"],
        region=raw["region"],
        coordinates=Coordinate.from_pair(raw["coordinates"]),
        aircraft=tuple(raw.get("aircraft") or ()),
        description=raw.get("description", ""),
        icao=raw.get("icao"),
        base_type=raw.get("base_type"),
        runway=raw.get("runway"),
        frequency=raw.get("frequency"),
        elevation=raw.get("elevation"),
        capabilities=tuple(raw.get("capabilities") or ()),
    )


def _area_from_raw(area_id: str, raw: Mapping) -> PatrolArea:
    b = raw["bounds"]
    return PatrolArea(
        id=area_id,
        name=raw["name"],
        bounds=Bounds(north=float(b["north"]), south=float(b["south"]),
                      east=float(b["east"]), west=float(b["west"])),
        center=Coordinate.from_pair(raw["center"]),
        description=raw.get("description", ""),
        key_areas=tuple(raw.get("key_areas") or ()),
        threats=tuple(raw.get("threats") or ()),
    )


def _mission_type_from_raw(type_id: str, raw: Mapping) -> MissionTypeDefinition:
    min_h, max_h = raw["duration_hours"]
    min_alt, max_alt = raw["altitude_ft"]
    return MissionTypeDefinition(
        id=type_id,
        name=raw["name"],
        description=raw.get("description", ""),
        objectives=tuple(raw.get("objectives") or ()),
        equipment=tuple(raw.get("equipment") or ()),
        min_duration_hours=float(min_h),
        max_duration_hours=float(max_h),
        min_altitude_ft=int(min_alt),
        max_altitude_ft=int(max_alt),
        preferred_aircraft=tuple(raw.get("preferred_aircraft") or ()),
    )


@dataclass
class ReferenceCatalog:
    """Static lookup tables shared by every mission generation."""
    bases: Dict[str, Base] = field(default_factory=dict)
    patrol_areas: Dict[str, PatrolArea] = field(default_factory=dict)
    mission_types: Dict[str, MissionTypeDefinition] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, bases: Mapping, patrol_areas: Mapping, mission_types: Mapping) -> "ReferenceCatalog":
        """Build a catalog from plain dictionaries shaped like the JSON package data."""
        return cls(
            bases={k: _base_from_raw(k, v) for k, v in bases.items()},
            patrol_areas={k: _area_from_raw(k, v) for k, v in patrol_areas.items()},
            mission_types={k: _mission_type_from_raw(k, v) for k, v in mission_types.items()},
        )

    @classmethod
    def load(cls, verbose: bool = False) -> "ReferenceCatalog":
        """Load the catalog shipped with the package."""
        logger = create_logger(verbose=verbose, name="Catalog")
        catalog = cls.from_raw(get_base_database(), get_patrol_area_database(), get_mission_type_database())
        logger.info(
            f"Loaded {len(catalog.bases)} bases, {len(catalog.patrol_areas)} patrol areas, "
            f"{len(catalog.mission_types)} mission types"
        )
        return catalog

    def get_base(self, base_id: str) -> Optional[Base]:
        return self.bases.get(base_id)

    def get_patrol_area(self, area_id: str) -> Optional[PatrolArea]:
        return self.patrol_areas.get(area_id)

    def get_mission_type(self, type_id: str) -> Optional[MissionTypeDefinition]:
        return self.mission_types.get(type_id)

    def list_bases(self, region: Optional[str] = None, country: Optional[str] = None) -> List[Base]:
        """List bases, optionally filtered by region and/or country, sorted by id."""
        out = []
        for base_id in sorted(self.bases):
            base = self.bases[base_id]
            if region is not None and base.region != region:
                continue
            if country is not None and base.country != country:
                continue
            out.append(base)
        return out

    def bases_by_country(self) -> Dict[str, List[Base]]:
        """Group bases by country (countries sorted, bases sorted by name)."""
        grouped: Dict[str, List[Base]] = {}
        for base in self.bases.values():
            grouped.setdefault(base.country, []).append(base)
        return {
            country: sorted(grouped[country], key=lambda b: b.name)
            for country in sorted(grouped)
        }

    def validate(self, strict: bool = False) -> ValidationResult:
        """Check reference data integrity (regions, coordinates, bounds, preferences)."""
        return CatalogValidator(strict=strict).validate(self)


_catalog: Optional[ReferenceCatalog] = None


def get_catalog() -> ReferenceCatalog:
    """Return the shared catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        _catalog = ReferenceCatalog.load()
    return _catalog
