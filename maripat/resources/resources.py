import json
import os
from ..misc.logger import create_logger

_logger = create_logger(verbose=False, name="Resources")

_THIS_DIR = os.path.dirname(__file__)
BASES_DB = 'bases.json'
PATROL_AREAS_DB = 'patrol_areas.json'
MISSION_TYPES_DB = 'mission_types.json'


def resource_path(file_name: str) -> str:
    """Absolute path of a data file shipped next to this module."""
    return os.path.join(_THIS_DIR, file_name)


def load_json_data(file_name: str) -> dict:
    """Loads a JSON file from the package data; returns {} when it is missing or malformed."""
    try:
        with open(resource_path(file_name), "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        _logger.warning(f"Could not load JSON data from {file_name}: {e}")
        return {}
    if not isinstance(data, dict):
        _logger.warning(f"Ignoring {file_name}: top-level JSON value is not an object")
        return {}
    return data


def get_base_database() -> dict:
    """Returns the raw base table keyed by base id."""
    return load_json_data(BASES_DB).get("bases", {})


def get_patrol_area_database() -> dict:
    """Returns the raw patrol area table keyed by area id."""
    return load_json_data(PATROL_AREAS_DB).get("patrol_areas", {})


def get_mission_type_database() -> dict:
    """Returns the raw mission type table keyed by mission type id."""
    return load_json_data(MISSION_TYPES_DB).get("mission_types", {})
