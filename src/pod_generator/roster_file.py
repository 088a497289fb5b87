from pathlib import Path
from typing import Any

import yaml

from pod_generator.services.roster import RosterEntry


class RosterFileError(Exception):
    """Raised when a roster file is missing or malformed."""


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw:
        raise RosterFileError(f"{context}: missing required field '{field}'")
    return raw[field]


def parse_entry(raw: Any, index: int) -> RosterEntry:
    context = f"participant #{index}"
    if not isinstance(raw, dict):
        raise RosterFileError(f"{context}: expected a mapping, got {type(raw).__name__}")

    name = _require_field(raw, "name", context)
    if not isinstance(name, str):
        raise RosterFileError(f"{context}: 'name' must be a string, got {type(name).__name__}")
    raw_tiers = _require_field(raw, "tiers", context)
    if isinstance(raw_tiers, (str, int, float)):
        raw_tiers = [raw_tiers]
    if not isinstance(raw_tiers, list):
        raise RosterFileError(f"{context}: 'tiers' must be a list")

    group = raw.get("group")
    return RosterEntry(
        name=name,
        tiers=tuple(raw_tiers),
        group=str(group) if group is not None else None,
    )


def parse_roster(data: Any) -> list[RosterEntry]:
    if not isinstance(data, dict) or "participants" not in data:
        raise RosterFileError("Roster must have a top-level 'participants' list")
    raw_entries = data["participants"]
    if not isinstance(raw_entries, list):
        raise RosterFileError("'participants' must be a list")
    return [parse_entry(raw, i) for i, raw in enumerate(raw_entries, start=1)]


def load_roster_file(path: Path) -> list[RosterEntry]:
    if not path.exists():
        raise RosterFileError(f"Roster file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as err:
        raise RosterFileError(f"Could not parse {path}: {err}") from err
    return parse_roster(data)
