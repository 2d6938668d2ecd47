"""Helpers to load the built-in record field namings."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

from ..schemas.edss import FieldNaming

__all__ = [
    "NAMING_ALIASES",
    "NAMING_DEFAULT",
    "NAMING_REDCAP_PT",
    "UnknownNamingError",
    "available_namings",
    "load_naming",
]

NAMING_DEFAULT = "default"
NAMING_REDCAP_PT = "redcap_pt"

NAMING_ALIASES: Dict[str, str] = {"legacy": NAMING_REDCAP_PT}

_PACKAGE = __name__ + ".field_namings"


class UnknownNamingError(KeyError):
    """Raised when no built-in naming matches the requested id."""


def available_namings() -> tuple[str, ...]:
    names = [
        entry.name[: -len(".yml")]
        for entry in resources.files(_PACKAGE).iterdir()
        if entry.name.endswith(".yml")
    ]
    return tuple(sorted(names))


@lru_cache(maxsize=8)
def _load_raw(naming_id: str) -> Dict[str, Any]:
    resource = resources.files(_PACKAGE).joinpath(f"{naming_id}.yml")
    if not resource.is_file():
        raise UnknownNamingError(naming_id)
    with resource.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def load_naming(naming_id: str) -> FieldNaming:
    """Load the YAML naming identified by *naming_id* (aliases accepted).

    Each call builds a new model so callers never share the table dict.
    """

    canonical = NAMING_ALIASES.get(naming_id, naming_id)
    data = _load_raw(canonical)
    return FieldNaming.model_validate({"fields": data.get("fields", {})})
