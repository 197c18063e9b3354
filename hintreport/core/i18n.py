"""Localized display names for categories."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .metadata import load_yaml_config

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
DEFAULT_LANGUAGE = "en"

_CATALOGS: Dict[str, Dict[str, str]] = {}


def _load_catalogs() -> None:
    """Load every catalog shipped in the locales directory."""
    if _CATALOGS:
        return

    for path in sorted(LOCALES_DIR.glob("*.yaml")):
        _CATALOGS[path.stem.lower()] = {
            k: str(v) for k, v in load_yaml_config(path).items()
        }


_load_catalogs()


def available_languages() -> List[str]:
    return sorted(_CATALOGS)


def _resolve_catalog(language: Optional[str]) -> Dict[str, str]:
    """Pick the catalog for a language tag like ``es`` or ``es-ES``."""
    if language:
        tag = language.lower().replace("_", "-")
        for candidate in (tag, tag.split("-")[0]):
            if candidate in _CATALOGS:
                return _CATALOGS[candidate]
        logger.debug("No catalog for language %s, using %s", language, DEFAULT_LANGUAGE)

    return _CATALOGS.get(DEFAULT_LANGUAGE, {})


def get_category_name(category: str, language: Optional[str] = None) -> str:
    """Get the display name of a category.

    Args:
        category: Category key (case-insensitive)
        language: Language tag; the unlocalized (English) name is used when omitted

    Returns:
        Display name, or the key itself for unknown categories
    """
    key = category.lower()
    return _resolve_catalog(language).get(key, key)
