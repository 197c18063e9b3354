"""Static metadata used when building aggregates.

Third-party service information and category images are loaded once, when the
module is imported, and exposed as read-only mappings. Values drawn from them
must be copied before being modified.
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIGS_DIR = Path(__file__).resolve().parent.parent / "configs"


@dataclass
class ThirdPartyLogo:
    """Logo of a third-party service."""
    name: str
    url: str
    alt: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url, "alt": self.alt}


@dataclass
class ThirdPartyInfo:
    """Information about the third-party service behind a rule."""
    logo: ThirdPartyLogo
    link: str
    details: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logo": self.logo.to_dict(),
            "link": self.link,
            "details": self.details,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThirdPartyInfo":
        logo = data.get("logo", {})
        return cls(
            logo=ThirdPartyLogo(
                name=logo.get("name", ""),
                url=logo.get("url", ""),
                alt=logo.get("alt", ""),
            ),
            link=data.get("link", ""),
            details=bool(data.get("details", False)),
        )


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML (or JSON) mapping from disk.

    Args:
        path: File to load

    Returns:
        Parsed mapping with lower-cased top-level keys

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

    return {str(k).lower(): v for k, v in data.items()}


THIRD_PARTY_SERVICES: Mapping[str, Dict[str, Any]] = MappingProxyType(
    load_yaml_config(CONFIGS_DIR / "third-party-service-config.yaml")
)

CATEGORY_IMAGES: Mapping[str, str] = MappingProxyType(
    load_yaml_config(CONFIGS_DIR / "category-images.yaml")
)


def get_third_party_info(base_name: str) -> Optional[Dict[str, Any]]:
    """Return a private copy of the third-party entry for a rule base name."""
    entry = THIRD_PARTY_SERVICES.get(base_name.lower())
    if entry is None:
        return None

    logger.debug("Third-party service found for %s", base_name)
    return copy.deepcopy(entry)


def get_category_image(category: str) -> Optional[str]:
    return CATEGORY_IMAGES.get(category.lower())
