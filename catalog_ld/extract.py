from __future__ import annotations

import hashlib
from typing import Dict, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import Selectors
from .types import DetailFields


def _text(el: Optional[Tag], separator: str = " ") -> str:
    return separator.join(el.strings).strip() if el is not None else ""


def synthesize_sku(name: str) -> str:
    """Stable fallback identifier: "sku-" plus the first 8 hex chars of sha256(name)."""
    digest = hashlib.sha256(name.encode("utf-8")).hexdigest()
    return f"sku-{digest[:8]}"


def _extract_parameters(soup: BeautifulSoup, selectors: Selectors, vocabulary: Dict[str, str]) -> Dict[str, str]:
    found: Dict[str, str] = {}
    for row in soup.select(selectors.parameter_row):
        label = _text(row.select_one(selectors.parameter_label)).lower()
        value = _text(row.select_one(selectors.parameter_value))
        field_name = vocabulary.get(label)
        if field_name:
            # later rows overwrite earlier ones
            found[field_name] = value
    return found


def parse_detail(
    html: str,
    name: str,
    selectors: Selectors,
    vocabulary: Dict[str, str],
    default_description: str,
) -> DetailFields:
    soup = BeautifulSoup(html, "lxml")

    desc_el = soup.select_one(selectors.description)
    description = _text(desc_el) if desc_el is not None else default_description

    sku = _text(soup.select_one(selectors.sku), separator="") or synthesize_sku(name)

    params = _extract_parameters(soup, selectors, vocabulary)
    return DetailFields(
        description=description,
        sku=sku,
        material=params.get("material"),
        volume=params.get("volume"),
        color=params.get("color"),
    )
