from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Tag
from bs4.formatter import HTMLFormatter

from .config import Selectors
from .types import ListingEntry


logger = logging.getLogger(__name__)

TAG_RE = re.compile(r"<[^>]*>")
NOT_PRICE_CHAR_RE = re.compile(r"[^0-9,]")


def _escape_text(text: str) -> str:
    return EntitySubstitution.substitute_xml(text).replace("\xa0", "&nbsp;")


# Serializes markup the way browsers do for innerHTML: &, <, > and non-breaking spaces escaped.
INNER_HTML_FORMATTER = HTMLFormatter(entity_substitution=_escape_text)


def _inner_html(el: Optional[Tag]) -> Optional[str]:
    return el.decode_contents(formatter=INNER_HTML_FORMATTER) if el is not None else None


def strip_tags(markup: str) -> str:
    return TAG_RE.sub("", markup).strip()


def normalize_price(text: str) -> float:
    """
    Turn a formatted price such as "1 234,50 Kč" into 1234.5.
    Unparsable text logs a warning and yields 0.0.
    """
    cleaned = NOT_PRICE_CHAR_RE.sub("", text).replace(",", ".")
    try:
        return float(cleaned)
    except ValueError:
        logger.warning("⚠️ could not parse price %r, using 0.0", text)
        return 0.0


def _parse_card(card: Tag, base_url: str, selectors: Selectors) -> ListingEntry:
    raw_name = _inner_html(card.select_one(selectors.name)) or ""
    name = strip_tags(raw_name)

    anchor = card.select_one(selectors.link)
    relative_url = (anchor.get("href") if anchor is not None else None) or "/"
    url = f"{base_url}{relative_url}"

    img = card.select_one(selectors.image)
    image = (img.get(selectors.image_attr) if img is not None else None) or ""
    image = image.replace("\n", "")

    price_text = _inner_html(card.select_one(selectors.price))
    if price_text is None:
        price_text = "0"

    return ListingEntry(
        name=name,
        url=url,
        image=image,
        price_text=price_text,
        price=normalize_price(price_text),
    )


def parse_listing(html: str, base_url: str, selectors: Selectors, limit: int = 0) -> List[ListingEntry]:
    """Collect listing entries from the storefront root page, in document order."""
    soup = BeautifulSoup(html, "lxml")
    cards = soup.select(selectors.product_card)
    if limit > 0:
        cards = cards[:limit]
    return [_parse_card(card, base_url, selectors) for card in cards]
