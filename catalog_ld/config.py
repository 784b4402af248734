from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Tuple


DEFAULT_BASE_URL = "https://www.soulofclay.com"

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SoulOfClayScraper/1.0)"

DEFAULT_DESCRIPTION = "Ručně vyráběná keramika Soul of Clay"

IN_STOCK = "https://schema.org/InStock"

# Lower-cased parameter table labels mapped onto Product attributes.
PARAMETER_VOCABULARY: Dict[str, str] = {
    "materiál": "material",
    "objem": "volume",
    "barva": "color",
}


@dataclass(frozen=True)
class Selectors:
    """CSS selectors describing the storefront markup."""

    product_card: str = ".product"
    name: str = ".name"
    link: str = "a"
    image: str = "img"
    image_attr: str = "data-src"
    price: str = ".price-final strong"

    description: str = ".product-detail-description"
    sku: str = ".code span"
    parameter_row: str = ".parameter-table tr"
    parameter_label: str = "th"
    parameter_value: str = "td"


@dataclass(frozen=True)
class PostalAddress:
    street_address: str
    postal_code: str
    address_locality: str
    address_country: str


@dataclass(frozen=True)
class ContactPoint:
    contact_type: str
    email: str


@dataclass(frozen=True)
class Brand:
    name: str
    url: str
    logo: str
    description: str
    founder: str
    founding_location: str
    same_as: Tuple[str, ...]
    address: PostalAddress
    contact: ContactPoint
    blog_headline: str
    blog_url: str


@dataclass(frozen=True)
class OfferDefaults:
    currency: str = "CZK"
    price_valid_until: str = "2025-12-31"


DEFAULT_BRAND = Brand(
    name="Soul of Clay",
    url=DEFAULT_BASE_URL,
    logo=DEFAULT_BASE_URL,
    description=(
        "Autorské kameninové nádobí od Evy Slabé, vyráběné malosériově "
        "s vlastnoručně míchanými glazurami."
    ),
    founder="Eva Slabá",
    founding_location="Praha, Česká republika",
    same_as=("https://www.facebook.com/hlavahlinena",),
    address=PostalAddress(
        street_address="Doubravice 1.díl 29",
        postal_code="257 22",
        address_locality="Přestavlky u Čerčan",
        address_country="CZ",
    ),
    contact=ContactPoint(
        contact_type="Customer Service",
        email="eva@soulofclay.com",
    ),
    blog_headline="Uhlíková stopa hrnku",
    blog_url="https://www.soulofclay.com/blog/uhlikova-stopa-hrnku/",
)


@dataclass(frozen=True)
class SiteConfig:
    """Everything the pipeline needs to know about one storefront.

    Defaults describe the Soul of Clay shop; tests build their own instances
    against synthetic markup.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 10.0
    detail_delay_seconds: float = 0.5
    detail_attempts: int = 3
    retry_delay_seconds: float = 1.0
    limit: int = 0
    default_description: str = DEFAULT_DESCRIPTION
    availability: str = IN_STOCK
    selectors: Selectors = field(default_factory=Selectors)
    vocabulary: Dict[str, str] = field(default_factory=lambda: dict(PARAMETER_VOCABULARY))
    brand: Brand = DEFAULT_BRAND
    offer: OfferDefaults = field(default_factory=OfferDefaults)

    def with_overrides(self, **overrides) -> "SiteConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_CONFIG = SiteConfig()
