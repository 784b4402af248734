from dataclasses import dataclass
from typing import Optional

from .config import IN_STOCK


@dataclass
class ListingEntry:
    name: str
    url: str
    image: str
    price_text: str
    price: float


@dataclass
class DetailFields:
    description: str
    sku: str
    material: Optional[str] = None
    volume: Optional[str] = None
    color: Optional[str] = None


@dataclass
class Product:
    name: str
    image: str
    description: str
    sku: str
    price: float
    url: str
    material: Optional[str] = None
    volume: Optional[str] = None
    color: Optional[str] = None
    availability: str = IN_STOCK

    @classmethod
    def from_parts(cls, entry: ListingEntry, detail: DetailFields, availability: str = IN_STOCK) -> "Product":
        return cls(
            name=entry.name,
            image=entry.image,
            description=detail.description,
            sku=detail.sku,
            price=entry.price,
            url=entry.url,
            material=detail.material,
            volume=detail.volume,
            color=detail.color,
            availability=availability,
        )
