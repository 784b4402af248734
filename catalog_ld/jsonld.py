from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Union

from .config import Brand, OfferDefaults
from .types import Product


SCHEMA_CONTEXT = "https://schema.org"

PRODUCTS_FILE = "products.json"
SNIPPET_FILE = "output.html"
BRAND_FILE = "brand.json"
INDEX_FILE = "index.html"

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="cs">
<head>
  <meta charset="UTF-8">
  <title>{brand} - Schema</title>
</head>
<body>
  <h1>📦 {brand} – JSON-LD výstup</h1>
  <p><a href="{products}">{products}</a></p>
  <p><a href="{brand_file}">{brand_file}</a></p>
</body>
</html>"""

Node = Dict[str, Any]


def build_brand_node(brand: Brand) -> Node:
    return {
        "@type": "Organization",
        "name": brand.name,
        "url": brand.url,
        "logo": brand.logo,
        "description": brand.description,
        "founder": brand.founder,
        "foundingLocation": brand.founding_location,
        "sameAs": list(brand.same_as),
        "address": {
            "@type": "PostalAddress",
            "streetAddress": brand.address.street_address,
            "postalCode": brand.address.postal_code,
            "addressLocality": brand.address.address_locality,
            "addressCountry": brand.address.address_country,
        },
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": brand.contact.contact_type,
            "email": brand.contact.email,
        },
        "subjectOf": [
            {
                "@type": "BlogPosting",
                "headline": brand.blog_headline,
                "mainEntityOfPage": brand.blog_url,
            }
        ],
    }


def build_product_node(product: Product, brand: Brand, offer: OfferDefaults) -> Node:
    node: Node = {
        "@type": "Product",
        "name": product.name,
        "image": product.image,
        "description": product.description,
        "sku": product.sku,
        "brand": {"@type": "Brand", "name": brand.name},
        "offers": {
            "@type": "Offer",
            "priceCurrency": offer.currency,
            "price": product.price,
            "priceValidUntil": offer.price_valid_until,
            "url": product.url,
            "availability": product.availability,
            "identifierExists": False,
        },
        "subjectOf": {"@id": brand.blog_url},
    }
    # Unset attributes are left out entirely, never emitted as null.
    for key in ("material", "volume", "color"):
        value = getattr(product, key)
        if value is not None:
            node[key] = value
    return node


def build_document(brand: Brand, products: Iterable[Product], offer: OfferDefaults) -> Node:
    graph = [build_brand_node(brand)]
    graph.extend(build_product_node(p, brand, offer) for p in products)
    return {"@context": SCHEMA_CONTEXT, "@graph": graph}


def _dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_outputs(document: Node, brand_node: Node, out_dir: Union[str, Path] = ".") -> list[Path]:
    """
    Write products.json, output.html, brand.json and index.html into out_dir.
    Existing files are overwritten. Returns the written paths.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    pretty = _dumps(document)
    contents = {
        PRODUCTS_FILE: pretty,
        SNIPPET_FILE: f'<script type="application/ld+json">\n{pretty}\n</script>',
        BRAND_FILE: _dumps(brand_node),
        INDEX_FILE: INDEX_TEMPLATE.format(
            brand=brand_node.get("name", ""),
            products=PRODUCTS_FILE,
            brand_file=BRAND_FILE,
        ),
    }
    written: list[Path] = []
    for filename, text in contents.items():
        path = out / filename
        path.write_text(text, encoding="utf-8")
        written.append(path)
    return written
