from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional

import requests

from .config import DEFAULT_CONFIG, SiteConfig
from .extract import parse_detail
from .fetch import NetworkError, RetryPolicy, create_session, fetch_html, fetch_with_retry
from .jsonld import build_brand_node, build_document, write_outputs
from .listing import parse_listing
from .types import Product


logger = logging.getLogger(__name__)

MESSAGES = {
    "cs": {
        "stage_listing": "[1/3] Načítání výpisu produktů: {url}",
        "found_entries": "Nalezeno produktů: {total}",
        "progress": "[{current}/{total}] Zpracování: {url}",
        "skipped": "❌ Nepodařilo se načíst detail produktu po {attempts} pokusech: {url}",
        "stage_save": "[2/3] Ukládání výstupů do {path}…",
        "stage_done": "[3/3] Hotovo",
        "success": "✅ Načteno produktů: {count}, článek propojen, JSON-LD a index.html vygenerovány.",
        "error": "Chyba: {error}",
        "interrupted": "Přerušeno uživatelem",
        "help_desc": "Stáhne katalog e-shopu a vygeneruje z něj JSON-LD (schema.org).",
        "help_url": "Základní URL obchodu",
        "help_out": "Adresář pro výstupní soubory (výchozí aktuální)",
        "help_limit": "Maximální počet zpracovaných produktů (0 = bez omezení)",
        "help_delay": "Prodleva před stažením každého detailu (s)",
        "help_retries": "Počet pokusů o stažení detailu",
        "help_retry_delay": "Prodleva mezi pokusy (s)",
        "help_timeout": "Časový limit jednoho požadavku (s)",
        "help_ua": "Přepsat User-Agent",
        "help_lang": "Jazyk hlášek: cs nebo en (výchozí cs)",
        "help_verbose": "Podrobný výpis ladicích informací",
    },
    "en": {
        "stage_listing": "[1/3] Fetching product listing: {url}",
        "found_entries": "Found products: {total}",
        "progress": "[{current}/{total}] Processing: {url}",
        "skipped": "❌ Could not fetch product detail after {attempts} attempts: {url}",
        "stage_save": "[2/3] Writing outputs to {path}…",
        "stage_done": "[3/3] Done",
        "success": "✅ Loaded products: {count}, blog post linked, JSON-LD and index.html generated.",
        "error": "Error: {error}",
        "interrupted": "Interrupted by user",
        "help_desc": "Scrape a storefront catalog and emit schema.org JSON-LD.",
        "help_url": "Base URL of the shop",
        "help_out": "Directory for output files (default: current)",
        "help_limit": "Maximum number of products to process (0 = no limit)",
        "help_delay": "Delay before each detail fetch (sec)",
        "help_retries": "Attempts per detail page",
        "help_retry_delay": "Delay between attempts (sec)",
        "help_timeout": "Per-request timeout (sec)",
        "help_ua": "Override User-Agent",
        "help_lang": "Messages language: cs or en (default cs)",
        "help_verbose": "Verbose debug logging",
    },
}


def _msg(lang: str, key: str, **kwargs) -> str:
    lang_key = lang if lang in MESSAGES else "cs"
    template = MESSAGES[lang_key].get(key, "")
    return template.format(**kwargs)


def scrape_catalog(
    config: SiteConfig = DEFAULT_CONFIG,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
    lang: str = "cs",
) -> List[Product]:
    """Fetch the listing page, then every detail page in order, and return the products.

    A listing failure propagates. A detail page that still fails after every
    retry is reported and its product is left out.
    """
    session = session or create_session(user_agent=config.user_agent)
    policy = RetryPolicy(
        max_attempts=config.detail_attempts,
        delay_seconds=config.retry_delay_seconds,
        sleep=sleep,
    )

    print(_msg(lang, "stage_listing", url=config.base_url), flush=True)
    _, html = fetch_html(config.base_url, session=session, timeout_seconds=config.timeout_seconds)
    entries = parse_listing(html, config.base_url, config.selectors, limit=config.limit)
    total = len(entries)
    print(_msg(lang, "found_entries", total=total), flush=True)

    products: List[Product] = []
    for current, entry in enumerate(entries, start=1):
        print(_msg(lang, "progress", current=current, total=total, url=entry.url), flush=True)
        sleep(config.detail_delay_seconds)
        try:
            detail_html = fetch_with_retry(
                entry.url, session, policy, timeout_seconds=config.timeout_seconds
            )
        except NetworkError as exc:
            logger.debug("giving up on %s: %s", entry.url, exc)
            print(_msg(lang, "skipped", attempts=config.detail_attempts, url=entry.url), file=sys.stderr)
            continue
        detail = parse_detail(
            detail_html,
            entry.name,
            config.selectors,
            config.vocabulary,
            config.default_description,
        )
        products.append(Product.from_parts(entry, detail, availability=config.availability))
    return products


def build_catalog(
    config: SiteConfig = DEFAULT_CONFIG,
    out_dir: str = ".",
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
    lang: str = "cs",
) -> List[Product]:
    """High-level convenience function: scrape the catalog and write all JSON-LD artifacts.

    Returns the list of extracted products.
    """
    products = scrape_catalog(config, session=session, sleep=sleep, lang=lang)

    print(_msg(lang, "stage_save", path=Path(out_dir).resolve()), flush=True)
    document = build_document(config.brand, products, config.offer)
    write_outputs(document, build_brand_node(config.brand), out_dir)
    print(_msg(lang, "stage_done"), flush=True)
    return products


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger("catalog_ld")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def _build_arg_parser(lang: str = "cs") -> argparse.ArgumentParser:
    loc = MESSAGES.get(lang, MESSAGES["cs"])
    p = argparse.ArgumentParser(
        prog="catalog-ld",
        description=loc["help_desc"],
    )
    p.add_argument("--url", dest="base_url", default=None, help=loc["help_url"])
    p.add_argument(
        "-o",
        "--out-dir",
        dest="out_dir",
        default=".",
        help=loc["help_out"],
    )
    p.add_argument(
        "-l",
        "--limit",
        dest="limit",
        type=int,
        default=None,
        help=loc["help_limit"],
    )
    p.add_argument(
        "-d",
        "--delay",
        dest="detail_delay_seconds",
        type=float,
        default=None,
        help=loc["help_delay"],
    )
    p.add_argument(
        "-r",
        "--retries",
        dest="detail_attempts",
        type=int,
        default=None,
        help=loc["help_retries"],
    )
    p.add_argument(
        "--retry-delay",
        dest="retry_delay_seconds",
        type=float,
        default=None,
        help=loc["help_retry_delay"],
    )
    p.add_argument(
        "-t",
        "--timeout",
        dest="timeout_seconds",
        type=float,
        default=None,
        help=loc["help_timeout"],
    )
    p.add_argument(
        "-H",
        "--user-agent",
        dest="user_agent",
        default=None,
        help=loc["help_ua"],
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=["cs", "en"],
        default=lang,
        help=loc["help_lang"],
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=loc["help_verbose"],
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser("cs")
    args = parser.parse_args(argv)
    lang = args.lang
    _configure_logging(args.verbose)
    try:
        config = DEFAULT_CONFIG.with_overrides(
            base_url=args.base_url,
            limit=args.limit,
            detail_delay_seconds=args.detail_delay_seconds,
            detail_attempts=args.detail_attempts,
            retry_delay_seconds=args.retry_delay_seconds,
            timeout_seconds=args.timeout_seconds,
            user_agent=args.user_agent,
        )
        products = build_catalog(config, out_dir=args.out_dir, lang=lang)
        print(_msg(lang, "success", count=len(products)))
        return 0
    except KeyboardInterrupt:
        print(_msg(lang, "interrupted"), file=sys.stderr)
        return 130
    except Exception as exc:
        print(_msg(lang, "error", error=exc), file=sys.stderr)
        return 1
