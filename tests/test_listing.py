"""Tests for listing page parsing and price normalization."""

import unittest

from catalog_ld.config import Selectors
from catalog_ld.listing import normalize_price, parse_listing, strip_tags

from tests.fixtures import BASE_URL, LISTING_HTML


class TestNormalizePrice(unittest.TestCase):
    """Price text to float conversion."""

    def test_grouped_digits_with_decimal_comma(self) -> None:
        self.assertAlmostEqual(normalize_price("1 234,50 Kč"), 1234.50)

    def test_non_breaking_space_grouping(self) -> None:
        self.assertAlmostEqual(normalize_price("12\u00a0990,00\u00a0Kč"), 12990.0)

    def test_plain_integer(self) -> None:
        self.assertEqual(normalize_price("450 Kč"), 450.0)

    def test_unparsable_text_yields_zero_and_warns(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING") as logs:
            self.assertEqual(normalize_price("N/A"), 0.0)
        self.assertIn("N/A", logs.output[0])

    def test_non_ascii_digits_are_not_prices(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING"):
            self.assertEqual(normalize_price("٤٥٠ Kč"), 0.0)

    def test_two_commas_yield_zero(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING"):
            self.assertEqual(normalize_price("1,234,50"), 0.0)

    def test_empty_text_yields_zero(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING"):
            self.assertEqual(normalize_price(""), 0.0)


class TestParseListing(unittest.TestCase):
    """Listing cards to ListingEntry."""

    def setUp(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING"):
            self.entries = parse_listing(LISTING_HTML, BASE_URL, Selectors())

    def test_finds_every_card_in_order(self) -> None:
        self.assertEqual([e.name for e in self.entries], ["Hrnek modrý", "Miska"])

    def test_url_is_base_plus_href(self) -> None:
        self.assertEqual(self.entries[0].url, "https://shop.example/hrnek-modry/")

    def test_image_uses_lazy_attribute_without_newlines(self) -> None:
        self.assertEqual(self.entries[0].image, "https://cdn.example/hrnek.jpg")

    def test_prices(self) -> None:
        self.assertEqual(self.entries[0].price, 450.0)
        self.assertEqual(self.entries[1].price, 0.0)
        self.assertEqual(self.entries[1].price_text, "N/A")

    def test_missing_fields_use_defaults(self) -> None:
        html = '<div class="product"><p>nothing here</p></div>'
        entries = parse_listing(html, BASE_URL, Selectors())
        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry.name, "")
        self.assertEqual(entry.url, "https://shop.example/")
        self.assertEqual(entry.image, "")
        self.assertEqual(entry.price_text, "0")
        self.assertEqual(entry.price, 0.0)

    def test_name_keeps_entities_from_markup(self) -> None:
        html = (
            '<div class="product"><span class="name">&nbsp;Kávy &amp; čaje&nbsp;</span>'
            '<div class="price-final"><strong>1&nbsp;234,50&nbsp;Kč</strong></div></div>'
        )
        entry = parse_listing(html, BASE_URL, Selectors())[0]
        self.assertEqual(entry.name, "&nbsp;Kávy &amp; čaje&nbsp;")
        self.assertEqual(entry.price_text, "1&nbsp;234,50&nbsp;Kč")
        self.assertAlmostEqual(entry.price, 1234.50)

    def test_limit_caps_entries(self) -> None:
        with self.assertLogs("catalog_ld.listing", level="WARNING"):
            entries = parse_listing(LISTING_HTML, BASE_URL, Selectors(), limit=5)
        self.assertEqual(len(entries), 2)
        entries = parse_listing(LISTING_HTML, BASE_URL, Selectors(), limit=1)
        self.assertEqual(len(entries), 1)

    def test_custom_selectors(self) -> None:
        html = '<li class="item"><h3>Vase</h3><a href="/vase">x</a></li>'
        selectors = Selectors(product_card=".item", name="h3")
        entries = parse_listing(html, BASE_URL, selectors)
        self.assertEqual(entries[0].name, "Vase")
        self.assertEqual(entries[0].url, "https://shop.example/vase")


class TestStripTags(unittest.TestCase):

    def test_strips_nested_tags_and_trims(self) -> None:
        self.assertEqual(strip_tags("  <b>Big</b> <i>mug</i> "), "Big mug")


if __name__ == "__main__":
    unittest.main()
