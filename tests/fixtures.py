"""Synthetic storefront markup shared by the tests."""

import requests
from requests.utils import get_encoding_from_headers

BASE_URL = "https://shop.example"

LISTING_HTML = """
<html><body>
  <div class="product">
    <a href="/hrnek-modry/"><img data-src="https://cdn.example/hrnek.jpg&#10;" src="placeholder.gif"></a>
    <span class="name"><span>Hrnek <b>modrý</b></span></span>
    <div class="price-final"><strong>450 Kč</strong></div>
  </div>
  <div class="product">
    <a href="/miska/"><img data-src="https://cdn.example/miska.jpg"></a>
    <span class="name">Miska</span>
    <div class="price-final"><strong>N/A</strong></div>
  </div>
</body></html>
"""

DETAIL_HTML = """
<html><body>
  <div class="product-detail-description"><p>Ručně točený hrnek.</p><p>Objem 300 ml.</p></div>
  <div class="code">Kód: <span>HR-001</span></div>
  <table class="parameter-table">
    <tr><th>Materiál</th><td>kamenina</td></tr>
    <tr><th>Objem</th><td>300 ml</td></tr>
    <tr><th>Barva</th><td>modrá</td></tr>
  </table>
</body></html>
"""

BARE_DETAIL_HTML = "<html><body><h1>Miska</h1></body></html>"


def make_response(
    text: str,
    url: str = BASE_URL,
    status: int = 200,
    content_type: str = "text/html; charset=utf-8",
):
    """Build a real requests.Response carrying a UTF-8 body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.headers["Content-Type"] = content_type
    resp.encoding = get_encoding_from_headers(resp.headers)
    resp._content = text.encode("utf-8")
    return resp
