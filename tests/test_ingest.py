"""Tests for news and price fetching."""

import http.client
import json
import ssl
import unittest
import urllib.error
from unittest.mock import MagicMock, patch

from crypto_news import ingest
from crypto_news.errors import NetworkError, ParseError
from crypto_news.models import Article, PriceQuote


def mock_response(body, status=200):
    response = MagicMock()
    response.getcode.return_value = status
    response.read.return_value = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    cm = MagicMock()
    cm.__enter__.return_value = response
    cm.__exit__.return_value = False
    return cm


RAW_ARTICLE = {
    "title": "Bitcoin hits new high",
    "body": "Bitcoin rallied today.",
    "imageurl": "https://example.com/btc.png",
    "source": "coindesk",
    "published_on": 1768910400,
    "categories": "BTC|Trading",
    "url": "https://example.com/btc",
}


class TestFetchNews(unittest.TestCase):
    """Test the news endpoint client."""

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_returns_data_array(self, mock_urlopen):
        mock_urlopen.return_value = mock_response({"Type": 100, "Data": [RAW_ARTICLE]})
        self.assertEqual(ingest.fetch_news("https://news.test/"), [RAW_ARTICLE])

        request = mock_urlopen.call_args[0][0]
        self.assertEqual(request.full_url, "https://news.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_http_error_is_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://news.test/", 500, "Server Error", None, None)
        with self.assertRaises(NetworkError) as ctx:
            ingest.fetch_news("https://news.test/")
        self.assertEqual(ctx.exception.status, 500)

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_transport_failure_is_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("connection refused")
        with self.assertRaises(NetworkError):
            ingest.fetch_news("https://news.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_invalid_json_is_parse_error(self, mock_urlopen):
        mock_urlopen.return_value = mock_response(b"<html>not json</html>")
        with self.assertRaises(ParseError):
            ingest.fetch_news("https://news.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_missing_data_field_is_parse_error(self, mock_urlopen):
        mock_urlopen.return_value = mock_response({"Message": "rate limited"})
        with self.assertRaises(ParseError):
            ingest.fetch_news("https://news.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_does_not_retry(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("timed out")
        with self.assertRaises(NetworkError):
            ingest.fetch_news("https://news.test/")
        self.assertEqual(mock_urlopen.call_count, 1)

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_truncated_body_is_network_error(self, mock_urlopen):
        cm = mock_response(b"")
        cm.__enter__.return_value.read.side_effect = http.client.IncompleteRead(b"{", 100)
        mock_urlopen.return_value = cm
        with self.assertRaises(NetworkError):
            ingest.fetch_news("https://news.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_ssl_failure_while_reading_is_network_error(self, mock_urlopen):
        cm = mock_response(b"")
        cm.__enter__.return_value.read.side_effect = ssl.SSLError("bad record mac")
        mock_urlopen.return_value = cm
        with self.assertRaises(NetworkError):
            ingest.fetch_news("https://news.test/")


class TestFetchPrices(unittest.TestCase):
    """Test the price endpoint client."""

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_returns_quotes_by_asset(self, mock_urlopen):
        mock_urlopen.return_value = mock_response({
            "bitcoin": {"usd": 50000.5, "usd_24h_change": -1.25},
            "ethereum": {"usd": 3000, "usd_24h_change": 2.5},
        })
        prices = ingest.fetch_prices("https://prices.test/")
        self.assertEqual(list(prices), ["bitcoin", "ethereum"])
        self.assertEqual(prices["bitcoin"], PriceQuote("bitcoin", 50000.5, -1.25))
        self.assertEqual(prices["ethereum"].price_usd, 3000)

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_bad_quote_is_parse_error(self, mock_urlopen):
        mock_urlopen.return_value = mock_response({"bitcoin": {"usd": "n/a"}})
        with self.assertRaises(ParseError):
            ingest.fetch_prices("https://prices.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_non_finite_quote_is_parse_error(self, mock_urlopen):
        mock_urlopen.return_value = mock_response(b'{"bitcoin": {"usd": Infinity, "usd_24h_change": NaN}}')
        with self.assertRaises(ParseError):
            ingest.fetch_prices("https://prices.test/")

    @patch("crypto_news.ingest.urllib.request.urlopen")
    def test_http_error_is_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://prices.test/", 429, "Too Many Requests", None, None)
        with self.assertRaises(NetworkError):
            ingest.fetch_prices("https://prices.test/")

    def test_default_url_lists_the_five_assets(self):
        self.assertIn("ids=bitcoin,ethereum,ripple,cardano,polkadot", ingest.PRICE_API_URL)
        self.assertIn("vs_currencies=usd", ingest.PRICE_API_URL)
        self.assertIn("include_24hr_change=true", ingest.PRICE_API_URL)


class TestArticleFromRaw(unittest.TestCase):

    def test_maps_fields(self):
        article = Article.from_raw(RAW_ARTICLE)
        self.assertEqual(article.image_url, "https://example.com/btc.png")
        self.assertEqual(article.published_on, 1768910400)
        self.assertEqual(article.categories, ("BTC", "Trading"))

    def test_missing_timestamp_is_parse_error(self):
        raw = dict(RAW_ARTICLE)
        del raw["published_on"]
        with self.assertRaises(ParseError):
            Article.from_raw(raw)

    def test_non_finite_price_is_parse_error(self):
        with self.assertRaises(ParseError):
            PriceQuote.from_raw("bitcoin", {"usd": float("inf"), "usd_24h_change": 1.0})
        with self.assertRaises(ParseError):
            PriceQuote.from_raw("bitcoin", {"usd": 1.0, "usd_24h_change": float("nan")})

    def test_missing_text_fields_become_empty(self):
        article = Article.from_raw({"published_on": 1768910400})
        self.assertEqual(article.title, "")
        self.assertEqual(article.categories, ("",))


if __name__ == "__main__":
    unittest.main()
