"""Feed retrieval and parsing."""

from .models import Article, DigestDocument, FeedFormat, FeedItem, FeedResult, FetchMetadata
from .parsing import detect_format, parse_document
from .rss_fetcher import RSSFetcher, print_feed_summary

__all__ = [
    "RSSFetcher",
    "Article",
    "DigestDocument",
    "FeedFormat",
    "FeedItem",
    "FeedResult",
    "FetchMetadata",
    "detect_format",
    "parse_document",
    "print_feed_summary",
]
