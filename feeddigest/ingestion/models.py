"""Data models for ingestion."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedFormat(str, Enum):
    """Syndication dialect of a retrieved document."""

    RSS = "rss"
    ATOM = "atom"


class FeedItem(BaseModel):
    """Candidate item extracted from a feed, before time filtering."""

    title: str = Field(..., description="Item title")
    link: str = Field(..., description="Item URL")
    published: Optional[datetime] = Field(None, description="Publication date (UTC)")
    description: str = Field("", description="Plain-text description/summary")
    source_name: str = Field(..., description="Source name")
    source_url: str = Field(..., description="Feed URL")


class FeedResult(BaseModel):
    """Result of fetching and parsing one feed."""

    source_name: str = Field(..., description="Source name")
    source_url: str = Field(..., description="RSS/Atom feed URL")
    success: bool = Field(..., description="Whether a parseable document was retrieved")
    status_code: Optional[int] = Field(None, description="HTTP status, if a response arrived")
    feed_format: Optional[FeedFormat] = Field(None, description="Detected syndication format")
    items: List[FeedItem] = Field(default_factory=list, description="Parsed feed items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items parsed")


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Article(_CamelModel):
    """Item retained by the time window, as written to the digest JSON."""

    title: str
    link: str
    pub_date: datetime = Field(..., alias="pubDate")
    description: str = ""
    source_name: str = Field(..., alias="sourceName")
    source_url: str = Field(..., alias="sourceUrl")

    @classmethod
    def from_item(cls, item: FeedItem) -> "Article":
        """Build an article from a dated feed item."""
        if item.published is None:
            raise ValueError(f"Item has no publication date: {item.link}")
        return cls(
            title=item.title,
            link=item.link,
            pub_date=item.published,
            description=item.description,
            source_name=item.source_name,
            source_url=item.source_url,
        )


class FetchMetadata(_CamelModel):
    """Run-level counters."""

    total_feeds: int = Field(..., alias="totalFeeds", ge=0)
    successful_feeds: int = Field(..., alias="successfulFeeds", ge=0)
    total_articles: int = Field(..., alias="totalArticles", ge=0)
    filtered_articles: int = Field(..., alias="filteredArticles", ge=0)
    time_range_hours: int = Field(..., alias="timeRangeHours", ge=0)
    fetched_at: datetime = Field(..., alias="fetchedAt")


class DigestDocument(_CamelModel):
    """The JSON document handed to downstream consumers."""

    metadata: FetchMetadata
    articles: List[Article] = Field(default_factory=list)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize using the camelCase output contract."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str) -> "DigestDocument":
        """Parse a document produced by :meth:`to_json`."""
        return cls.model_validate_json(data)
