"""Exceptions raised by the digest fetcher."""


class FeedDigestError(Exception):
    """Base class for feeddigest errors."""


class FeedParseError(FeedDigestError):
    """A retrieved document is not a recognizable RSS or Atom feed."""


class DigestWriteError(FeedDigestError):
    """The digest JSON could not be written to its destination."""
