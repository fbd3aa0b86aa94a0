"""Exception types raised by the search engine."""


class BlogSearchError(Exception):
    """Base class for all blogsearch errors."""


class ConfigError(BlogSearchError):
    """Configuration file is missing or malformed."""


class IndexBuildError(BlogSearchError):
    """The index could not be built at all.

    Raised when the content root is missing or unreadable, or when the cold
    build exceeds its timeout. Distinct from an empty index, which is a
    valid result.
    """


class DocumentLoadError(BlogSearchError):
    """A single document could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
