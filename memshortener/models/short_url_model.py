from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original long URL that the shortcode redirects to.
            Stored verbatim, no normalization is applied.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        created_at (Optional[datetime]):
            Moment (UTC) the mapping was created by the store.

    Example:
        >>> from datetime import datetime, UTC
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="abc123",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> url.target
        'https://example.com/article/123'
        >>> url.shortcode
        'abc123'
        >>> isinstance(url.created_at, datetime)
        True
    """
    target: str
    shortcode: str
    created_at: Optional[datetime] = None
