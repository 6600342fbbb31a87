"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a process-local implementation of ShortURLBaseDAO.
Mappings live in a private dict guarded by a lock and disappear when the
process exits.

Responsibilities:
    - Insert and retrieve short URLs, safely from any number of threads;
    - Reject inserts of shortcodes that are already mapped;
    - Provide the process-wide store shared by request handlers.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Functions:
    shared_short_url_dao() -> ShortURLMemoryDAO:
        Return the process-wide store, creating it on first use.

Example:
    >>> from memshortener.models import ShortURLModel
    >>> from memshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()

    >>> short_url = ShortURLModel(
    ...     target="https://example.com/page",
    ...     shortcode="abc123"
    ... )
    >>> dao.insert(short_url)
    <ShortURLMemoryDAO>

    >>> retrieved = dao.get("abc123")
    >>> retrieved.target
    'https://example.com/page'
    >>> dao.count()
    1
"""

import logging
import threading

from beartype import beartype

from memshortener.models import ShortURLModel
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory.mixins import LockedStoreMixin
from memshortener.dao.memory.helpers import synchronized
from memshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(LockedStoreMixin, ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using a lock-guarded
    dict as a data store.

    Attributes (see LockedStoreMixin):
        _records (dict[str, ShortURLModel]):
            Mappings keyed by shortcode.
        _lock (threading.Lock):
            Lock serializing every access to `_records`.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLMemoryDAO:
            Insert a short URL mapping.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        count(**kwargs) -> int:
            Return the number of stored mappings.

    Example:
        >>> dao = ShortURLMemoryDAO()
        >>> short_url = dao.create("https://example.com")
        >>> dao.get(short_url.shortcode).target
        'https://example.com'
    """

    @synchronized
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping into memory

        The existence check and the assignment run inside the same critical
        section, so two concurrent inserts of the same shortcode can't both
        succeed.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.

        Example:
            >>> short_url = ShortURLModel(
            ...     target='https://example.com',
            ...     shortcode='abc123'
            ... )
            >>> dao.insert(short_url)
            <ShortURLMemoryDAO>
        """
        if short_url.shortcode in self._records:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")

        self._records[short_url.shortcode] = short_url
        return self

    @synchronized
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.

        Example:
            >>> dao.get('abc123')
            ShortURLModel(target='https://example.com', shortcode='abc123', ...)
        """
        short_url = self._records.get(shortcode)
        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    @synchronized
    def count(self, **kwargs) -> int:
        """Return the number of stored short URL mappings

        Example:
            >>> dao.count()
            123
        """
        return len(self._records)


_shared_dao: ShortURLMemoryDAO | None = None
_shared_dao_lock = threading.Lock()


def shared_short_url_dao() -> ShortURLMemoryDAO:
    """Return the process-wide short URL store

    Request handlers default to this instance when no DAO is injected.
    The store is created on first call and reused for the process lifetime.

    Returns:
        ShortURLMemoryDAO: the shared store.
    """
    global _shared_dao
    with _shared_dao_lock:
        if _shared_dao is None:
            logger.debug('Creating process-wide short URL store.')
            _shared_dao = ShortURLMemoryDAO()
        return _shared_dao
