"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Standardize error handling across data store implementations.
    - Provide the two operations used by request handlers: create() and resolve().

Example:
    Typical usage with a datastore-specific implementation:

        >>> from memshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = dao.create("https://example.com/blog/article-123")
        >>> short_url.shortcode
        'a1B2c3'

        >>> dao.resolve("a1B2c3")
        'https://example.com/blog/article-123'

        >>> dao.resolve("zzzzzz")
        Traceback (most recent call last):
            ...
        memshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'zzzzzz' not found.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, UTC

from beartype import beartype

from memshortener.models import ShortURLModel
from memshortener.constants import Shortcode
from memshortener.dao.exceptions import ShortURLAlreadyExistsError, CapacityExhaustedError
from memshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store.
            Raises ShortURLAlreadyExistsError if the shortcode already exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.

        count(**kwargs) -> int:
            Return the number of mappings held by the data store.

        create(target: str, length: int, max_retries: int) -> ShortURLModel:
            Generate a free shortcode for `target` and store the mapping.
            Raises CapacityExhaustedError when every candidate collided.

        resolve(shortcode: str) -> str:
            Return the target URL mapped to `shortcode`.
            Raises ShortURLNotFoundError if the entry does not exist.

    Subclassing:
        Datastore-specific implementations must extend this class and
        implement all abstract methods. insert() MUST check for an existing
        shortcode and store the new one as a single atomic step, create()
        relies on it to never issue the same shortcode twice.

    NOTE:
        - Mappings live as long as the data store does. The DAO does not
          provide an interface to delete or expire entries.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode already exists.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of short URL mappings in the data store.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current number of mappings.
        """
        pass

    @beartype
    def create(self, target: str, length: int = Shortcode.LENGTH, max_retries: int = Shortcode.MAX_RETRIES) -> ShortURLModel:
        """Create a new short URL mapping for `target`

        A candidate shortcode is drawn at random and inserted. If the candidate
        is already mapped, insert() rejects it and a new candidate is drawn,
        up to `max_retries` extra attempts. Existing mappings are never
        overwritten.

        NOTE: The target is stored verbatim. Rejecting empty or malformed
              URLs is the caller's job.

        Args:
            target (str):
                Original long URL.
            length (int):
                Shortcode length. Defaults to 6.
            max_retries (int):
                Extra attempts after a collision. Defaults to 10.

        Returns:
            ShortURLModel:
                The newly stored mapping.

        Raises:
            CapacityExhaustedError:
                If all `1 + max_retries` candidates collided.

        Example:
            >>> dao.create('https://example.com/page').shortcode
            'Xa81Kq'
        """
        if max_retries < 0:
            raise ValueError(f'Max retries must be a non-negative integer (given value: {max_retries}).')

        for attempt in range(max_retries + 1):
            short_url = ShortURLModel(
                target=target,
                shortcode=generate_shortcode(length),
                created_at=datetime.now(UTC),
            )
            try:
                self.insert(short_url)
            except ShortURLAlreadyExistsError:
                logger.warning(
                    'Shortcode collision. Drawing a new candidate.',
                    extra={'shortcode': short_url.shortcode, 'attempt': attempt + 1},
                )
            else:
                return short_url

        logger.error(
            'No free shortcode found within retry budget.',
            extra={'attempts': max_retries + 1, 'length': length},
        )
        raise CapacityExhaustedError(f'Unable to generate a unique shortcode after {max_retries + 1} attempts.')

    @beartype
    def resolve(self, shortcode: str) -> str:
        """Return the target URL of a stored short URL mapping

        Args:
            shortcode (str):
                The shortcode to look up. Empty or unknown shortcodes are
                valid inputs which simply fail to resolve.

        Returns:
            str: The original target URL.

        Raises:
            ShortURLNotFoundError:
                If no mapping exists for `shortcode`.
        """
        return self.get(shortcode).target
