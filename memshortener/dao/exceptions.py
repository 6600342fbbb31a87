"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a ShortURLModel that already exists.

    CapacityExhaustedError:
        Raised when no free shortcode could be found within the retry budget.

Example:
    >>> from memshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'zzzzzz' not found.")
    Traceback (most recent call last):
        ...
    memshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'zzzzzz' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortURLModel that already exists in the data store."""

    pass


class CapacityExhaustedError(DAOError):
    """Exception raised when every generated shortcode collided with an existing one.

    With 62**6 possible shortcodes this is practically unreachable, but
    callers get a recoverable error instead of an endless loop.
    """

    pass
