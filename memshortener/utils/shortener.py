"""Shortcode generation utility

This module provides a helper function for drawing random, fixed-length
shortcodes from the Base62 alphabet.

Functions:
    generate_shortcode(length=6, alphabet=Shortcode.ALPHABET):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> from memshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'Gh71WP'
"""

import secrets

from memshortener.constants import Shortcode


ALPHABET = Shortcode.ALPHABET
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = Shortcode.LENGTH, alphabet: str = ALPHABET) -> str:
    """Generate a random shortcode of fixed length.

    Each position is drawn independently and uniformly from `alphabet`.
    The draw uses the `secrets` CSPRNG, so shortcodes are not predictable
    from previously issued ones and the function is safe to call from
    several threads at once.

    Uniqueness is NOT guaranteed here. The store is responsible for rejecting
    a candidate that is already mapped (see ShortURLBaseDAO.create()).

    Args:
        length (int, optional):
            Number of characters in the shortcode.
            Defaults to 6.

        alphabet (str, optional):
            Characters to draw from.
            Defaults to the Base62 alphabet [a-zA-Z0-9].

    Returns:
        str: A random alphanumeric shortcode.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is not positive or `alphabet` is empty.

    Example:
        >>> len(generate_shortcode(length=6))
        6
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
