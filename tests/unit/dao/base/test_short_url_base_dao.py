"""Unit tests for create() and resolve() in ShortURLBaseDAO

Test coverage includes:

1. create()
   - Ensures a new mapping with a 6-character Base62 shortcode is stored.
   - Ensures created_at is stamped in UTC.
   - Ensures collisions are retried with a fresh candidate.
   - Ensures CapacityExhaustedError after the retry budget is spent.
   - Ensures configured shortcode lengths are honored.

2. resolve()
   - Ensures round-trip of create() and resolve().
   - Ensures unknown shortcodes raise ShortURLNotFoundError.

3. Contract
   - Ensures ShortURLBaseDAO can't be instantiated directly.
"""

import re
from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from freezegun import freeze_time
from pytest import MonkeyPatch

from memshortener.models import ShortURLModel
from memshortener.dao.base import ShortURLBaseDAO, short_url_base_dao
from memshortener.dao.memory import ShortURLMemoryDAO
from memshortener.dao.exceptions import CapacityExhaustedError, ShortURLNotFoundError


SHORTCODE_PATTERN = re.compile(r'^[a-zA-Z0-9]{6}$')


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO()


@pytest.fixture
def shortcodes(monkeypatch: MonkeyPatch):
    """Replace the shortcode generator with a scripted sequence."""

    def _script(*codes: str) -> MagicMock:
        generator = MagicMock(side_effect=list(codes))
        monkeypatch.setattr(short_url_base_dao, 'generate_shortcode', generator)
        return generator

    return _script


# -------------------------------
# 1. create()
# -------------------------------


def test_create_stores_mapping(dao):
    short_url = dao.create('https://example.com/page')

    assert isinstance(short_url, ShortURLModel)
    assert SHORTCODE_PATTERN.match(short_url.shortcode)
    assert short_url.target == 'https://example.com/page'
    assert dao.get(short_url.shortcode) == short_url
    assert dao.count() == 1


@freeze_time('2025-10-15 12:30:00')
def test_create_stamps_creation_time(dao):
    short_url = dao.create('https://example.com/page')
    assert short_url.created_at == datetime(2025, 10, 15, 12, 30, 0, tzinfo=UTC)


def test_create_retries_on_collision(dao, shortcodes, caplog):
    dao.insert(ShortURLModel(target='https://example.com/taken', shortcode='aaaaaa'))
    generator = shortcodes('aaaaaa', 'aaaaaa', 'bbbbbb')

    short_url = dao.create('https://example.com/new')

    assert short_url.shortcode == 'bbbbbb'
    assert generator.call_count == 3
    # Existing mapping was not overwritten
    assert dao.resolve('aaaaaa') == 'https://example.com/taken'
    assert dao.resolve('bbbbbb') == 'https://example.com/new'
    assert caplog.text.count('Shortcode collision') == 2


def test_create_raises_capacity_exhausted(dao, shortcodes):
    dao.insert(ShortURLModel(target='https://example.com/taken', shortcode='aaaaaa'))
    generator = shortcodes(*['aaaaaa'] * 4)

    with pytest.raises(CapacityExhaustedError, match='after 4 attempts'):
        dao.create('https://example.com/new', max_retries=3)

    assert generator.call_count == 4
    assert dao.count() == 1


def test_create_without_retries(dao, shortcodes):
    dao.insert(ShortURLModel(target='https://example.com/taken', shortcode='aaaaaa'))
    shortcodes('aaaaaa', 'bbbbbb')

    with pytest.raises(CapacityExhaustedError):
        dao.create('https://example.com/new', max_retries=0)


def test_create_rejects_negative_retries(dao):
    with pytest.raises(ValueError, match='Max retries must be a non-negative integer'):
        dao.create('https://example.com', max_retries=-1)


@pytest.mark.parametrize('length', [4, 8, 12])
def test_create_with_custom_length(dao, length):
    assert len(dao.create('https://example.com', length=length).shortcode) == length


def test_create_stores_target_verbatim(dao):
    target = 'not even a url'
    short_url = dao.create(target)
    assert dao.resolve(short_url.shortcode) == target


def test_create_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.create(b'https://example.com')


def test_same_target_gets_distinct_shortcodes(dao):
    first = dao.create('https://example.com')
    second = dao.create('https://example.com')
    assert first.shortcode != second.shortcode
    assert dao.count() == 2


# -------------------------------
# 2. resolve()
# -------------------------------


@pytest.mark.parametrize(
    'target',
    [
        'https://example.com/page',
        'http://localhost:8080/a?b=c&d=e#f',
        'https://例え.jp/パス',
        'x',
    ],
)
def test_resolve_round_trip(dao, target):
    assert dao.resolve(dao.create(target).shortcode) == target


@pytest.mark.parametrize('shortcode', ['doesNotExist123', 'zzzzzz', ''])
def test_resolve_unknown_shortcode(dao, shortcode):
    with pytest.raises(ShortURLNotFoundError):
        dao.resolve(shortcode)


def test_example_scenario(dao):
    short_url = dao.create('https://example.com/page')

    assert SHORTCODE_PATTERN.match(short_url.shortcode)
    assert dao.resolve(short_url.shortcode) == 'https://example.com/page'
    if short_url.shortcode != 'zzzzzz':
        with pytest.raises(ShortURLNotFoundError):
            dao.resolve('zzzzzz')


# -------------------------------
# 3. Contract
# -------------------------------


def test_base_dao_is_abstract():
    with pytest.raises(TypeError):
        ShortURLBaseDAO()
