from memshortener.dao.memory.mixins import LockedStoreMixin
from memshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO, shared_short_url_dao


__all__ = [
    'LockedStoreMixin',
    'ShortURLMemoryDAO',
    'shared_short_url_dao',
]
