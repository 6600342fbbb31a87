"""Mixin providing a lock-guarded in-memory record table.

Responsibilities:
    - Own the private dict holding all records
    - Own the lock guarding every access to that dict

Classes:
    - LockedStoreMixin: Base mixin to inject record storage & its lock.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMemoryDAO(LockedStoreMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMemoryDAO()
        >>> dao.count()
        0
"""

import threading
from typing import Optional


class LockedStoreMixin:
    """Mixin record storage and synchronization for in-memory DAOs.

    Attributes:
        _records (dict):
            Private record table. Only touched by methods decorated with
            @synchronized.

        _lock (threading.Lock):
            Lock guarding `_records`.
    """

    def __init__(self, lock: Optional[threading.Lock] = None):
        """Initialize an empty in-memory store

        Args:
            lock (Optional[threading.Lock]):
                Pre-initialized lock. If None, a new one is created.
        """
        self._records = {}
        self._lock = threading.Lock() if lock is None else lock
