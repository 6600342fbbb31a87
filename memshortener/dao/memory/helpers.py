import functools
from typing import TypeVar, Any
from collections.abc import Callable


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def synchronized[F](method: F) -> F:
    """Run a DAO method while holding the store's lock

    Every read and write of the in-memory mapping goes through this decorator,
    making each decorated method a single critical section.

    Args:
        method (Callable[..., Any]):
            DAO method accessing `self._records`.

    Returns:
        Callable[..., Any]:
            Wrapped method executed under `self._lock`.

    Example:
        >>> @synchronized
        ... def count(self):
        ...     return len(self._records)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper
