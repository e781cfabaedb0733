from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Tuple, TypeVar
import logging

from avl_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("AVLTree")

K = TypeVar("K")
V = TypeVar("V")


class AbstractMapDataStructure(ABC, Generic[K, V]):
    """
    Abstract base class for an ordered map storing unique keys and their values.
    """
    __slots__ = ()

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """
        Associate value with key, replacing the value if the key is already present.

        Parameters:
            key: The key to insert. Must be comparable with every stored key.
            value: The value to store under key.
        """
        pass

    @abstractmethod
    def remove(self, key: K) -> None:
        """
        Remove the entry for key. Removing a missing key is a no-op.

        Parameters:
            key: The key of the entry to remove.
        """
        pass

    @abstractmethod
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Retrieve the value associated with key.

        Parameters:
            key: The key to look up.
            default: Returned when the key is absent.

        Returns:
            The stored value, or default if the key is not present.
        """
        pass

    @abstractmethod
    def keys(self) -> List[K]:
        """Return a snapshot of all keys in ascending order."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored keys."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, key: K) -> bool:
        return self.get(key) is not None

    def items(self) -> List[Tuple[K, V]]:
        return [(key, self.get(key)) for key in self.keys()]


def _require_not_none(op: str, **kwargs: Any) -> None:
    """Raise TypeError naming the first argument that is None."""
    for name, arg in kwargs.items():
        if arg is None:
            raise TypeError(f"{op}(): {name} must not be None")


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
