"""Defaults service - read, write, and erase typed values by key."""

from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DefaultsKey(str, Enum):
    """Keys used to persist data."""
    GAME = "Game"


@runtime_checkable
class DefaultsService(Protocol):
    """Data access for values persisted under a DefaultsKey."""

    def read(self, key: DefaultsKey, type_: type[T]) -> Optional[T]:
        """Read and decode the value stored under key.

        Returns None when nothing is stored or the stored bytes cannot be
        decoded as type_. The two cases are indistinguishable to the caller.
        """
        ...

    def write(self, value: Any, key: DefaultsKey) -> None:
        """Encode value and store it under key.

        If encoding fails, any value already stored under key is erased.
        """
        ...

    def erase(self, key: DefaultsKey) -> None:
        """Remove the value stored under key, if present."""
        ...


class SettingsDefaultsService:
    """DefaultsService backed by a SettingsStore, encoding values as JSON."""

    def __init__(self, store: SettingsStore) -> None:
        self.store = store

    def read(self, key: DefaultsKey, type_: type[T]) -> Optional[T]:
        data = self.store.data(key.value)
        if data is None:
            return None
        try:
            return TypeAdapter(type_).validate_json(data)
        except ValidationError as e:
            logger.debug(f"Could not decode {key.value} as {type_.__name__}: {e.error_count()} errors")
            return None

    def write(self, value: Any, key: DefaultsKey) -> None:
        try:
            data: Optional[bytes] = TypeAdapter(type(value)).dump_json(value)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.warning(f"Could not encode {type(value).__name__} for {key.value}, erasing stored value: {e}")
            data = None
        self.store.set(data, key.value)

    def erase(self, key: DefaultsKey) -> None:
        self.store.remove_object(key.value)
