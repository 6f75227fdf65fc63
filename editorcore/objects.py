"""Base object type and the registry that owns every live object."""

from __future__ import annotations

from itertools import count
from typing import Iterator, TypeVar

from editorcore.names import Name

T = TypeVar("T", bound="UObject")


class UObject:
    """Base of every engine object: a UUID and a case-preserving name."""

    def __init__(self) -> None:
        self.uuid = 0
        self.internal_index = 0
        self.is_pending_destroy = False
        self._name = Name()

    @property
    def fname(self) -> Name:
        return self._name

    @property
    def name(self) -> str:
        return str(self._name)

    def set_name(self, name: str) -> None:
        self._name = Name(name)

    def is_a(self, cls: type) -> bool:
        """Return True if this object is an instance of ``cls``."""
        return isinstance(self, cls)

    def begin_destroy(self) -> None:
        """Mark the object as about to be destroyed."""
        self.is_pending_destroy = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uuid={self.uuid}, name={self.name!r})"


class ObjectRegistry:
    """Creates objects, gives them UUIDs and keeps them by UUID."""

    def __init__(self) -> None:
        self._objects: dict[int, UObject] = {}
        self._uuids = count(1)

    def construct(self, cls: type[T]) -> T:
        """Create an instance of ``cls``, assign a fresh UUID and register it."""
        if not (isinstance(cls, type) and issubclass(cls, UObject)):
            raise TypeError(f"{cls!r} is not a UObject subclass")
        obj = cls()
        obj.uuid = next(self._uuids)
        self._objects[obj.uuid] = obj
        return obj

    def get(self, uuid: int) -> UObject:
        """Return the object with ``uuid``; raise KeyError if there is none."""
        try:
            return self._objects[uuid]
        except KeyError:
            raise KeyError(f"no object with uuid {uuid}") from None

    def remove(self, uuid: int) -> UObject | None:
        """Drop the object with ``uuid`` and return it, or None if absent."""
        return self._objects.pop(uuid, None)

    def iter_objects(self, cls: type[T] = UObject) -> Iterator[T]:
        """Yield every registered object that is an instance of ``cls``."""
        for obj in list(self._objects.values()):
            if obj.is_a(cls):
                yield obj

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, uuid: object) -> bool:
        return uuid in self._objects