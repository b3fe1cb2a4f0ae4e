"""A per-class single instance, created on first use."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class whose subclasses each have one shared instance.

    The instance is built lazily by :meth:`instance` with no arguments.
    Instances refuse to be copied.
    """

    _instances: ClassVar[dict[type, Singleton]] = {}

    @classmethod
    def instance(cls: type[_T]) -> _T:
        """Return the shared instance of this class, creating it if needed."""
        existing = Singleton._instances.get(cls)
        if existing is None:
            existing = cls()
            Singleton._instances[cls] = existing
        return existing  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so the next lookup builds a fresh one."""
        Singleton._instances.pop(cls, None)

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")