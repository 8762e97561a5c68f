"""Named registries of pluggable components."""

from typing import Any, Generic, TypeVar

import pydantic

from .exceptions import ConfigurationError, RegistryError, RepeatedIdError

T = TypeVar("T")


class Registry(Generic[T]):
    """Map names to component classes, such as isotope pattern extractors.

    Components are stored using their class name, or an explicit name passed on registration, and
    are created by name with keyword configuration.

    :param kind: the kind of component stored. Used in error messages.

    """

    def __init__(self, kind: str):
        self.kind = kind
        self._entries: dict[str, type[T]] = dict()

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def get(self, name: str) -> type[T]:
        """Retrieve a component class by name.

        :raises RegistryError: if no component was registered with the provided name.

        """
        try:
            return self._entries[name]
        except KeyError as e:
            known = ", ".join(self.list_entries())
            raise RegistryError(f"No {self.kind} registered as `{name}`. Available: {known}.") from e

    def create(self, name: str, **config: Any) -> T:
        """Create a component instance.

        :param name: the component name
        :param config: keyword arguments passed to the component constructor
        :raises RegistryError: if no component was registered with the provided name.
        :raises ConfigurationError: if the component rejects the configuration.

        """
        entry = self.get(name)
        try:
            return entry(**config)
        except (pydantic.ValidationError, TypeError) as e:
            raise ConfigurationError(f"Invalid configuration for {self.kind} `{name}`: {e}") from e

    def list_entries(self) -> list[str]:
        """List the names of registered components, sorted alphabetically."""
        return sorted(self._entries)

    def register(self, entry: type[T], name: str | None = None) -> type[T]:
        """Add a component class to the registry.

        Can be used as a class decorator, in which case the class name is used as the entry name.

        :raises RepeatedIdError: if the name is already in use.

        """
        name = entry.__name__ if name is None else name
        if name in self._entries:
            raise RepeatedIdError(f"A {self.kind} is already registered as `{name}`.")
        self._entries[name] = entry
        return entry
