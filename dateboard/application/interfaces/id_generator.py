from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Port for issuing short, opaque, URL-safe listing ids."""

    @abstractmethod
    def next_id(self) -> str:
        """Return an id never returned before by this generator."""
        ...
