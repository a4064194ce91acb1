from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    @abstractmethod
    def load(self, key: str) -> str | None:
        """Return the stored text for key, or None if the slot was never written."""
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, text: str) -> None:
        """Replace the whole slot with text."""
        raise NotImplementedError
