from abc import ABC, abstractmethod
from typing import List


class KeyValueStore(ABC):
    """
    Asynchronous key-value store of serialized saves.

    Keys and values are both text. Implementations raise ``KeyNotFoundError``
    from ``get`` for an absent key and ``StoreUnavailableError`` when the
    backing store fails. Nothing is retried.
    """

    @abstractmethod
    async def get(self, name: str) -> str:
        pass

    @abstractmethod
    async def set(self, name: str, serialized: str) -> None:
        pass

    @abstractmethod
    async def list_keys(self) -> List[str]:
        pass

    @abstractmethod
    async def remove(self, name: str) -> None:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass
