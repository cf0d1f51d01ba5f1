from typing import Dict, List, Optional

from .storage_interface import KeyValueStore
from ...core.exceptions import KeyNotFoundError


class MemoryStorage(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, name: str) -> str:
        try:
            return self._data[name]
        except KeyError:
            raise KeyNotFoundError(name) from None

    async def set(self, name: str, serialized: str) -> None:
        self._data[name] = serialized

    async def list_keys(self) -> List[str]:
        return list(self._data)

    async def remove(self, name: str) -> None:
        self._data.pop(name, None)

    async def clear(self) -> None:
        self._data.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._data
