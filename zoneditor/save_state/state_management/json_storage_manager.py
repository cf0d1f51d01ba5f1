import asyncio
import json
import logging
import os
import tempfile
import threading
from typing import Dict, List

from .storage_interface import KeyValueStore
from ...core.exceptions import KeyNotFoundError, StoreUnavailableError


class JSONStorageManager(KeyValueStore):
    """Keeps every save in one JSON object on disk, keyed by save name.

    Every operation reads the whole file and may rewrite it; the
    read-modify-write cycles run one at a time under ``_lock``.
    """

    def __init__(self, path: str = "~/.zoneditor/saves.json"):
        self.path = os.path.expanduser(path)
        self._lock = threading.Lock()

    def ensure_base_dir(self):
        base_dir = os.path.dirname(self.path)
        if base_dir:
            os.makedirs(base_dir, exist_ok=True)

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreUnavailableError(f"Failed to read save store '{self.path}'") from e
        if not isinstance(data, dict):
            raise StoreUnavailableError(f"Save store '{self.path}' does not contain a JSON object")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self.ensure_base_dir()
            fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(self.path) or None, suffix='.tmp')
        except OSError as e:
            raise StoreUnavailableError(f"Failed to write save store '{self.path}'") from e
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreUnavailableError(f"Failed to write save store '{self.path}'") from e

    async def _run(self, func, *args):
        # blocking file I/O stays off the event loop
        return await asyncio.get_running_loop().run_in_executor(None, func, *args)

    def _keys(self) -> List[str]:
        with self._lock:
            return list(self._read())

    def _get(self, name: str) -> str:
        with self._lock:
            data = self._read()
        if name not in data:
            raise KeyNotFoundError(name)
        return data[name]

    def _set(self, name: str, serialized: str) -> None:
        with self._lock:
            data = self._read()
            data[name] = serialized
            self._write(data)
        logging.info(f"Save '{name}' written to {self.path}")

    def _remove(self, name: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(name, None) is not None:
                self._write(data)

    def _clear(self) -> None:
        with self._lock:
            if self._read():
                self._write({})

    async def get(self, name: str) -> str:
        return await self._run(self._get, name)

    async def set(self, name: str, serialized: str) -> None:
        await self._run(self._set, name, serialized)

    async def list_keys(self) -> List[str]:
        return await self._run(self._keys)

    async def remove(self, name: str) -> None:
        await self._run(self._remove, name)

    async def clear(self) -> None:
        await self._run(self._clear)
