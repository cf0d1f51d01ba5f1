from .storage_interface import KeyValueStore
from .memory_storage import MemoryStorage
from .json_storage_manager import JSONStorageManager
from ...core.exceptions import ConfigurationError


def create_storage(config: dict) -> KeyValueStore:
    storage_config = config.get('storage', {})
    backend = storage_config.get('backend', 'json')
    if backend == 'memory':
        return MemoryStorage()
    if backend == 'json':
        return JSONStorageManager(path=storage_config.get('path', '~/.zoneditor/saves.json'))
    raise ConfigurationError(f"Unknown storage backend '{backend}'")


__all__ = ['KeyValueStore', 'MemoryStorage', 'JSONStorageManager', 'create_storage']
