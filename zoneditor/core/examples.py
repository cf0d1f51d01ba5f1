from typing import Callable, Iterable, List, Optional, Tuple

ContentThunk = Callable[[], str]

# Built-in starter sessions. The first entry is the scratch session.
BUILTIN_EXAMPLES: List[Tuple[str, str]] = [
    ('Scratch', ''),
    ('Circle', 'circle 40\n'),
    ('Spiral', 'repeat 36 [ forward 10\n  turn 10 ]\n'),
    ('Zones', 'zone left [ square 20 ]\nzone right [ circle 20 ]\n'),
]


def _constant(text: str) -> ContentThunk:
    return lambda: text


class ExampleCatalog:
    """
    The read-only catalog of built-in examples.

    Example names are reserved: a user save can never use one of them. Contents
    are evaluated lazily through a zero-argument callable per example.
    """
    def __init__(self, entries: Iterable[Tuple[str, ContentThunk]], scratch_name: str = 'Scratch') -> None:
        self._entries: List[Tuple[str, ContentThunk]] = list(entries)
        self.scratch_name = scratch_name

    @classmethod
    def builtin(cls, scratch_name: str = 'Scratch') -> 'ExampleCatalog':
        entries = []
        for name, text in BUILTIN_EXAMPLES:
            if name == 'Scratch':
                name = scratch_name
            entries.append((name, _constant(text)))
        return cls(entries, scratch_name=scratch_name)

    @classmethod
    def from_config(cls, config: dict) -> 'ExampleCatalog':
        return cls.builtin(config.get('examples', {}).get('scratch_name', 'Scratch'))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self._entries]

    @property
    def reserved_names(self) -> frozenset:
        return frozenset(self.names) | {self.scratch_name}

    def lookup(self, name: str) -> Optional[ContentThunk]:
        for entry_name, thunk in self._entries:
            if entry_name == name:
                return thunk
        return None
