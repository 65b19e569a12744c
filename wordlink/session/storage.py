"""
Collaborators for the hand-off: durable key-value storage and navigation.

Storage is scoped to one browsing session in the game; MemoryStorage models
that in-process and JsonFileStorage keeps it in a file so a hand-off can span
two runs of the CLI.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class Navigator(Protocol):
    def redirect(self, url: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage that lives as long as the object."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStorage:
    """Storage kept in a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path) as f:
            return json.load(f)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)

    def clear(self) -> None:
        """Forget everything, like closing the browser tab."""
        self.path.unlink(missing_ok=True)


class PrintNavigator:
    """Navigator for the terminal: shows where the game would go next."""

    def __init__(self):
        self.last_url: Optional[str] = None

    def redirect(self, url: str) -> None:
        self.last_url = url
        print(f"Navigating to: {url}")
