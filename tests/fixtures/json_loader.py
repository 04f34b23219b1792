import copy
import json
from pathlib import Path
from typing import Any, Dict

DATA_FILE = Path(__file__).parent / "test_data.json"


class TestDataLoader:
    """Named users, posts and a contact message for API payloads; every call returns a fresh copy"""

    _data: Dict[str, Any] = None

    @classmethod
    def _section(cls, section: str) -> Any:
        if cls._data is None:
            cls._data = json.loads(DATA_FILE.read_text())
        return copy.deepcopy(cls._data[section])

    def user(self, name: str = "traveller") -> Dict[str, str]:
        return self._section("users")[name]

    def post(self, name: str) -> Dict[str, str]:
        return self._section("posts")[name]

    def contact(self) -> Dict[str, str]:
        return self._section("contact")
