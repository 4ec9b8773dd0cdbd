"""Level definitions and the JSON catalogue they are loaded from."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from klotski.errors import InvalidLayoutError, UnknownLevelError
from klotski.models.board import Board, State

DEFAULT_LEVELS = Path(__file__).resolve().parent.parent / "data" / "levels.json"

DEFAULT_LEVEL_ID = "set1-level19"


@dataclass(frozen=True)
class Level:
    id: str
    name: str
    width: int
    height: int
    rows: tuple[str, ...]
    target: tuple[int, ...]

    @classmethod
    def from_dict(cls, data: dict) -> Level:
        """Build a level from its JSON representation.

        Example::

            Level.from_dict({
                "id": "tiny", "name": "Tiny", "width": 2, "height": 2,
                "rows": ["A ", "  "], "target": [3],
            })
        """
        if not isinstance(data, dict):
            raise InvalidLayoutError(f"Level entry must be an object, got {data!r}.")
        try:
            level_id = _expect(data, "id", str)
            level = cls(
                id=level_id,
                name=_expect(data, "name", str) if "name" in data else level_id,
                width=_expect_int(data, "width"),
                height=_expect_int(data, "height"),
                rows=tuple(_expect_list(data, "rows", str)),
                target=tuple(_expect_list(data, "target", int)),
            )
        except KeyError as exc:
            raise InvalidLayoutError(
                f"Level entry {data!r} is missing {exc.args[0]!r}."
            ) from None
        level.validate()
        return level

    def validate(self) -> None:
        """Raise ``InvalidLayoutError`` unless the level describes a usable board."""
        self.board.from_rows(list(self.rows))

    @property
    def board(self) -> Board:
        return Board(width=self.width, height=self.height, target=self.target)

    @property
    def initial(self) -> State:
        return self.board.from_rows(list(self.rows))


class LevelLoader:
    """Loads and queries levels from a JSON file."""

    def __init__(self, filepath: Path = DEFAULT_LEVELS) -> None:
        self.filepath = filepath
        self._levels: dict[str, Level] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        try:
            data = json.loads(self.filepath.read_text())
        except FileNotFoundError as exc:
            raise InvalidLayoutError(f"Level file not found: {self.filepath}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidLayoutError(f"{self.filepath} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise InvalidLayoutError(
                f"{self.filepath} must contain a JSON list of levels."
            )
        for entry in data:
            level = Level.from_dict(entry)
            if level.id in self._levels:
                raise InvalidLayoutError(f"Duplicate level id {level.id!r}.")
            self._levels[level.id] = level

    # -- queries --------------------------------------------------------------

    def get(self, level_id: str) -> Level:
        try:
            return self._levels[level_id]
        except KeyError:
            known = ", ".join(self._levels) or "none"
            raise UnknownLevelError(
                f"Unknown level {level_id!r} (available: {known})."
            ) from None

    def get_all_ids(self) -> list[str]:
        return list(self._levels)

    def __len__(self) -> int:
        return len(self._levels)


# -- JSON field checks --------------------------------------------------------


def _is_int(value: object) -> bool:
    # JSON true/false decode to bool, which is an int subclass.
    return isinstance(value, int) and not isinstance(value, bool)


def _expect(data: dict, key: str, kind: type) -> object:
    value = data[key]
    if not isinstance(value, kind):
        raise InvalidLayoutError(
            f"Level field {key!r} must be a {kind.__name__}, got {value!r}."
        )
    return value


def _expect_int(data: dict, key: str) -> int:
    value = data[key]
    if not _is_int(value):
        raise InvalidLayoutError(
            f"Level field {key!r} must be an integer, got {value!r}."
        )
    return value


def _expect_list(data: dict, key: str, kind: type) -> list:
    items = _expect(data, key, list)
    for item in items:
        ok = _is_int(item) if kind is int else isinstance(item, kind)
        if not ok:
            raise InvalidLayoutError(
                f"Level field {key!r} must hold {kind.__name__} values, "
                f"got {item!r}."
            )
    return items
