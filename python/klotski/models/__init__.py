from klotski.models.board import EMPTY, Board, Direction, State
from klotski.models.level import Level, LevelLoader

__all__ = ["EMPTY", "Board", "Direction", "Level", "LevelLoader", "State"]
