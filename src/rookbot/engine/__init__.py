"""Chess engine package: evaluation, alpha-beta search and move selection.

The Qt worker lives in :mod:`rookbot.engine.qt_bridge` and is imported
separately so the engine can be used without loading Qt.
"""

from rookbot.engine.alphabeta import INF_SCORE, AlphaBetaSearch
from rookbot.engine.evaluation import capture_value, max_capture_value
from rookbot.engine.minimax_engine import (
    MinimaxEngine,
    choose_best_move,
    find_next_move,
    legal_moves,
)
from rookbot.engine.search import (
    DEFAULT_DEPTH,
    IEngine,
    SearchLimits,
    SearchResult,
    validate_depth,
)
from rookbot.engine.selector import MoveSelector

__all__ = [
    "DEFAULT_DEPTH",
    "INF_SCORE",
    "AlphaBetaSearch",
    "IEngine",
    "MinimaxEngine",
    "MoveSelector",
    "SearchLimits",
    "SearchResult",
    "capture_value",
    "choose_best_move",
    "find_next_move",
    "legal_moves",
    "max_capture_value",
    "validate_depth",
]
