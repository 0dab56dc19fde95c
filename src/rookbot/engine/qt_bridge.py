"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from rookbot.core.notation import position_from_moves
from rookbot.core.position import Position
from rookbot.engine.minimax_engine import MinimaxEngine
from rookbot.engine.search import DEFAULT_DEPTH, SearchLimits


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    A request carries either a :class:`Position` or the space-separated move
    list of a game in progress.  The search itself cannot be interrupted;
    :meth:`cancel` only suppresses the result of the running request.
    """

    best_move_ready = pyqtSignal(int, str, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_DEPTH,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._engine = MinimaxEngine(rng)
        self._limits = SearchLimits(max_depth=max_depth)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, game: object, request_id: int) -> None:
        """Search for the best move in *game* and emit the result."""
        self._cancel_event.clear()
        try:
            if isinstance(game, Position):
                position = game
            elif isinstance(game, str):
                position = position_from_moves(game)
            else:
                self.search_error.emit(request_id, "Engine received invalid position")
                return
            result = self._engine.search(position, self._limits)
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, int(result.outcome))
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move.uci,
            result.score,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search.

        The worker is busy inside :meth:`request_move` while it searches, so a
        queued call would only run after the result was emitted and be cleared
        by the next request.  Call this directly from the controlling thread;
        the flag is a :class:`threading.Event` and is safe to set from there.
        """
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update the search depth (takes effect on the next search)."""
        try:
            self._limits = SearchLimits(max_depth=max_depth)
        except ValueError as exc:
            self.search_error.emit(-1, str(exc))
