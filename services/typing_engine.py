# services/typing_engine.py
from __future__ import annotations
import copy
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from app.calculation import compute_result
from app.state import GameResult, SessionState, build_grid
from app.validation import KeyEvent
from core.events import ObserverRegistry
from services.input_processor import KeyOutcome, process_key

if TYPE_CHECKING:
    from core.chrono import Scheduler

log = logging.getLogger(__name__)

StateChangeCallback = Callable[[SessionState], None]
GameOverCallback = Callable[[GameResult], None]


class TypingEngine:
    """
    Session state machine: Idle -> Running -> Over.

    Owns the state record and the tick handle. Key presses go through
    services.input_processor; this class only starts, ticks and ends sessions.
    """

    def __init__(
        self,
        generate_text: Callable[[int], str],
        scheduler: "Scheduler",
        *,
        text_size: Optional[int] = None,
        time_limit: Optional[int] = None,
        auto_create: bool = False,
        abort_key: str = "Escape",
    ):
        self._generate_text = generate_text
        self._scheduler = scheduler
        self._abort_key = abort_key
        self._tick_handle: Any = None
        self._state = SessionState()
        self._state_changed = ObserverRegistry("state-change")
        self._game_over = ObserverRegistry("game-over")

        if auto_create:
            self.create_new_game(text_size or 100, time_limit)
        elif time_limit:
            self._state.time_limit = time_limit

    # ---------------- Read access ----------------
    def get_state(self) -> SessionState:
        return copy.deepcopy(self._state)

    def get_result(self) -> GameResult:
        s = self._state
        return compute_result(s.grid, s.elapsed_seconds, s.text)

    def is_ready(self) -> bool:
        return self._state.is_ready

    def is_letter_active(self, word: int, letter: int) -> bool:
        s = self._state
        return s.is_running and s.caret.word == word and s.caret.letter == letter

    # ---------------- Subscriptions ----------------
    def subscribe_state_change(self, cb: StateChangeCallback) -> Callable[[], None]:
        return self._state_changed.subscribe(cb)

    def subscribe_game_over(self, cb: GameOverCallback) -> Callable[[], None]:
        return self._game_over.subscribe(cb)

    # ---------------- Lifecycle ----------------
    def create_new_game(self, text_size: int = 100, time_limit: Optional[int] = None):
        """Fresh text and grid, caret at (0, 0). Does not start the clock."""
        if self._state.is_running:
            log.warning("create_new_game() called while a session is running; stopping it")
            self.stop()
        text = self._generate_text(text_size)
        self._state = SessionState(text=text, grid=build_grid(text), time_limit=time_limit)
        self._emit_state()

    def set_time_limit(self, seconds: Optional[int] = 30):
        if self._state.is_running:
            log.warning("set_time_limit() ignored: session is running")
            return
        self._state.time_limit = seconds
        self._emit_state()

    def start(self):
        s = self._state
        if s.is_running:
            log.warning("start() ignored: session is already running")
            return
        if not s.is_ready:
            log.warning("start() ignored: no text, call create_new_game() first")
            return
        if s.is_over:
            log.warning("start() ignored: session is over, create a new game first")
            return
        s.is_running = True
        s.is_over = False
        s.elapsed_seconds = 0
        self._emit_state()
        self._tick_handle = self._scheduler.schedule_every_second(self.tick)

    def stop(self):
        self._cancel_tick()
        self._state.is_running = False
        self._emit_state()

    def reset(self):
        self._cancel_tick()
        self._state = SessionState()
        self._emit_state()

    def tick(self):
        s = self._state
        if not s.is_running:
            # stale callback from a cancelled timer
            return
        s.elapsed_seconds += 1
        if s.time_limit and s.elapsed_seconds >= s.time_limit:
            self._end_game()
            return
        if s.at_terminal():
            self._end_game()
            return
        self._emit_state()

    # ---------------- Input ----------------
    def handle_key(self, event: KeyEvent):
        outcome = process_key(event, self._state, self._abort_key)
        if outcome is KeyOutcome.END:
            self._end_game()
        elif outcome is KeyOutcome.UPDATED:
            self._emit_state()
        elif outcome is KeyOutcome.FINISHED:
            self._emit_state()
            self._end_game()

    # ---------------- Internals ----------------
    def _end_game(self):
        s = self._state
        if s.is_over or not s.is_running:
            return
        self._cancel_tick()
        s.is_running = False
        s.is_over = True
        result = self.get_result()
        log.info("Session over: %d wpm, %d%% accuracy", result.wpm, result.accuracy)
        self._emit_state()
        self._game_over.emit(result)

    def _cancel_tick(self):
        handle, self._tick_handle = self._tick_handle, None
        if handle is not None:
            self._scheduler.cancel(handle)

    def _emit_state(self):
        self._state_changed.emit(self.get_state())
