#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# color_tui.py — ColorTUIDisplay: full-screen Textual TUI for the stone cutter.
#
# Requires: pip install textual

from __future__ import annotations

import asyncio
import threading

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, RichLog, Static

from autocut import run_batch
from stonecutter import FAIL, SLOTS, SUCCESS, Display, Event, Stone, format_event
from session import Session
from strategy import SEVEN_SEVEN, SIXTEEN


# ── Widgets ───────────────────────────────────────────────────────────────────

class ProbabilityPanel(Static):
    """Top strip showing the current success chance."""

    DEFAULT_CSS = """
    ProbabilityPanel {
        height: auto;
        border: solid $success-darken-1;
        padding: 0 1;
    }
    """


class SlotPanel(Static):
    """One slot: ten cells and the success count."""

    DEFAULT_CSS = """
    SlotPanel {
        height: auto;
        border: solid grey;
        padding: 0 1;
    }
    """


class StatusPanel(Static):
    """Attempt counter and the result of the last automated run."""

    DEFAULT_CSS = """
    StatusPanel {
        height: auto;
        border: solid $warning-darken-1;
        padding: 0 1;
    }
    """


class EventLog(RichLog):
    """Scrolling log of cuts and runs."""

    DEFAULT_CSS = """
    EventLog {
        height: 1fr;
        border: solid $primary-darken-1;
        padding: 0 1;
    }
    """


# ── Helpers ───────────────────────────────────────────────────────────────────

def _probability_markup(probability: int) -> str:
    return f"Success chance: [bold]{probability}%[/bold]"


def _slot_markup(slot: str, row: list[str], successes: int) -> str:
    """Ten cells for one slot. Hits on C are bad news, so they show red."""
    hit_color = "red" if slot == "C" else "green"
    cells: list[str] = []
    for result in row:
        if result == SUCCESS:
            cells.append(f"[{hit_color}]◆[/{hit_color}]")
        elif result == FAIL:
            cells.append("[dim]◇[/dim]")
        else:
            cells.append("·")
    return f"{slot}  {' '.join(cells)}   [bold]{successes}[/bold]"


def _status_markup(attempts: int, status: str, outcome: str) -> str:
    line = f"Attempts: {attempts}"
    if not status:
        return line
    color = "green" if outcome == SUCCESS else "red"
    return f"{line}\n[{color}]{status}[/{color}]"


# ── App ───────────────────────────────────────────────────────────────────────

class StoneCutterApp(App):
    """Full-screen stone cutter TUI."""

    TITLE = "Stone Cutter"
    BINDINGS = [
        ("a", "cut('A')", "Cut A"),
        ("b", "cut('B')", "Cut B"),
        ("c", "cut('C')", "Cut C"),
        ("1", f"auto('{SEVEN_SEVEN}')", "Auto 7/7"),
        ("2", f"repeat('{SEVEN_SEVEN}')", "Repeat 7/7"),
        ("3", f"auto('{SIXTEEN}')", "Auto 16"),
        ("4", f"repeat('{SIXTEEN}')", "Repeat 16"),
        ("r", "reset", "Reset"),
        ("x", "cancel", "Stop repeat"),
        ("q", "quit", "Quit"),
    ]
    CSS = """
    #board { height: auto; }
    """

    def __init__(self, session: Session | None = None,
                 display: ColorTUIDisplay | None = None) -> None:
        super().__init__()
        if display is None:
            display = ColorTUIDisplay()
        display.app = self
        self._stone_display = display
        self.session = session if session is not None else Session()
        self.session.display = display
        self._cancel = threading.Event()
        self._batch_thread: threading.Thread | None = None

    def compose(self) -> ComposeResult:
        yield ProbabilityPanel("", id="probability")
        with Vertical(id="board"):
            for slot in SLOTS:
                yield SlotPanel("", id=f"slot-{slot}")
        yield StatusPanel("", id="status")
        yield EventLog(id="event-log")
        yield Footer()

    def on_mount(self) -> None:
        self.update_state(self.session.stone)

    def on_unmount(self) -> None:
        self._cancel.set()

    def add_events(self, events: list[Event]) -> None:
        """Write renderable events to the EventLog; silent events are dropped."""
        log = self.query_one(EventLog)
        for event in events:
            text = format_event(event)
            if text is not None:
                log.write(text)

    def update_state(self, stone: Stone) -> None:
        """Repopulate every panel from stone and the session counters."""
        self.query_one(ProbabilityPanel).update(_probability_markup(stone.probability))
        for slot in SLOTS:
            self.query_one(f"#slot-{slot}", SlotPanel).update(
                _slot_markup(slot, stone.row(slot), stone.successes(slot))
            )
        self.query_one(StatusPanel).update(
            _status_markup(self.session.attempts, self.session.status, self.session.outcome)
        )

    def show_info_text(self, content: str) -> None:
        self.query_one(EventLog).write(content)

    def _batch_running(self) -> bool:
        """True while a repeat batch is running on its worker thread."""
        return self._batch_thread is not None and self._batch_thread.is_alive()

    def action_cut(self, slot: str) -> None:
        if not self._batch_running():
            self.session.cut(slot)

    def action_auto(self, strategy: str) -> None:
        if not self._batch_running():
            self.session.run_instant(strategy)

    def action_reset(self) -> None:
        if not self._batch_running():
            self.session.reset()

    def action_repeat(self, strategy: str) -> None:
        """Start a batch on a background thread; x stops it after the current run."""
        if self._batch_running():
            return
        self._cancel.clear()
        self.show_info_text(f"Repeating {strategy}... press x to stop.")
        self._batch_thread = threading.Thread(
            target=self._batch_worker, args=(strategy,), daemon=True
        )
        self._batch_thread.start()

    def action_cancel(self) -> None:
        self._cancel.set()

    def _batch_worker(self, strategy: str) -> None:
        """Run a repeat batch in a background thread, then hand the result to the UI.

        The app may exit (q, or test teardown) while the batch is in progress.
        Once it has, the result is dropped: call_from_thread() raises when the
        loop is gone, or re-raises a widget-not-found error mid-teardown.
        """
        session = self.session
        result = run_batch(strategy, max_attempts=session.max_attempts, rng=session.rng,
                           should_stop=self._cancel.is_set)
        if not self.is_running:
            return
        try:
            self.call_from_thread(session.apply_batch, strategy, result)
        except Exception:  # noqa: BLE001
            pass


# ── ColorTUIDisplay ───────────────────────────────────────────────────────────

class ColorTUIDisplay(Display):
    """Full-screen TUI display powered by Textual.

    Wire up via StoneCutterApp(session=..., display=...). Safe to call from the
    Textual event loop or from the batch worker thread.
    """

    def __init__(self, app: StoneCutterApp | None = None) -> None:
        self.app = app

    def _require_app(self, method: str) -> StoneCutterApp:
        if self.app is None:
            raise RuntimeError(
                f"ColorTUIDisplay.{method}() requires an app — "
                "pass app=StoneCutterApp() to the constructor"
            )
        return self.app

    def _call_on_ui(self, fn: callable, /, *args: object) -> None:
        """Call fn(*args) thread-safely.

        If an asyncio event loop is running in the current thread (Textual event loop),
        call fn directly. Otherwise schedule via call_from_thread() (background thread).
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.app.call_from_thread(fn, *args)  # type: ignore[union-attr]
        else:
            fn(*args)

    def show_events(self, events: list[Event]) -> None:
        app = self._require_app("show_events")
        self._call_on_ui(app.add_events, events)

    def show_state(self, stone: Stone) -> None:
        app = self._require_app("show_state")
        self._call_on_ui(app.update_state, stone)

    def show_info(self, content: str) -> None:
        app = self._require_app("show_info")
        self._call_on_ui(app.show_info_text, content)


if __name__ == "__main__":
    StoneCutterApp().run()
