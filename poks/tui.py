"""Terminal interface for playing against computer opponents."""

from __future__ import annotations

import argparse
import logging
import random
import time
from enum import Flag, auto
from typing import NamedTuple, Protocol

from poks.model import Action, ActionKind, GameState, show_hand
from poks.world import World

__all__ = ["PoksTUI", "Borders", "main"]

log = logging.getLogger(__name__)

DEFAULT_PLAYERS = 4
LOCAL_PLAYER = 0
TICK_SECONDS = 0.015
KEY_TIMEOUT_MS = 1
CONTROLS = "F1: Fold, F2: Check, F3: Raise, F4: All in"

_KEY_ACTIONS = {
    "F1": Action(ActionKind.FOLD),
    "F2": Action(ActionKind.CHECK),
    "F3": Action(ActionKind.RAISE, 10),
    "F4": Action(ActionKind.RAISE, 50),
}
_EXIT_KEYS = frozenset({"q", "ctrl+c"})


class _Screen(Protocol):
    def getmaxyx(self) -> tuple[int, int]: ...

    def erase(self) -> None: ...

    def addstr(self, y: int, x: int, text: str) -> None: ...

    def refresh(self) -> None: ...


class Borders(Flag):
    """Sides of a box that get a border line."""

    NONE = 0
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    ALL = TOP | BOTTOM | LEFT | RIGHT


class _Rect(NamedTuple):
    y: int
    x: int
    height: int
    width: int


class PoksTUI:
    """State of the interface: the world, the frame counter and the exit flag."""

    def __init__(self, players: int = DEFAULT_PLAYERS, rng: random.Random | None = None) -> None:
        self.world = World(players, rng)
        self.frame = 0
        self.gamestate = GameState.PAUSE
        self._should_exit = False

    def should_exit(self) -> bool:
        return self._should_exit

    def update(self) -> None:
        """Advance one frame and let the world take one tick."""
        self.frame += 1
        self.gamestate = self.world.tick_game()

    def handle_key(self, key: str) -> None:
        """React to a key name such as "q", "ctrl+c" or "F1"."""
        if key in _EXIT_KEYS:
            log.info("should exit")
            self._should_exit = True
        elif key == "F6":
            self.start_new_game()
        elif key in _KEY_ACTIONS:
            local_input = self.world.players[LOCAL_PLAYER].local_input
            if local_input is not None:
                local_input.set_action(_KEY_ACTIONS[key])

    def start_new_game(self) -> None:
        self.world.start_new_game()

    def gamedata(self) -> str:
        game = self.world.game
        return (
            f"Phase: {game.phase} | Turn of Player: {game.turn} | "
            f"You are Player: {LOCAL_PLAYER} | Pot: {game.pot()} | "
            f"Currency: {self.world.players[LOCAL_PLAYER].currency}€"
        )

    def metadata(self) -> str:
        return f"Frame: {self.frame}"

    def controls(self) -> str:
        return CONTROLS

    def render_action_log(self) -> str:
        """The action log, newest entry first, one line per entry."""
        lines = []
        for player, action in reversed(self.world.action_log()):
            lines.append(str(action) if player is None else f"Player {player}: {action}")
        return "".join(f"{line}\n" for line in lines)

    def render(self, screen: _Screen) -> None:
        """Draw the whole interface onto a curses-like screen."""
        height, width = screen.getmaxyx()
        screen.erase()
        _paragraph(screen, _Rect(0, 0, 3, width), self.gamedata(), Borders.ALL)
        self._render_world(screen, _Rect(3, 0, max(0, height - 7), width))
        _paragraph(
            screen,
            _Rect(height - 4, 0, 2, width),
            self.metadata(),
            Borders.TOP | Borders.LEFT | Borders.RIGHT,
        )
        _paragraph(
            screen,
            _Rect(height - 2, 0, 2, width),
            self.controls(),
            Borders.BOTTOM | Borders.LEFT | Borders.RIGHT,
        )
        screen.refresh()

    def _render_world(self, screen: _Screen, area: _Rect) -> None:
        inner = max(0, area.width - 4)
        side = max(20, inner // 4)
        center = max(0, inner - 2 * side)
        center_x = area.x + 2 + side
        right_x = center_x + center

        free = max(0, area.height - 7)
        table_y = area.y + free // 2
        hand_y = table_y + 3 + (free - free // 2)

        _paragraph(
            screen,
            _Rect(area.y, right_x, area.height, side),
            self.render_action_log(),
            Borders.ALL,
        )
        _paragraph(
            screen,
            _Rect(table_y, center_x + max(0, (center - 36) // 2), 3, min(36, center)),
            self.world.show_table(),
            Borders.ALL,
            center=True,
        )
        _paragraph(
            screen,
            _Rect(hand_y, center_x + max(0, (center - 20) // 2), 3, min(20, center)),
            show_hand(self.world.players[LOCAL_PLAYER].hand),
            Borders.NONE,
            center=True,
        )


def _put(screen: _Screen, y: int, x: int, text: str) -> None:
    """Write text clipped to the screen, never touching the bottom-right cell."""
    height, width = screen.getmaxyx()
    if not 0 <= y < height or not 0 <= x < width:
        return
    limit = width - x - (1 if y == height - 1 else 0)
    text = text[: max(0, limit)]
    if text:
        screen.addstr(y, x, text)


def _box(screen: _Screen, rect: _Rect, borders: Borders) -> _Rect:
    """Draw the requested border lines and return the area inside them."""
    y, x, height, width = rect
    if height <= 0 or width <= 0:
        return _Rect(y, x, 0, 0)
    has_top, has_bottom = Borders.TOP in borders, Borders.BOTTOM in borders
    has_left, has_right = Borders.LEFT in borders, Borders.RIGHT in borders

    def horizontal(left: str, right: str) -> str:
        if width == 1:
            return left
        return left + "─" * (width - 2) + right

    if has_top:
        _put(screen, y, x, horizontal("┌" if has_left else "─", "┐" if has_right else "─"))
    if has_bottom and height > (1 if has_top else 0):
        _put(
            screen,
            y + height - 1,
            x,
            horizontal("└" if has_left else "─", "┘" if has_right else "─"),
        )
    for row in range(y + has_top, y + height - has_bottom):
        if has_left:
            _put(screen, row, x, "│")
        if has_right:
            _put(screen, row, x + width - 1, "│")
    return _Rect(
        y + has_top,
        x + has_left,
        max(0, height - has_top - has_bottom),
        max(0, width - has_left - has_right),
    )


def _paragraph(
    screen: _Screen, rect: _Rect, text: str, borders: Borders, center: bool = False
) -> None:
    inner = _box(screen, rect, borders)
    if inner.width <= 0:
        return
    for offset, line in enumerate(text.split("\n")[: inner.height]):
        line = line[: inner.width]
        indent = (inner.width - len(line)) // 2 if center else 0
        _put(screen, inner.y + offset, inner.x + indent, line)


def _key_name(code: int, function_keys: dict[int, str]) -> str | None:
    if code < 0:
        return None
    if code == 3:
        return "ctrl+c"
    if code in function_keys:
        return function_keys[code]
    if code < 256:
        return chr(code)
    return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game in the terminal."""
    parser = argparse.ArgumentParser(prog="pokst", description="Play poker in the terminal.")
    parser.add_argument("--players", type=int, default=DEFAULT_PLAYERS)
    parser.add_argument("--log-file", default="poks.log")
    args = parser.parse_args(argv)
    if args.players < 1:
        parser.error("at least one player is needed")

    logging.basicConfig(filename=args.log_file, filemode="a", level=logging.DEBUG)

    import curses

    function_keys = {curses.KEY_F(number): f"F{number}" for number in range(1, 13)}
    tui = PoksTUI(args.players)

    def run(screen) -> None:
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.timeout(KEY_TIMEOUT_MS)
        screen.keypad(True)
        while not tui.should_exit():
            try:
                tui.render(screen)
            except curses.error:
                log.warning("terminal too small to draw")
            key = _key_name(screen.getch(), function_keys)
            if key is not None:
                tui.handle_key(key)
            tui.update()
            time.sleep(TICK_SECONDS)

    try:
        curses.wrapper(run)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())