import random

import pytest

from poks.model import ActionKind, GameState, Phase, PlayerState
from poks.tui import PoksTUI


class FakeScreen:
    def __init__(self, height=30, width=120):
        self.height = height
        self.width = width
        self.refreshed = 0
        self.erase()

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.grid = [[" "] * self.width for _ in range(self.height)]

    def addstr(self, y, x, text):
        if not 0 <= y < self.height or x < 0 or x + len(text) > self.width:
            raise AssertionError(f"write out of bounds at {y},{x}: {text!r}")
        if y == self.height - 1 and x + len(text) == self.width:
            raise AssertionError("wrote to bottom-right cell")
        for offset, char in enumerate(text):
            self.grid[y][x + offset] = char

    def refresh(self):
        self.refreshed += 1

    def text(self):
        return "\n".join("".join(row) for row in self.grid)


@pytest.fixture
def tui():
    return PoksTUI(rng=random.Random(7))


def test_initial_gamedata(tui):
    assert tui.gamedata() == (
        "Phase: Preflop | Turn of Player: 0 | You are Player: 0 | Pot: 0 | Currency: 5000€"
    )


def test_metadata_counts_frames(tui):
    assert tui.metadata() == "Frame: 0"
    tui.update()
    tui.update()
    assert tui.metadata() == "Frame: 2"


def test_controls_text(tui):
    assert tui.controls() == "F1: Fold, F2: Check, F3: Raise, F4: All in"


@pytest.mark.parametrize("key", ["q", "ctrl+c"])
def test_exit_keys(tui, key):
    assert tui.should_exit() is False
    tui.handle_key(key)
    assert tui.should_exit() is True


def test_plain_c_does_not_exit(tui):
    tui.handle_key("c")
    tui.handle_key("x")
    assert tui.should_exit() is False


def test_update_without_input_waits(tui):
    tui.update()
    assert tui.gamestate is GameState.AWAITING_LOCAL_PLAYER
    assert tui.world.game.turn == 0
    assert tui.render_action_log() == ""


def test_fold_key(tui):
    tui.handle_key("F1")
    tui.update()
    assert tui.world.game.player_states[0] is PlayerState.FOLDED
    assert tui.render_action_log() == "Player 0: folds\n"


def test_check_key_passes_turn(tui):
    tui.handle_key("F2")
    tui.update()
    assert tui.world.game.turn == 1
    assert tui.gamestate is GameState.CPU_PLAYER_DID_SOMETHING
    assert tui.render_action_log() == "Player 0: checks\n"


def test_raise_key(tui):
    tui.handle_key("F3")
    tui.update()
    assert tui.world.players[0].currency == 5000 - 10
    assert tui.world.game.pot() == 10
    assert tui.render_action_log() == "Player 0: raises by 10\n"


def test_big_raise_key(tui):
    tui.handle_key("F4")
    tui.update()
    assert tui.world.players[0].currency == 5000 - 50
    assert tui.world.action_log()[-1][1].kind is ActionKind.RAISE


def test_action_log_newest_first(tui):
    tui.handle_key("F2")
    tui.update()
    tui.update()
    lines = tui.render_action_log().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Player 1: ")
    assert lines[1] == "Player 0: checks"


def test_new_game_key_resets(tui):
    tui.handle_key("F3")
    tui.update()
    assert tui.world.game.pot() == 10
    tui.handle_key("F6")
    assert tui.world.game.pot() == 0
    assert tui.world.game.phase is Phase.PREFLOP
    assert all(player.hand is not None for player in tui.world.players)


def test_render_shows_panels(tui):
    screen = FakeScreen()
    tui.render(screen)
    text = screen.text()
    assert tui.gamedata() in text
    assert tui.controls() in text
    assert "Frame: 0" in text
    assert "[    ]" * 5 in text
    assert str(tui.world.players[0].hand) in text
    assert screen.refreshed == 1


def test_render_shows_action_log(tui):
    tui.handle_key("F1")
    tui.update()
    screen = FakeScreen()
    tui.render(screen)
    assert "Player 0: folds" in screen.text()


@pytest.mark.parametrize("size", [(5, 10), (12, 40), (1, 1)])
def test_render_stays_inside_small_screens(tui, size):
    screen = FakeScreen(*size)
    tui.render(screen)
    assert len(screen.text().splitlines()) == size[0]
    assert screen.refreshed == 1