"""Core game data: phases, actions, hands and the per-round game record."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from poks.cards import Card

__all__ = [
    "Phase",
    "PlayerState",
    "GameState",
    "ActionKind",
    "Action",
    "random_action",
    "Hand",
    "Game",
    "show_hand",
]


class Phase(Enum):
    """Betting round of a game."""

    PREFLOP = "Preflop"
    FLOP = "Flop"
    TURN = "Turn"
    RIVER = "River"

    def __str__(self) -> str:
        return self.value


class PlayerState(Enum):
    """Whether a player still takes part in the current game."""

    PLAYING = "Playing"
    FOLDED = "Folded"
    PAUSED = "Paused"
    LOST = "Lost"

    def __str__(self) -> str:
        return self.value


class GameState(Enum):
    """What happened on the last tick of the game."""

    CPU_PLAYER_DID_SOMETHING = auto()
    PAUSE = auto()
    AWAITING_LOCAL_PLAYER = auto()


class ActionKind(Enum):
    """Kinds of action a player can take."""

    HIDDEN_WAIT = auto()
    FOLD = auto()
    CHECK = auto()
    RAISE = auto()
    ALL_IN = auto()
    NEW_GAME = auto()


@dataclass(frozen=True)
class Action:
    """A player's action; only a raise carries an amount."""

    kind: ActionKind
    amount: int = 0

    def __post_init__(self) -> None:
        if self.kind is ActionKind.RAISE:
            if self.amount < 0:
                raise ValueError("a raise cannot be negative")
        elif self.amount != 0:
            raise ValueError(f"{self.kind.name} carries no amount")

    def __str__(self) -> str:
        if self.kind is ActionKind.RAISE:
            return f"raises by {self.amount}"
        return _ACTION_TEXT[self.kind]


_ACTION_TEXT = {
    ActionKind.HIDDEN_WAIT: "is waiting...",
    ActionKind.FOLD: "folds",
    ActionKind.CHECK: "checks",
    ActionKind.ALL_IN: "goes all in!",
    ActionKind.NEW_GAME: "A new game has started",
}


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def random_action(rng: _IntSource) -> Action:
    """Draw a computer player's action: mostly checks, some raises, rare folds."""
    disc = rng.randint(0, 100)
    if disc == 0:
        return Action(ActionKind.FOLD)
    if disc < 70:
        return Action(ActionKind.CHECK)
    if disc < 100:
        return Action(ActionKind.RAISE, 10)
    return Action(ActionKind.RAISE, 100)


@dataclass(frozen=True, order=True)
class Hand:
    """The two private cards of a player."""

    first: Card
    second: Card

    def __getitem__(self, index: int) -> Card:
        if index == 0:
            return self.first
        if index == 1:
            return self.second
        raise IndexError("Index too large: Only two cards per hand")

    def __iter__(self) -> Iterator[Card]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"{self.first}{self.second}"


@dataclass
class Game:
    """State of the current game: phase, whose turn it is, bets and table cards."""

    phase: Phase = Phase.PREFLOP
    turn: int = 0
    player_states: list[PlayerState] = field(default_factory=list)
    player_total_bets: list[int] = field(default_factory=list)
    table_cards: list[Card] = field(default_factory=list)

    @classmethod
    def new(cls, player_amount: int) -> Game:
        """Return a fresh game for the given number of players."""
        return cls(
            player_states=[PlayerState.PLAYING] * player_amount,
            player_total_bets=[0] * player_amount,
        )

    def pot(self) -> int:
        """Total of all bets."""
        return sum(self.player_total_bets)

    def highest_bet(self) -> int:
        """The largest total bet of any player."""
        if not self.player_total_bets:
            raise ValueError("a game without players has no bets")
        return max(self.player_total_bets)


def show_hand(hand: Hand | None) -> str:
    """Render a hand, or a placeholder when there is none."""
    return "(No Hand)" if hand is None else str(hand)