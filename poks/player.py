"""Players at the table: the local user and computer opponents."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from enum import Enum, auto

from poks.model import Action, ActionKind, Game, Hand, random_action

__all__ = ["LocalInput", "PlayerKind", "Player"]


class LocalInput:
    """Thread-safe slot through which the interface hands the local user's action."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._action = Action(ActionKind.CHECK)
        self._ready = False

    def set_action(self, action: Action) -> None:
        """Store an action and mark it ready to be taken."""
        with self._lock:
            self._action = action
            self._ready = True

    def is_ready(self) -> bool:
        """Whether an action is waiting to be taken."""
        with self._lock:
            return self._ready

    def take(self) -> Action:
        """Return the waiting action and clear the ready flag."""
        with self._lock:
            if not self._ready:
                raise RuntimeError("no local action is ready")
            self._ready = False
            return self._action


class PlayerKind(Enum):
    """Who decides a player's actions."""

    LOCAL = auto()
    CPU = auto()


@dataclass
class Player:
    """A seat at the table with its chips and private hand."""

    kind: PlayerKind
    currency: int
    hand: Hand | None = None
    local_input: LocalInput | None = field(default=None, compare=False, repr=False)
    rng: random.Random | None = field(default=None, compare=False, repr=False)

    @classmethod
    def local(cls, currency: int, local_input: LocalInput | None = None) -> Player:
        """A player controlled by the local user."""
        return cls(
            PlayerKind.LOCAL,
            currency,
            local_input=local_input if local_input is not None else LocalInput(),
        )

    @classmethod
    def cpu(cls, currency: int, rng: random.Random | None = None) -> Player:
        """A computer-controlled player."""
        return cls(PlayerKind.CPU, currency, rng=rng if rng is not None else random.Random())

    def set_hand(self, hand: Hand) -> None:
        self.hand = hand

    def act(self, game: Game) -> Action:
        """Decide this player's next action."""
        if self.kind is PlayerKind.LOCAL:
            if self.local_input is None or not self.local_input.is_ready():
                return Action(ActionKind.HIDDEN_WAIT)
            return self.local_input.take()
        action = random_action(self.rng if self.rng is not None else random.Random())
        if action.kind is ActionKind.RAISE and self.currency < action.amount:
            return Action(ActionKind.CHECK)
        return action

    def win(self, game: Game) -> None:
        """Collect the whole pot of a game."""
        self.currency += game.pot()