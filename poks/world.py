"""The table: players, deck, betting rounds and the action log."""

from __future__ import annotations

import logging
import random
from collections import deque

from poks.cards import Card, shuffled_deck
from poks.evaluator import winners
from poks.model import Action, ActionKind, Game, GameState, Hand, Phase, PlayerState
from poks.player import Player, PlayerKind

__all__ = ["World", "STARTING_CURRENCY", "ACTION_LOG_SIZE", "TABLE_SIZE"]

log = logging.getLogger(__name__)

STARTING_CURRENCY = 5000
ACTION_LOG_SIZE = 2000
TABLE_SIZE = 5
_EMPTY_SLOT = "[    ]"


class World:
    """One local player and computer opponents playing hold'em rounds."""

    def __init__(self, players_amount: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.players: list[Player] = [Player.local(STARTING_CURRENCY)]
        self.players.extend(
            Player.cpu(STARTING_CURRENCY, self._rng) for _ in range(1, players_amount)
        )
        self._deck: list[Card] = []
        self._action_log: deque[tuple[int | None, Action]] = deque(maxlen=ACTION_LOG_SIZE)
        self.game = Game.new(len(self.players))
        self.start_new_game()

    def shuffle_cards(self) -> None:
        """Replace the deck with a freshly shuffled full deck."""
        self._deck = shuffled_deck(self._rng)

    def draw_card(self) -> Card:
        """Take the top card of the deck."""
        if not self._deck:
            raise RuntimeError("the deck was empty!")
        return self._deck.pop()

    def start_new_game(self) -> None:
        """Shuffle, deal two cards to every player and reset the game record."""
        self.shuffle_cards()
        game = Game.new(len(self.players))
        for player in self.players:
            player.set_hand(Hand(self.draw_card(), self.draw_card()))
        self.game = game

    def tick_game(self) -> GameState:
        """Let the player whose turn it is act once."""
        action = self.players[self.game.turn].act(self.game)
        self._process_player_action(action)
        if self.players[self.game.turn].kind is PlayerKind.LOCAL:
            return GameState.AWAITING_LOCAL_PLAYER
        return GameState.CPU_PLAYER_DID_SOMETHING

    def _process_player_action(self, action: Action) -> None:
        game = self.game
        turn = game.turn
        player = self.players[turn]
        state = game.player_states[turn]
        if state is not PlayerState.PLAYING:
            log.info("Player cannot do anything because they are %s", state)
            game.turn = (turn + 1) % len(self.players)
            return

        kind = action.kind
        if kind is ActionKind.FOLD:
            game.player_states[turn] = PlayerState.FOLDED
        elif kind is ActionKind.RAISE:
            if action.amount > player.currency:
                raise ValueError(
                    f"player {turn} cannot raise {action.amount} with {player.currency}"
                )
            player.currency -= action.amount
            game.player_total_bets[turn] += action.amount
        elif kind is ActionKind.ALL_IN:
            game.player_total_bets[turn] += player.currency
            player.currency = 0
        elif kind is ActionKind.CHECK:
            highest = game.highest_bet()
            total = game.player_total_bets[turn]
            if total < highest:
                diff = highest - total
                if player.currency < diff:
                    self._process_player_action(Action(ActionKind.ALL_IN))
                    return
                player.currency -= diff
                game.player_total_bets[turn] += diff
        elif kind is ActionKind.HIDDEN_WAIT:
            return
        else:
            self._action_log.append((None, action))
            return

        self._action_log.append((turn, action))
        game.turn += 1
        if game.turn >= len(self.players):
            self._advance_phase()

    def _deal_to_table(self, count: int) -> None:
        self.draw_card()  # burn card
        for _ in range(count):
            self.game.table_cards.append(self.draw_card())

    def _advance_phase(self) -> None:
        self.game.turn = 0
        if not self._bets_complete():
            return
        phase = self.game.phase
        if phase is Phase.PREFLOP:
            self._deal_to_table(3)
            self.game.phase = Phase.FLOP
        elif phase is Phase.FLOP:
            self._deal_to_table(1)
            self.game.phase = Phase.TURN
        elif phase is Phase.TURN:
            self._deal_to_table(1)
            self.game.phase = Phase.RIVER
            self.showdown()
        else:
            raise RuntimeError("cannot advance past the river")

    def _bets_complete(self) -> bool:
        highest = self.game.highest_bet()
        if all(bet == highest for bet in self.game.player_total_bets):
            return True
        log.info("highest bet is %s", highest)
        log.info("Bets are not done!")
        return False

    def show_table(self) -> str:
        """Render the five table slots, empty ones as placeholders."""
        cards = "".join(str(card) for card in self.game.table_cards[:TABLE_SIZE])
        return cards + _EMPTY_SLOT * (TABLE_SIZE - len(self.game.table_cards[:TABLE_SIZE]))

    def action_log(self) -> list[tuple[int | None, Action]]:
        """Logged actions, oldest first, with the acting player's index or None."""
        return list(self._action_log)

    def showdown(self) -> list[int]:
        """Split the pot among the best hands, start a new game, return the winners."""
        game = self.game
        if len(game.table_cards) != TABLE_SIZE:
            raise RuntimeError("showdown needs five table cards")
        contenders = [
            index
            for index, state in enumerate(game.player_states)
            if state is PlayerState.PLAYING
        ] or list(range(len(self.players)))
        hands = []
        for index in contenders:
            hand = self.players[index].hand
            if hand is None:
                raise RuntimeError(f"player {index} has no hand")
            hands.append([*hand, *game.table_cards])
        winning = [contenders[position] for position in winners(hands)]
        share, remainder = divmod(game.pot(), len(winning))
        for position, index in enumerate(winning):
            self.players[index].currency += share + (remainder if position == 0 else 0)
        log.info("players %s win the showdown", winning)
        self._action_log.append((None, Action(ActionKind.NEW_GAME)))
        self.start_new_game()
        return winning