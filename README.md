# poks

A small game of Texas hold'em played in the terminal. You sit at a table
with computer opponents (three by default); every player starts with 5000
to bet.

## Installing

```
pip install .
```

The package needs nothing beyond the standard library. The terminal
interface uses `curses`, so it runs where Python ships that module (Linux,
macOS and other POSIX systems); the game model works everywhere.

## Playing

```
pokst
```

Options:

| Option              | Meaning                                         |
|---------------------|-------------------------------------------------|
| `--players N`       | Number of seats, including yours (default 4)    |
| `--log-file PATH`   | File log messages are appended to (default `poks.log`) |

The screen shows the current phase, whose turn it is, the pot and your
money at the top, the cards on the table and your own hand in the middle,
a log of what every player did on the right (newest first), and a frame
counter and the key help at the bottom.

Keys:

| Key        | Action                          |
|------------|---------------------------------|
| F1         | Fold                            |
| F2         | Check (match the highest bet)   |
| F3         | Raise by 10                     |
| F4         | Raise by 50                     |
| F6         | Start a new game                |
| q, Ctrl-C  | Quit                            |

## How a game runs

Each player in turn acts once per tick. When the last seat has acted and
every seat has the same total bet, the next cards are dealt after a burnt
card: three for the flop, one for the turn and one for the river. As soon
as the river is dealt there is a showdown: the best hands among the players
still in split the pot (any odd remainder goes to the first winner), a
"A new game has started" entry is logged and a fresh game is dealt.

Computer players act at random: mostly they check, sometimes they raise by
10, rarely by 100 (a check instead if they cannot afford it), and now and
then they fold.

## Using the game model

The game logic can be driven without the terminal interface:

```python
import random

from poks.model import Action, ActionKind
from poks.world import World

world = World(4, random.Random(1))
print(world.show_table())

world.players[0].local_input.set_action(Action(ActionKind.CHECK))
state = world.tick_game()
for player, action in world.action_log():
    print(player, action)
```

- `poks.cards` — `Rank`, `Suit`, `Card` and `shuffled_deck(rng)`.
- `poks.evaluator` — `evaluate(cards)` ranks the best five-card hand among
  five to seven cards as a comparable `HandRank`; `winners(hands)` returns
  the indices of the strongest hands.
- `poks.model` — `Phase`, `PlayerState`, `GameState`, `Action` and
  `ActionKind`, `Hand`, the per-game record `Game` (with `pot()` and
  `highest_bet()`), `random_action(rng)` and `show_hand(hand)`.
- `poks.player` — `Player.local(...)` and `Player.cpu(...)`, and
  `LocalInput`, the slot through which the interface hands over your action.
- `poks.world` — `World`: the deck, the players, betting rounds, the
  showdown and an action log of up to 2000 entries.
- `poks.tui` — `PoksTUI` and the `main` function behind `pokst`.

## What it does not do

- There are no blinds or antes, no side pots and no betting round after
  the river card: the showdown follows it at once.
- A betting round closes only once every seat, folded or not, has the same
  total bet, so a player who folds behind a raise leaves the round open.
- There is only one human seat, always player 0, and no play over a network.
- Nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```