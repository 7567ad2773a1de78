from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from .cards import Card

DEFAULT_NAMES: Tuple[str, ...] = (
    "You",
    "Phil",
    "Daniel",
    "Johnny",
    "Miki",
    "Stu",
    "Chris",
    "Erik",
    "Jennifer",
    "Bryn",
)
MIN_PLAYERS = 2
MAX_PLAYERS = 10


class Phase(str, Enum):
    PRE_FLOP = "PRE_FLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"


class ActionType(str, Enum):
    FOLD = "FOLD"
    CALL = "CALL"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


class EventKind(str, Enum):
    GAME_START = "GameStart"
    NEW_HAND = "NewHand"
    BET = "Bet"
    FOLD = "Fold"
    WIN = "Win"
    LOSE = "Lose"


class Personality(IntEnum):
    CAUTIOUS = 1
    MODERATE = 2
    BALANCED = 3
    AGGRESSIVE = 4
    VERY_AGGRESSIVE = 5


@dataclass
class TableConfig:
    players: int = 4
    starting_stack: int = 500
    names: Sequence[str] = DEFAULT_NAMES
    human_seat: Optional[int] = 0
    personalities: Optional[Sequence[Personality]] = None
    seed: Optional[int] = None
    action_delay_ms: int = 0


@dataclass
class Player:
    seat: int
    name: str
    stack: int
    personality: Personality
    is_human: bool = False
    hand: List[Card] = field(default_factory=list)
    current_bet: int = 0
    is_dealer: bool = False
    in_hand: bool = True

    def fold_cards(self) -> None:
        self.in_hand = False
        self.hand.clear()

    def bet_money(self, amount: int) -> int:
        """Debit up to ``amount`` and return what actually left the stack."""
        paid = max(0, min(amount, self.stack))
        self.stack -= paid
        return paid

    def add_money(self, amount: int) -> None:
        self.stack += amount

    def reset_for_hand(self) -> None:
        self.hand.clear()
        self.current_bet = 0
        self.in_hand = True


@dataclass(frozen=True)
class Action:
    type: ActionType
    amount: int = 0


@dataclass(frozen=True)
class Event:
    kind: EventKind
    text: str
