"""Texas Hold'em table simulation: evaluator, betting engine and hand flow."""

from .betting import BettingEngine, ReRaiseResolver
from .cards import Card, Deck, EmptyDeckError, RANKS, SUITS, build_deck, parse_cards
from .evaluator import HandCategory, describe_rank, evaluate
from .events import EventChannel
from .game import Game
from .human import FOLD_SENTINEL, HumanInput
from .models import Action, ActionType, Event, EventKind, Personality, Phase, Player, TableConfig
from .strategies import strategy_for
from .table import TableState, build_table

__all__ = [
    "Action",
    "ActionType",
    "BettingEngine",
    "Card",
    "Deck",
    "EmptyDeckError",
    "Event",
    "EventChannel",
    "EventKind",
    "FOLD_SENTINEL",
    "Game",
    "HandCategory",
    "HumanInput",
    "Personality",
    "Phase",
    "Player",
    "RANKS",
    "ReRaiseResolver",
    "SUITS",
    "TableConfig",
    "TableState",
    "build_deck",
    "build_table",
    "describe_rank",
    "evaluate",
    "parse_cards",
    "strategy_for",
]
