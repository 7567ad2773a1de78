from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from .evaluator import HandCategory
from .models import Action, ActionType, Personality

# Scripted seats. Each strategy is a pure function of (rank, current bet, stack)
# so it can be exercised without a table.

STRONG_HAND = HandCategory.STRAIGHT
VERY_AGGRESSIVE_STEP = 50


class Strategy(ABC):
    personality: Personality
    # Hands strictly better than this are never folded to a big bet.
    never_fold_below: HandCategory = HandCategory.STRAIGHT_FLUSH
    # Hands strictly better than this call a re-raise.
    reraise_below: HandCategory = HandCategory.STRAIGHT_FLUSH

    @abstractmethod
    def bet_amount(self, rank: HandCategory, current_bet: int, stack: int) -> int:
        """Chips this personality wants in front of it for the street."""

    def decide(self, rank: HandCategory, current_bet: int, stack: int) -> Action:
        target = self.bet_amount(rank, current_bet, stack)
        if target > current_bet:
            if target >= 2 * (current_bet + 1):
                return Action(ActionType.RAISE, target)
            return Action(ActionType.CALL, current_bet)
        if current_bet > 0 and current_bet >= 2 * target:
            if rank < self.never_fold_below:
                return Action(ActionType.CALL, current_bet)
            return Action(ActionType.FOLD)
        return Action(ActionType.CALL, current_bet)

    def calls_reraise(self, rank: HandCategory) -> bool:
        return rank < self.reraise_below

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PercentageStrategy(Strategy):
    """Bets a slice of the stack, a bigger slice with straight or better."""

    weak_percent = 0
    strong_percent = 0

    def bet_amount(self, rank: HandCategory, current_bet: int, stack: int) -> int:
        percent = self.strong_percent if rank <= STRONG_HAND else self.weak_percent
        return stack * percent // 100


class Cautious(PercentageStrategy):
    personality = Personality.CAUTIOUS
    weak_percent = 5
    strong_percent = 10
    never_fold_below = HandCategory.FLUSH
    reraise_below = HandCategory.THREE_OF_A_KIND


class Moderate(PercentageStrategy):
    personality = Personality.MODERATE
    weak_percent = 10
    strong_percent = 15
    never_fold_below = HandCategory.STRAIGHT
    reraise_below = HandCategory.TWO_PAIR


class Balanced(PercentageStrategy):
    personality = Personality.BALANCED
    weak_percent = 15
    strong_percent = 20
    never_fold_below = HandCategory.THREE_OF_A_KIND
    reraise_below = HandCategory.PAIR


class Aggressive(Strategy):
    """Bets hardest with weak hands, slows down holding quads or better."""

    personality = Personality.AGGRESSIVE
    reraise_below = HandCategory.HIGH_CARD

    def bet_amount(self, rank: HandCategory, current_bet: int, stack: int) -> int:
        if rank < HandCategory.FULL_HOUSE:
            return stack * 15 // 100
        if rank <= STRONG_HAND:
            return stack * 25 // 100
        return stack * 30 // 100


class VeryAggressive(Strategy):
    """Keeps bumping the bet while it is cheap, folds only air against a big bet."""

    personality = Personality.VERY_AGGRESSIVE

    def bet_amount(self, rank: HandCategory, current_bet: int, stack: int) -> int:
        if 2 * current_bet < stack:
            return current_bet + VERY_AGGRESSIVE_STEP
        if rank == HandCategory.HIGH_CARD:
            return 0
        return current_bet

    def decide(self, rank: HandCategory, current_bet: int, stack: int) -> Action:
        target = self.bet_amount(rank, current_bet, stack)
        if target == 0:
            return Action(ActionType.FOLD)
        if target > current_bet:
            return Action(ActionType.RAISE, target)
        return Action(ActionType.CALL, current_bet)

    def calls_reraise(self, rank: HandCategory) -> bool:
        return True


STRATEGIES: Dict[Personality, Strategy] = {
    strategy.personality: strategy
    for strategy in (Cautious(), Moderate(), Balanced(), Aggressive(), VeryAggressive())
}


def strategy_for(personality: Personality) -> Strategy:
    return STRATEGIES[Personality(personality)]
