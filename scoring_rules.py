"""
Scoring rules for a single Yahtzee roll.

Every category is scored by a Rule. A Rule holds a frozen configuration
(target face, required repeat count or fixed payout) and evaluates a roll of
five dice to a non-negative integer score. The set of rule variants is closed:
TotalOneNumber, SumDistro, FullHouse, SmallStraight, LargeStraight and Yahtzee.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict

from dice_analysis import dice_sum, frequencies, count_of, distinct_values

logger = logging.getLogger(__name__)

# Constants for scoring categories
ONES = "Ones"
TWOS = "Twos"
THREES = "Threes"
FOURS = "Fours"
FIVES = "Fives"
SIXES = "Sixes"
THREE_OF_A_KIND = "Three of a Kind"
FOUR_OF_A_KIND = "Four of a Kind"
FULL_HOUSE = "Full House"
SMALL_STRAIGHT = "Small Straight"
LARGE_STRAIGHT = "Large Straight"
YAHTZEE = "Yahtzee"
CHANCE = "Chance"

UPPER_SECTION_CATEGORIES = (ONES, TWOS, THREES, FOURS, FIVES, SIXES)
LOWER_SECTION_CATEGORIES = (THREE_OF_A_KIND, FOUR_OF_A_KIND, FULL_HOUSE, SMALL_STRAIGHT, LARGE_STRAIGHT, YAHTZEE, CHANCE)
ALL_CATEGORIES = UPPER_SECTION_CATEGORIES + LOWER_SECTION_CATEGORIES

NUM_DICE = 5
MIN_FACE = 1
MAX_FACE = 6

FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
YAHTZEE_SCORE = 50


@dataclass(frozen=True)
class FaceConfig:
    """Configuration for upper section rules: the face being totalled."""
    val: int
    description: str = ""


@dataclass(frozen=True)
class CountConfig:
    """Configuration for sum rules: minimum repeat count (0 always qualifies)."""
    count: int
    description: str = ""


@dataclass(frozen=True)
class FixedScoreConfig:
    """Configuration for rules paying a fixed score."""
    score: int
    description: str = ""


class Rule(ABC):
    """
    Abstract scoring rule.

    Subclasses only implement eval_roll; the configuration is stored as-is and
    cannot be replaced after construction, so a rule can be shared freely.
    """
    __slots__ = ("_config",)
    config_type = None

    def __init__(self, config):
        if self.config_type is not None and not isinstance(config, self.config_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.config_type.__name__}, got {type(config).__name__}"
            )
        object.__setattr__(self, "_config", config)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def config(self):
        return self._config

    @property
    def description(self):
        return self.config.description

    @abstractmethod
    def eval_roll(self, dice_values) -> int:
        """Returns the score of the roll under this rule."""

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return type(self) is type(other) and self.config == other.config

    def __hash__(self):
        return hash((type(self), self.config))

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r})"


class TotalOneNumber(Rule):
    """Scores the target face times the number of dice showing it."""
    config_type = FaceConfig

    def eval_roll(self, dice_values):
        return self.config.val * count_of(dice_values, self.config.val)


class SumDistro(Rule):
    """Scores the sum of all dice if some face repeats at least `count` times."""
    config_type = CountConfig

    def eval_roll(self, dice_values):
        if any(c >= self.config.count for c in frequencies(dice_values)):
            return dice_sum(dice_values)
        return 0


class FullHouse(Rule):
    """Three of one face and two of another. Five of a kind does not count."""
    config_type = FixedScoreConfig

    def eval_roll(self, dice_values):
        freqs = frequencies(dice_values)
        return self.config.score if 2 in freqs and 3 in freqs else 0


class SmallStraight(Rule):
    """Four consecutive faces: 234 plus 1 or 5, or 345 plus 2 or 6."""
    config_type = FixedScoreConfig

    def eval_roll(self, dice_values):
        d = distinct_values(dice_values)
        if {2, 3, 4} <= d and (1 in d or 5 in d):
            return self.config.score
        if {3, 4, 5} <= d and (2 in d or 6 in d):
            return self.config.score
        return 0


class LargeStraight(Rule):
    """
    Five distinct faces that do not include both 1 and 6.

    Five distinct faces leave out exactly one of the six. Unless that face is
    1 or 6, both ends are present and the roll does not qualify, so only the
    runs 1-5 and 2-6 score.
    """
    config_type = FixedScoreConfig

    def eval_roll(self, dice_values):
        d = distinct_values(dice_values)
        return self.config.score if len(d) == 5 and (1 not in d or 6 not in d) else 0


class Yahtzee(Rule):
    """All five dice the same."""
    config_type = FixedScoreConfig

    def eval_roll(self, dice_values):
        # Only the first frequency is inspected
        return self.config.score if frequencies(dice_values)[0] == 5 else 0


RULE_VARIANTS = (TotalOneNumber, SumDistro, FullHouse, SmallStraight, LargeStraight, Yahtzee)


def _face_description(val):
    return f"{val} point per {val}" if val == 1 else f"{val} points per {val}"


def build_rules() -> Dict[str, Rule]:
    """Builds the table of rules, one per category, keyed by category name."""
    rules = {}
    for val, category in enumerate(UPPER_SECTION_CATEGORIES, start=MIN_FACE):
        rules[category] = TotalOneNumber(FaceConfig(val=val, description=_face_description(val)))

    rules[THREE_OF_A_KIND] = SumDistro(CountConfig(count=3, description="Sum all dice if 3 are the same"))
    rules[FOUR_OF_A_KIND] = SumDistro(CountConfig(count=4, description="Sum all dice if 4 are the same"))
    rules[FULL_HOUSE] = FullHouse(FixedScoreConfig(
        score=FULL_HOUSE_SCORE, description=f"{FULL_HOUSE_SCORE} points for a full house"))
    rules[SMALL_STRAIGHT] = SmallStraight(FixedScoreConfig(
        score=SMALL_STRAIGHT_SCORE, description=f"{SMALL_STRAIGHT_SCORE} points for a small straight"))
    rules[LARGE_STRAIGHT] = LargeStraight(FixedScoreConfig(
        score=LARGE_STRAIGHT_SCORE, description=f"{LARGE_STRAIGHT_SCORE} points for a large straight"))
    rules[YAHTZEE] = Yahtzee(FixedScoreConfig(score=YAHTZEE_SCORE, description=f"{YAHTZEE_SCORE} points for yahtzee"))
    rules[CHANCE] = SumDistro(CountConfig(count=0, description="Sum of all dice"))

    logger.debug(f"Built {len(rules)} scoring rules")
    return rules


def describe_rules(rules=None):
    """Returns the human-readable description of each category's rule."""
    rules = RULES if rules is None else rules
    return {category: rule.description for category, rule in rules.items()}


RULES = MappingProxyType(build_rules())

ones = RULES[ONES]
twos = RULES[TWOS]
threes = RULES[THREES]
fours = RULES[FOURS]
fives = RULES[FIVES]
sixes = RULES[SIXES]
three_of_kind = RULES[THREE_OF_A_KIND]
four_of_kind = RULES[FOUR_OF_A_KIND]
full_house = RULES[FULL_HOUSE]
small_straight = RULES[SMALL_STRAIGHT]
large_straight = RULES[LARGE_STRAIGHT]
yahtzee = RULES[YAHTZEE]
chance = RULES[CHANCE]
