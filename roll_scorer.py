import itertools
import logging
from collections.abc import Sequence
from numbers import Integral
from typing import Dict, Tuple

import numpy as np

from scoring_rules import RULES, ALL_CATEGORIES, NUM_DICE, MIN_FACE, MAX_FACE

logger = logging.getLogger(__name__)


class InvalidRoll(ValueError):
    """Raised when a roll is not five integer dice between 1 and 6."""

    def __init__(self, dice_values, reason):
        self.dice_values = dice_values
        self.reason = reason
        super().__init__(f"Invalid roll {dice_values!r}: {reason}")


def validate_roll(dice_values) -> Tuple[int, ...]:
    """
    Checks that dice_values is a well-formed roll and returns it as a tuple of ints.

    Lists, tuples and numpy integer arrays are accepted. Raises InvalidRoll
    for anything else, for the wrong number of dice, or for faces outside 1-6.
    """
    if isinstance(dice_values, np.ndarray):
        if dice_values.ndim != 1 or not np.issubdtype(dice_values.dtype, np.integer):
            raise InvalidRoll(dice_values, "expected a flat array of integers")
        dice_values = dice_values.tolist()
    elif isinstance(dice_values, (str, bytes)) or not isinstance(dice_values, Sequence):
        raise InvalidRoll(dice_values, "expected an ordered sequence of dice values")

    if len(dice_values) != NUM_DICE:
        raise InvalidRoll(dice_values, f"expected {NUM_DICE} dice, got {len(dice_values)}")

    for value in dice_values:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidRoll(dice_values, f"die value {value!r} is not an integer")
        if not MIN_FACE <= value <= MAX_FACE:
            raise InvalidRoll(dice_values, f"die value {value} is outside {MIN_FACE}-{MAX_FACE}")

    return tuple(int(value) for value in dice_values)


def _checked(dice_values):
    try:
        return validate_roll(dice_values)
    except InvalidRoll as e:
        logger.warning(f"Rejected roll: {e.reason}")
        raise


def score_roll(category, dice_values, rules=RULES) -> int:
    """Validates the roll and returns its score for the given category."""
    if category not in rules:
        raise KeyError(f"Unknown category '{category}'")
    roll = _checked(dice_values)
    score = rules[category].eval_roll(roll)
    logger.debug(f"{category} scores {score} for {list(roll)}")
    return score


def score_all(dice_values, rules=RULES) -> Dict[str, int]:
    """Returns the score of the roll for every category."""
    roll = _checked(dice_values)
    return {category: rule.eval_roll(roll) for category, rule in rules.items()}


def score_vector(dice_values, rules=RULES, categories=ALL_CATEGORIES) -> np.ndarray:
    """Scores the roll as an int32 array in category order, for numeric consumers."""
    roll = _checked(dice_values)
    return np.array([rules[category].eval_roll(roll) for category in categories], dtype=np.int32)


def score_table(rules=RULES, categories=ALL_CATEGORIES) -> Tuple[np.ndarray, np.ndarray]:
    """
    Scores every distinct roll (order ignored) against every category.

    Returns:
        rolls: (252, 5) array of sorted rolls
        scores: (252, len(categories)) array of scores
    """
    rolls = np.array(
        list(itertools.combinations_with_replacement(range(MIN_FACE, MAX_FACE + 1), NUM_DICE)),
        dtype=np.int32,
    )
    scores = np.array(
        [[rules[category].eval_roll(roll.tolist()) for category in categories] for roll in rolls],
        dtype=np.int32,
    )
    logger.debug(f"Scored {len(rolls)} rolls against {len(categories)} categories")
    return rolls, scores
