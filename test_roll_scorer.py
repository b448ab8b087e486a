import unittest
import numpy as np
from roll_scorer import InvalidRoll, validate_roll, score_roll, score_all, score_vector
from scoring_rules import (
    ALL_CATEGORIES, SumDistro, CountConfig, build_rules,
    ONES, SIXES, THREE_OF_A_KIND, FULL_HOUSE, LARGE_STRAIGHT, YAHTZEE, CHANCE,
)


class TestValidateRoll(unittest.TestCase):

    def test_accepts_list_and_tuple(self):
        self.assertEqual(validate_roll([1, 2, 3, 4, 5]), (1, 2, 3, 4, 5))
        self.assertEqual(validate_roll((6, 6, 6, 6, 6)), (6, 6, 6, 6, 6))

    def test_accepts_numpy_array(self):
        roll = validate_roll(np.array([3, 3, 2, 2, 1]))
        self.assertEqual(roll, (3, 3, 2, 2, 1))
        self.assertTrue(all(type(value) is int for value in roll))

    def test_wrong_length(self):
        for dice_values in ([], [1, 2, 3, 4], [1, 2, 3, 4, 5, 6]):
            with self.assertRaises(InvalidRoll, msg=f"{dice_values} should be rejected"):
                validate_roll(dice_values)

    def test_out_of_range(self):
        with self.assertRaises(InvalidRoll):
            validate_roll([0, 1, 2, 3, 4])
        with self.assertRaises(InvalidRoll):
            validate_roll([1, 2, 3, 4, 7])

    def test_non_integer_values(self):
        for dice_values in ([1, 2, 3, 4, 5.0], [1, 2, 3, 4, "5"], [True, 1, 1, 1, 1]):
            with self.assertRaises(InvalidRoll, msg=f"{dice_values} should be rejected"):
                validate_roll(dice_values)

    def test_not_a_sequence(self):
        for dice_values in (None, 12345, "12345", np.array([[1, 2, 3, 4, 5]]), np.array([1.0, 2, 3, 4, 5])):
            with self.assertRaises(InvalidRoll):
                validate_roll(dice_values)

    def test_unordered_containers_rejected(self):
        for dice_values in ({5, 1, 3, 2, 4}, {1: 1, 2: 2, 3: 3, 4: 4, 5: 5}, frozenset({1, 2, 3, 4, 5})):
            with self.assertRaises(InvalidRoll, msg=f"{dice_values} has no dice order"):
                validate_roll(dice_values)

    def test_invalid_roll_is_a_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            validate_roll([1, 2, 3])
        self.assertEqual(ctx.exception.dice_values, [1, 2, 3])
        self.assertIn("expected 5 dice", str(ctx.exception))

    def test_rejection_is_logged(self):
        with self.assertLogs("roll_scorer", level="WARNING") as logs:
            with self.assertRaises(InvalidRoll):
                score_roll(CHANCE, [1, 2, 3, 4, 9])
        self.assertIn("outside 1-6", logs.output[0])


class TestScoreRoll(unittest.TestCase):

    def test_scores_category(self):
        self.assertEqual(score_roll(ONES, [1, 1, 2, 3, 4]), 2)
        self.assertEqual(score_roll(SIXES, (6, 6, 6, 1, 2)), 18)
        self.assertEqual(score_roll(FULL_HOUSE, [1, 1, 3, 3, 3]), 25)
        self.assertEqual(score_roll(YAHTZEE, np.array([4, 4, 4, 4, 4])), 50)

    def test_unknown_category(self):
        with self.assertRaises(KeyError):
            score_roll("Two Pair", [1, 1, 2, 2, 3])

    def test_large_straight_needs_a_run(self):
        self.assertEqual(score_roll(LARGE_STRAIGHT, [2, 3, 4, 5, 6]), 40)
        self.assertEqual(score_roll(LARGE_STRAIGHT, [1, 2, 3, 4, 6]), 0, "Five distinct faces with a gap")

    def test_uses_given_rules(self):
        rules = build_rules()
        rules[CHANCE] = SumDistro(CountConfig(count=3, description="Sum all dice if 3 are the same"))
        self.assertEqual(score_roll(CHANCE, [1, 2, 3, 4, 6]), 16)
        self.assertEqual(score_roll(CHANCE, [1, 2, 3, 4, 6], rules=rules), 0)


class TestScoreAll(unittest.TestCase):

    def test_every_category_scored(self):
        scores = score_all([2, 2, 3, 3, 3])
        self.assertEqual(list(scores.keys()), list(ALL_CATEGORIES))
        self.assertEqual(scores[THREE_OF_A_KIND], 13)
        self.assertEqual(scores[FULL_HOUSE], 25)
        self.assertEqual(scores[YAHTZEE], 0)
        self.assertEqual(scores[CHANCE], 13)

    def test_score_vector_matches_score_all(self):
        dice_values = [1, 2, 3, 4, 5]
        vector = score_vector(dice_values)
        self.assertEqual(vector.dtype, np.int32)
        self.assertEqual(vector.shape, (len(ALL_CATEGORIES),))
        self.assertEqual(vector.tolist(), list(score_all(dice_values).values()))

    def test_invalid_roll_rejected(self):
        with self.assertRaises(InvalidRoll):
            score_all([1, 2, 3, 4])


if __name__ == '__main__':
    unittest.main()
