from collections import Counter


def dice_sum(dice_values):
    """Returns the total of all dice values."""
    if len(dice_values) == 0:
        raise ValueError("Cannot sum an empty roll.")
    return sum(dice_values)


def frequencies(dice_values):
    """
    Returns how often each distinct value occurs, in order of first appearance.
    For example [3, 2, 3, 3, 3] gives [4, 1] (four 3s, then one 2).
    """
    # Counter keeps insertion order, so the first die seen comes first
    return list(Counter(dice_values).values())


def count_of(dice_values, value):
    """Returns the number of dice showing the given value."""
    return sum(1 for die_value in dice_values if die_value == value)


def distinct_values(dice_values):
    """Returns the set of faces present in the roll."""
    return set(dice_values)
