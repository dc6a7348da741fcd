import random

DEFAULT_DIGITS = tuple(range(10))


def shuffled_digits(digits=DEFAULT_DIGITS, rng=None):
    """
    Return the digits in a fresh random order.

    Args:
        digits: digit set to permute (duplicates are collapsed). Default 0-9.
        rng: random.Random to draw from. Defaults to the module-level
            generator; pass a seeded instance for reproducible orders.

    Returns:
        list[int]: a uniformly random permutation of the set
    """
    rng = rng or random
    numbers = sorted(set(digits))
    rng.shuffle(numbers)
    return numbers
