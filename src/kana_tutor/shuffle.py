"""Fisher-Yates shuffle with an injectable random source."""
import random


def shuffle(items, rng=None) -> list:
    """Return a shuffled copy of ``items``; the input is never mutated.

    ``rng`` only needs a ``randrange`` method, so a seeded ``random.Random``
    or a test double both work. Defaults to the module-level generator.
    """
    rng = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
