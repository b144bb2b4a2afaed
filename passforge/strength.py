# score, score_seeded, label
# (advisory strength estimate)
#

from .charset import CharsetPolicy
from .validate import check_length

#: (upper bound, label), checked in order
STRENGTH_BANDS = ((30, 'Weak'), (60, 'Fair'), (80, 'Good'))
STRONG = 'Strong'

#: Terminal color for each label (blessed formatting names)
STRENGTH_COLORS = {
    'Weak': 'red',
    'Fair': 'yellow',
    'Good': 'blue',
    'Strong': 'green',
}


def _cap(points) -> int:
    return max(0, min(100, points))


def score(policy: CharsetPolicy, length: int) -> int:
    """Score random password configuration, 0..100.

    Up to 40 points for length (2 per character, full at 20 characters),
    15 points for each enabled character class.

    """
    check_length(length)
    return _cap(min(40, 2 * length) + 15 * policy.classes_enabled())


def score_seeded(policy: CharsetPolicy, length: int,
                 master_word: str, domain: str) -> int:
    """Score seeded password configuration, 0..100.

    Like `score`, but only 10 points per character class. Up to 10 points
    each for length of master word and domain (1 per character).

    """
    check_length(length)
    points = min(40, 2 * length) + 10 * policy.classes_enabled()
    points += min(10, len(master_word)) + min(10, len(domain))
    return _cap(points)


def label(value: int) -> str:
    for bound, name in STRENGTH_BANDS:
        if value < bound:
            return name
    return STRONG
