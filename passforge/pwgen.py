# pwgen
# (random password and passphrase generator)
#

import functools
import logging
from pathlib import Path
from random import SystemRandom
random = SystemRandom()

from .charset import CharsetPolicy, resolve
from .validate import (
    DEFAULT_LENGTH, DEFAULT_WORDS, DEFAULT_SEPARATOR, InvalidArgument,
    check_length, check_words, check_separator,
)

log = logging.getLogger(__name__)

#: Upper bound (exclusive) of the number appended to a passphrase
NUMBER_LIMIT = 100

# Kept verbatim, including the repeated words
WORD_LIST = (
    'apple', 'banana', 'carrot', 'dolphin', 'elephant', 'forest', 'giraffe', 'horizon',
    'igloo', 'jacket', 'kangaroo', 'lemon', 'mountain', 'nebula', 'octopus', 'penguin',
    'quasar', 'rainbow', 'satellite', 'triangle', 'umbrella', 'volcano', 'waterfall', 'xylophone',
    'yellow', 'zebra', 'airplane', 'butterfly', 'cactus', 'dinosaur', 'evergreen', 'flamingo',
    'galaxy', 'hurricane', 'island', 'jupiter', 'keyboard', 'lighthouse', 'moonlight', 'navigator',
    'ocean', 'planet', 'quicksand', 'river', 'sunflower', 'telescope', 'universe', 'village',
    'whistle', 'xenon', 'yogurt', 'zeppelin', 'anchor', 'baseball', 'candle', 'diamond',
    'elephant', 'firefly', 'guitar', 'hamburger', 'iceberg', 'jellyfish', 'kiwi', 'leopard',
    'magnet', 'notebook', 'origami', 'pyramid', 'quantum', 'rhinoceros', 'snowflake', 'tornado',
    'unicorn', 'violin', 'walrus', 'xylophone', 'yogurt', 'zucchini', 'acorn', 'balloon',
    'camera', 'doorbell', 'earring', 'feather', 'garden', 'hammer', 'iguana', 'jigsaw',
    'kettle', 'lantern', 'mushroom', 'necklace', 'octagon', 'pineapple', 'quarter', 'raccoon',
    'scissors', 'trumpet', 'umbrella', 'volcano', 'window', 'xylophone', 'yardstick', 'zipper',
)


def filter_wordlist(words) -> tuple:
    return tuple(w.strip().lower() for w in words
                 if w.strip() and "'" not in w)


@functools.lru_cache(maxsize=None)
def load_wordlist(path) -> tuple:
    """Load a word list from text file, one word per line.

    Blank lines and words containing "'" are dropped.

    """
    path = Path(path).expanduser()
    with open(path, 'r', encoding='utf-8') as f:
        words = filter_wordlist(f.readlines())
    if not words:
        raise InvalidArgument('wordlist', f"no words in {str(path)!r}")
    log.debug("Loaded %d words from %r", len(words), str(path))
    return words


def generate_password(length: int = DEFAULT_LENGTH,
                      policy: CharsetPolicy = None,
                      rng=None) -> str:
    """Generate random password from alphabet given by `policy`.

    :param length: Number of characters
    :param policy: Character classes and exclusions. Default: all classes.
    :param rng: Random source with `choice()`. Default is `SystemRandom`.
    :returns: The password.

    """
    check_length(length)
    rng = rng or random
    alphabet = resolve(policy)
    log.debug("Generating password: length=%d, alphabet=%d",
              length, len(alphabet))
    return ''.join(rng.choice(alphabet) for _ in range(length))


def generate_passphrase(num_words: int = DEFAULT_WORDS,
                        separator: str = DEFAULT_SEPARATOR,
                        capitalize: bool = False,
                        include_number: bool = False,
                        wordlist=None,
                        rng=None) -> str:
    """Generate random passphrase, based on dictionary words.

    Words are chosen independently, the same word may repeat.

    :param num_words:  Number of words
    :param separator:  Put between tokens verbatim (up to 3 characters)
    :param capitalize: Make first letter of each word uppercase
    :param include_number: Append a number 0..99 as the last token
    :param wordlist:   Sequence of words. Default is `WORD_LIST`.
    :param rng: Random source with `choice()` and `randrange()`
    :returns: The passphrase.

    """
    check_words(num_words)
    check_separator(separator)
    rng = rng or random
    words = WORD_LIST if wordlist is None else wordlist
    if not words:
        raise InvalidArgument('wordlist', "no words to choose from")
    tokens = []
    for _ in range(num_words):
        word = rng.choice(words)
        if capitalize:
            word = word[:1].upper() + word[1:]
        tokens.append(word)
    if include_number:
        tokens.append(str(rng.randrange(NUMBER_LIMIT)))
    log.debug("Generating passphrase: words=%d, dictionary=%d",
              num_words, len(words))
    return separator.join(tokens)
