# CharsetPolicy, resolve
# (character set resolver)
#

import string
from typing import NamedTuple

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = '!@#$%^&*()_+-=[]{}|;:,.<>?'

#: Visually confusable characters
SIMILAR_CHARACTERS = 'il1Lo0O'
AMBIGUOUS_CHARACTERS = '{}[]()/\\\'"`~,;:.<>'

#: Used whenever the policy resolves to nothing
DEFAULT_ALPHABET = LOWERCASE + UPPERCASE + NUMBERS


class CharsetPolicy(NamedTuple):

    """Character classes and exclusion rules for a generated password.

    The exclusion flags are honored only by the random generator,
    the seeded derivation ignores them.

    """

    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False

    def classes_enabled(self) -> int:
        return sum((self.lowercase, self.uppercase, self.numbers, self.symbols))


def resolve(policy: CharsetPolicy = None, exclusions: bool = True) -> str:
    """Build the alphabet for `policy`.

    Blocks are concatenated in fixed order: lowercase, uppercase, numbers,
    symbols. The order is significant, seeded passwords index into it.

    :param policy: Character classes. Default is `CharsetPolicy()`.
    :param exclusions: Apply `exclude_similar` and `exclude_ambiguous`.
    :returns: Non-empty alphabet. Falls back to `DEFAULT_ALPHABET`.

    """
    if policy is None:
        policy = CharsetPolicy()
    alphabet = ''
    for enabled, block in ((policy.lowercase, LOWERCASE),
                           (policy.uppercase, UPPERCASE),
                           (policy.numbers, NUMBERS),
                           (policy.symbols, SYMBOLS)):
        if enabled:
            alphabet += block
    if exclusions:
        removed = ''
        if policy.exclude_similar:
            removed += SIMILAR_CHARACTERS
        if policy.exclude_ambiguous:
            removed += AMBIGUOUS_CHARACTERS
        alphabet = ''.join(c for c in alphabet if c not in removed)
    return alphabet or DEFAULT_ALPHABET
