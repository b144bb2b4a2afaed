# seed, derive_seeded
# (deterministic password derivation)
#

import hashlib
import logging

from .charset import CharsetPolicy, resolve
from .validate import DEFAULT_LENGTH, check_length, check_nonempty

log = logging.getLogger(__name__)


def seed(master_word: str, domain: str) -> str:
    """Return SHA-256 of "master_word:domain" as 64 lowercase hex digits."""
    data = f'{master_word}:{domain}'.encode('utf-8')
    return hashlib.sha256(data).hexdigest()


def derive_seeded(master_word: str, domain: str,
                  length: int = DEFAULT_LENGTH,
                  policy: CharsetPolicy = None) -> str:
    """Derive reproducible password for `domain` from `master_word`.

    Each output character is selected by one byte of the seed digest,
    taken modulo the alphabet size. The digest has 32 bytes, longer
    passwords reuse it cyclically (character 32 uses byte 0 again).

    Only the character classes of `policy` apply, exclusion flags
    are ignored. Changing the alphabet order or the seed format would
    change every derived password.

    """
    check_nonempty(master_word, 'master_word')
    check_nonempty(domain, 'domain')
    check_length(length)
    alphabet = resolve(policy, exclusions=False)
    digest = seed(master_word, domain)
    chars = []
    for i in range(length):
        offset = (2 * i) % len(digest)
        byte = int(digest[offset:offset + 2], 16)
        chars.append(alphabet[byte % len(alphabet)])
    log.debug("Derived seeded password: length=%d, alphabet=%d",
              length, len(alphabet))
    return ''.join(chars)
