import hashlib

import pytest

from passforge import seeded
from passforge.charset import CharsetPolicy, resolve
from passforge.validate import InvalidArgument

HUNTER2_SEED = 'aed12c557bad0880b75fa23620563d45f9d6bd7f42db0b78846ae6ef193b0a84'


def test_seed_vector():
    assert seeded.seed('hunter2', 'example.com') == HUNTER2_SEED
    assert HUNTER2_SEED == hashlib.sha256(b'hunter2:example.com').hexdigest()


def test_seed_utf8():
    expected = hashlib.sha256('žluťoučký:kůň.cz'.encode('utf-8')).hexdigest()
    assert seeded.seed('žluťoučký', 'kůň.cz') == expected


@pytest.mark.parametrize('policy, length, expected', [
    (CharsetPolicy(), 16, '>HS<J<iOhh-2G>9*'),
    (CharsetPolicy(symbols=False), 16, 'YxSx9Xie7HM2Gy9h'),
    (CharsetPolicy(False, False, True, False), 8, '49453388'),
])
def test_derive_vectors(policy, length, expected):
    assert seeded.derive_seeded('hunter2', 'example.com', length, policy) == expected


def test_derive_default_policy():
    assert seeded.derive_seeded('hunter2', 'example.com') == '>HS<J<iOhh-2G>9*'


def test_wraparound():
    policy = CharsetPolicy(True, False, False, False)
    pw = seeded.derive_seeded('hunter2', 'example.com', 40, policy)
    assert pw == 'sbshtriybrgcgijrpghxollqccwfzhkcsbshtriy'
    assert pw[32:] == pw[:8]
    long_pw = seeded.derive_seeded('hunter2', 'example.com', 128, policy)
    assert long_pw == pw[:32] * 4


def test_exclusions_ignored():
    policy = CharsetPolicy(exclude_similar=True, exclude_ambiguous=True)
    assert seeded.derive_seeded('hunter2', 'example.com', 16, policy) \
        == seeded.derive_seeded('hunter2', 'example.com', 16, CharsetPolicy())


def test_fallback_alphabet():
    none = CharsetPolicy(False, False, False, False)
    assert seeded.derive_seeded('hunter2', 'example.com', 16, none) \
        == 'YxSx9Xie7HM2Gy9h'


def test_deterministic():
    for length in (8, 31, 32, 33, 64, 128):
        first = seeded.derive_seeded('correct-horse', 'example.com', length)
        assert len(first) == length
        assert first == seeded.derive_seeded('correct-horse', 'example.com', length)


def test_domain_sensitivity():
    assert seeded.derive_seeded('correct-horse', 'example.com', 16) \
        != seeded.derive_seeded('correct-horse', 'other.com', 16)


@pytest.mark.parametrize('policy', [
    CharsetPolicy(), CharsetPolicy(False, False, True, False),
    CharsetPolicy(True, False, False, False),
])
def test_containment(policy):
    alphabet = resolve(policy, exclusions=False)
    pw = seeded.derive_seeded('correct-horse', 'example.com', 128, policy)
    assert set(pw) <= set(alphabet)


@pytest.mark.parametrize('master, domain, length', [
    ('', 'example.com', 16),
    ('hunter2', '', 16),
    ('hunter2', 'example.com', 7),
    ('hunter2', 'example.com', 129),
    ('hunter2', 'example.com', 16.0),
    (None, 'example.com', 16),
])
def test_invalid(master, domain, length):
    with pytest.raises(InvalidArgument):
        seeded.derive_seeded(master, domain, length)
