# generate, generate_password, generate_seeded_password, generate_passphrase
# (request/response interface for a transport layer)
#
# Requests are dicts with camelCase keys, responses are {"password": str}.
# Missing keys take their defaults, unknown keys are rejected.
#

from . import pwgen, seeded
from .charset import CharsetPolicy
from .validate import (
    DEFAULT_LENGTH, DEFAULT_WORDS, DEFAULT_SEPARATOR, InvalidArgument,
    check_flag,
)

#: request key -> (CharsetPolicy field, default)
CLASS_FIELDS = {
    'useLowercase': ('lowercase', True),
    'useUppercase': ('uppercase', True),
    'useNumbers': ('numbers', True),
    'useSymbols': ('symbols', True),
}
EXCLUSION_FIELDS = {
    'excludeSimilarCharacters': ('exclude_similar', False),
    'excludeAmbiguous': ('exclude_ambiguous', False),
}


def _check_keys(request, allowed):
    if not isinstance(request, dict):
        raise InvalidArgument('request', f"expected object, got {request!r}")
    unknown = sorted(set(request) - set(allowed))
    if unknown:
        raise InvalidArgument(unknown[0], "unknown field")


def _policy(request, fields) -> CharsetPolicy:
    kwargs = {}
    for key, (field, default) in fields.items():
        kwargs[field] = check_flag(request.get(key, default), key)
    return CharsetPolicy(**kwargs)


def generate_password(request: dict) -> dict:
    fields = dict(CLASS_FIELDS, **EXCLUSION_FIELDS)
    _check_keys(request, ('length', *fields))
    policy = _policy(request, fields)
    password = pwgen.generate_password(request.get('length', DEFAULT_LENGTH),
                                       policy)
    return {'password': password}


def generate_seeded_password(request: dict) -> dict:
    _check_keys(request, ('masterWord', 'domain', 'length', *CLASS_FIELDS))
    policy = _policy(request, CLASS_FIELDS)
    password = seeded.derive_seeded(request.get('masterWord', ''),
                                    request.get('domain', ''),
                                    request.get('length', DEFAULT_LENGTH),
                                    policy)
    return {'password': password}


def generate_passphrase(request: dict) -> dict:
    _check_keys(request, ('words', 'separator', 'capitalize', 'includeNumber'))
    password = pwgen.generate_passphrase(
        request.get('words', DEFAULT_WORDS),
        request.get('separator', DEFAULT_SEPARATOR),
        check_flag(request.get('capitalize', False), 'capitalize'),
        check_flag(request.get('includeNumber', False), 'includeNumber'))
    return {'password': password}


HANDLERS = {
    'password': generate_password,
    'seeded': generate_seeded_password,
    'passphrase': generate_passphrase,
}


def generate(kind: str, request: dict) -> dict:
    """Dispatch `request` to generator selected by `kind`."""
    try:
        handler = HANDLERS[kind]
    except KeyError:
        raise InvalidArgument('kind', f"unknown generator {kind!r}") from None
    return handler(request)
