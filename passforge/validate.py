# InvalidArgument, check_*
# (input contract of the generators)
#

MIN_LENGTH = 8
MAX_LENGTH = 128
DEFAULT_LENGTH = 16

MIN_WORDS = 3
MAX_WORDS = 12
DEFAULT_WORDS = 4

MAX_SEPARATOR = 3
DEFAULT_SEPARATOR = '-'


class InvalidArgument(ValueError):

    """Generator called with a value outside of its documented domain."""

    def __init__(self, name, msg):
        ValueError.__init__(self, f"{name}: {msg}")
        self.name = name


def _check_int(name, value, lo, hi) -> int:
    # bool is an int subclass, but True is not a length
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(name, f"expected integer, got {value!r}")
    if not lo <= value <= hi:
        raise InvalidArgument(name, f"{value} is out of range [{lo}, {hi}]")
    return value


def check_length(length, name='length') -> int:
    return _check_int(name, length, MIN_LENGTH, MAX_LENGTH)


def check_words(num_words, name='words') -> int:
    return _check_int(name, num_words, MIN_WORDS, MAX_WORDS)


def check_separator(separator, name='separator') -> str:
    if not isinstance(separator, str):
        raise InvalidArgument(name, f"expected string, got {separator!r}")
    if len(separator) > MAX_SEPARATOR:
        raise InvalidArgument(name, f"{separator!r} is longer than "
                                    f"{MAX_SEPARATOR} characters")
    return separator


def check_nonempty(text, name) -> str:
    if not isinstance(text, str):
        raise InvalidArgument(name, f"expected string, got {text!r}")
    if not text:
        raise InvalidArgument(name, "must not be empty")
    return text


def check_flag(value, name) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgument(name, f"expected boolean, got {value!r}")
    return value
