import argparse
import sys
import configparser
import logging
from pathlib import Path

from prompt_toolkit import prompt as prompt_input
from prompt_toolkit.formatted_text import FormattedText
from blessed import Terminal
import pyperclip

from . import pwgen, seeded, strength
from .charset import CharsetPolicy, SIMILAR_CHARACTERS
from .validate import (
    DEFAULT_LENGTH, DEFAULT_WORDS, DEFAULT_SEPARATOR, InvalidArgument,
    check_length, check_words, check_separator,
)

log = logging.getLogger(__name__)

DATA_DIR = Path('~/.passforge')
DEFAULT_CONFIG = DATA_DIR / 'passforge.conf'
CONFIG_SECTION = 'passforge'


class Config:

    """Defaults for generator options, overridable from INI file.

    Example::

        [passforge]
        length = 24
        words = 5
        separator = "_ "
        wordlist = ~/.passforge/words

    """

    def __init__(self, config_file=None):
        self.length = DEFAULT_LENGTH
        self.words = DEFAULT_WORDS
        self.separator = DEFAULT_SEPARATOR
        self.wordlist = None
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != CONFIG_SECTION:
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key == 'length':
                    self.length = check_length(self._getint(section, key), key)
                elif key == 'words':
                    self.words = check_words(self._getint(section, key), key)
                elif key == 'separator':
                    self.separator = check_separator(self._unquote(section[key]), key)
                elif key == 'wordlist':
                    self.wordlist = Path(section[key])
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                    continue

    @staticmethod
    def _unquote(value):
        # values are stripped, quotes allow leading or trailing spaces
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            return value[1:-1]
        return value

    @staticmethod
    def _getint(section, key):
        try:
            return section.getint(key)
        except ValueError:
            raise InvalidArgument(key, f"expected integer, got {section[key]!r}") from None


def _copy(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def _input_pass(prompt):
    """Wraps password input function to allow overriding."""
    return prompt_input(FormattedText([('bold', prompt)]), is_password=True)


def _output(secrets, copy):
    for secret in secrets:
        print(secret)
    if copy and secrets:
        try:
            _copy(secrets[0])
        except pyperclip.PyperclipException as e:
            print(f"WARNING: Can't copy to clipboard: {e}")


def run_password(config_file, length, count, copy,
                 lowercase, uppercase, numbers, symbols,
                 exclude_similar, exclude_ambiguous):
    cfg = Config(config_file)
    policy = CharsetPolicy(lowercase, uppercase, numbers, symbols,
                           exclude_similar, exclude_ambiguous)
    length = cfg.length if length is None else length
    _output([pwgen.generate_password(length, policy) for _ in range(count)],
            copy)


def run_seeded(config_file, domain, master, length, copy,
               lowercase, uppercase, numbers, symbols):
    cfg = Config(config_file)
    policy = CharsetPolicy(lowercase, uppercase, numbers, symbols)
    length = cfg.length if length is None else length
    if master is None:
        try:
            master = _input_pass("Master word: ")
        except (KeyboardInterrupt, EOFError):
            print()
            return 1
    _output([seeded.derive_seeded(master, domain, length, policy)], copy)


def run_passphrase(config_file, words, separator, capitalize, number,
                   wordlist, count, copy):
    cfg = Config(config_file)
    words = cfg.words if words is None else words
    separator = cfg.separator if separator is None else separator
    wordlist = cfg.wordlist if wordlist is None else wordlist
    dictionary = pwgen.load_wordlist(wordlist) if wordlist else None
    _output([pwgen.generate_passphrase(words, separator, capitalize, number,
                                       dictionary)
             for _ in range(count)],
            copy)


def run_strength(config_file, length, master, domain,
                 lowercase, uppercase, numbers, symbols):
    cfg = Config(config_file)
    policy = CharsetPolicy(lowercase, uppercase, numbers, symbols)
    length = check_length(cfg.length if length is None else length)
    if master is not None or domain is not None:
        value = strength.score_seeded(policy, length, master or '', domain or '')
    else:
        value = strength.score(policy, length)
    name = strength.label(value)
    term = Terminal(stream=sys.stdout)
    paint = getattr(term, strength.STRENGTH_COLORS[name])
    print(f"Strength: {value}%", paint(name))


def _count(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    return n


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="passforge",
                                 description="Password and passphrase generator",
                                 formatter_class=argparse.RawTextHelpFormatter)

    # Sub-commands
    sp = ap.add_subparsers()
    ap_password = sp.add_parser("password", aliases=['pw'],
                                help="generate random password (default)")
    ap_password.set_defaults(func=run_password)
    ap_seeded = sp.add_parser("seeded", aliases=['sd'],
                              help="derive password from master word and domain")
    ap_seeded.set_defaults(func=run_seeded)
    ap_passphrase = sp.add_parser("passphrase", aliases=['pp'],
                                  help="generate passphrase from dictionary words")
    ap_passphrase.set_defaults(func=run_passphrase)
    ap_strength = sp.add_parser("strength",
                                help="estimate strength of password options")
    ap_strength.set_defaults(func=run_strength)

    all_parsers = (ap_password, ap_seeded, ap_passphrase, ap_strength)
    for subparser in all_parsers:
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG,
                               help="config file (default: %(default)s)")
        subparser.add_argument('-v', '--verbose', action='store_true',
                               help="print debug messages to stderr")

    for subparser in (ap_password, ap_seeded, ap_strength):
        subparser.add_argument('-l', dest='length', type=int,
                               help="length of password "
                                    f"(default: {DEFAULT_LENGTH})")
        subparser.add_argument('--no-lower', dest='lowercase', action='store_false',
                               help="no lowercase letters")
        subparser.add_argument('--no-upper', dest='uppercase', action='store_false',
                               help="no uppercase letters")
        subparser.add_argument('--no-digits', dest='numbers', action='store_false',
                               help="no digits")
        subparser.add_argument('--no-symbols', dest='symbols', action='store_false',
                               help="no special symbols")

    for subparser in (ap_password, ap_seeded, ap_passphrase):
        subparser.add_argument('--copy', action='store_true',
                               help="copy the (first) result to clipboard")

    for subparser in (ap_password, ap_passphrase):
        subparser.add_argument('-n', dest='count', type=_count, default=1,
                               help="number of results (default: %(default)s)")

    ap_password.add_argument('--exclude-similar', action='store_true',
                             help=f"drop similar characters: {' '.join(SIMILAR_CHARACTERS)}")
    ap_password.add_argument('--exclude-ambiguous', action='store_true',
                             help="drop brackets, quotes and punctuation")

    ap_seeded.add_argument('domain',
                           help="domain (site) the password is derived for")
    ap_seeded.add_argument('-m', dest='master',
                           help="master word (default: ask)")

    ap_passphrase.add_argument('-w', dest='words', type=int,
                               help=f"number of words (default: {DEFAULT_WORDS})")
    ap_passphrase.add_argument('-s', dest='separator',
                               help=f"word separator (default: {DEFAULT_SEPARATOR!r})")
    ap_passphrase.add_argument('-C', '--capitalize', action='store_true',
                               help="capitalize first letter of each word")
    ap_passphrase.add_argument('-N', '--number', action='store_true',
                               help="append a number 0..99")
    ap_passphrase.add_argument('--wordlist', type=Path,
                               help="use words from this file "
                                    "(one per line, default: built-in list)")

    ap_strength.add_argument('--master', dest='master',
                             help="master word (seeded password score)")
    ap_strength.add_argument('--domain', dest='domain',
                             help="domain (seeded password score)")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_password.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    run_func = args.func
    delattr(args, 'func')
    if args.verbose:
        logging.basicConfig(level='DEBUG')
    delattr(args, 'verbose')
    try:
        status = run_func(**vars(args))
    except InvalidArgument as e:
        print(e)
        return 2
    except OSError as e:
        print(e)
        return 1
    return status or 0
