"""Implement the pattern normalizer and the matching function."""
import re
import math
import typing as T
from collections.abc import ItemsView, Mapping, Sequence
from types import SimpleNamespace
from warnings import warn

from pprint import pformat
from textwrap import indent

_pattern_type = type(re.compile(''))

CONFIG = {
    'equality': 'same value',  # same value, identity, equal
    'warn: no match': False,
}


class PatternCollectionError(TypeError):
    """Exception that is raised, when patterns cannot be read from an object."""


class NoMatchingPatternError(ValueError):
    """Exception that is raised, when an object didn't match any pattern."""


def _same_float(a: float, b: float) -> bool:
    if math.isnan(a):
        return math.isnan(b)
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


def same_value(pattern, value) -> bool:
    """Compare two objects like a literal pattern does by default.

    Objects of different types never match, so ``0``, ``0.0`` and ``False``
    are three distinct literals. Floats (and both parts of complex numbers)
    treat NaN as equal to itself and tell ``0.0`` from ``-0.0``. Any other
    self-unequal value, such as ``Decimal('NaN')``, matches its own kind.
    """
    if pattern is value:
        return True
    if type(pattern) is not type(value):
        return False
    if isinstance(pattern, float):
        return _same_float(pattern, value)
    if isinstance(pattern, complex):
        return (_same_float(pattern.real, value.real)
                and _same_float(pattern.imag, value.imag))
    if pattern != pattern and value != value:  # NaN of any other numeric type
        return True
    return bool(pattern == value)


def is_identical(pattern, value) -> bool:
    return pattern is value


def is_equal(pattern, value) -> bool:
    return bool(pattern == value)


def is_regexp(pattern, value) -> bool:
    """Search a compiled regular expression in textual values only."""
    if isinstance(pattern.pattern, str):
        if not isinstance(value, str):
            return False
    elif not isinstance(value, (bytes, bytearray)):
        return False
    return pattern.search(value) is not None


def is_func(pattern, value) -> bool:
    return bool(pattern(value))


EQUALITY = {
    'same value': same_value,
    'identity': is_identical,
    'equal': is_equal,
}


class Matcher(T.NamedTuple):
    """A normalized (classify, pattern, handler) entry."""
    classify: T.Callable[[T.Any, T.Any], bool]
    pattern: T.Any
    handler: T.Any


def _equality(config: dict) -> T.Callable[[T.Any, T.Any], bool]:
    name = config.get('equality', 'same value')
    try:
        return EQUALITY[name]
    except KeyError:
        raise ValueError(f'Unknown equality {name!r}, '
                         f'expected one of {sorted(EQUALITY)!r}') from None


def classify(pattern, config: T.Optional[dict] = None) -> T.Callable[[T.Any, T.Any], bool]:
    """Pick the function that decides whether a value matches pattern."""
    config = config if isinstance(config, dict) else CONFIG
    if isinstance(pattern, _pattern_type):
        return is_regexp
    if callable(pattern):
        return is_func
    return _equality(config)


def _entries(patterns) -> T.List[T.Tuple[T.Any, T.Any]]:
    """Read (pattern, handler) pairs from any supported collection."""
    if isinstance(patterns, Mapping):
        return list(patterns.items())
    if isinstance(patterns, SimpleNamespace):
        return list(vars(patterns).items())
    if isinstance(patterns, (str, bytes, bytearray)) or not isinstance(
            patterns, (Sequence, ItemsView)):
        raise PatternCollectionError(
            f'Cannot read patterns from {type(patterns).__name__!r} object: {patterns!r}')
    entries = []
    for i, entry in enumerate(patterns):
        if isinstance(entry, (str, bytes, bytearray)):
            entry = ()  # never unpack text into two characters
        try:
            pattern, handler = entry
        except (TypeError, ValueError):
            raise PatternCollectionError(
                f'Entry {i} is not a (pattern, handler) pair: {entry!r}') from None
        entries.append((pattern, handler))
    return entries


def prepare_matchers(patterns, config: T.Optional[dict] = None) -> T.Tuple[Matcher, ...]:
    """Convert patterns to a tuple of matchers.

    >>> prepare_matchers([(re.compile('test'), fn)])  # [Matcher(is_regexp, ...)]
    >>> prepare_matchers([(1, fn)])                    # [Matcher(same_value, ...)]
    >>> prepare_matchers({str.isdigit: fn})            # [Matcher(is_func, ...)]
    """
    config = config if isinstance(config, dict) else CONFIG
    return tuple(Matcher(classify(pattern, config), pattern, handler)
                 for pattern, handler in _entries(patterns))


def _resolver(handler):
    """Decide once how a handler produces its result."""
    if callable(handler):
        def invoke(args, value, kwargs):
            return handler(*args, value, **kwargs)
        return invoke

    def constant(*_):
        return handler
    return constant


class MatchingFunction:
    """Dispatch values to the handler of the first matching pattern."""

    def __init__(self, patterns, on_default=None, verbose: bool = False,
                 config: T.Optional[dict] = None):
        self.config = config if isinstance(config, dict) else CONFIG
        self.__matchers = prepare_matchers(patterns, self.config)
        self.__resolved = tuple((m.classify, m.pattern, _resolver(m.handler))
                                for m in self.__matchers)
        self.__on_default = on_default
        self.__default = _resolver(on_default)
        self.verbose = verbose

    @property
    def matchers(self) -> T.Tuple[Matcher, ...]:
        """The normalized matchers, in declaration order."""
        return self.__matchers

    @property
    def on_default(self):
        """The fallback used when nothing matched."""
        return self.__on_default

    def __len__(self):
        return len(self.__matchers)

    def __repr__(self):
        return f'<MatchingFunction({len(self)} patterns, on_default={self.on_default!r}) />'

    def __str__(self):
        pairs = [(m.pattern, m.handler) for m in self.__matchers]
        return ('<MatchingFunction \n'
                + indent(pformat(pairs, width=76), ' ' * 4)
                + f'\n    on_default={self.on_default!r}\n/>')

    def find(self, value) -> T.Optional[Matcher]:
        """Return the first matcher accepting value, without calling its handler."""
        for matcher in self.__matchers:
            if matcher.classify(matcher.pattern, value):
                return matcher
        return None

    def __call__(self, value, *args, **kwargs):
        for test, pattern, resolve in self.__resolved:
            if test(pattern, value):
                return resolve(args, value, kwargs)
        if self.verbose or self.config.get('warn: no match', False):
            warn(f'{value!r} did not match any pattern', stacklevel=2)
        return self.__default(args, value, kwargs)


def match(patterns, on_default=None, *, verbose: bool = False,
          config: T.Optional[dict] = None) -> MatchingFunction:
    """Create a matching function.

    A replacement for if/elif chains and lookup tables. ``patterns`` is a
    sequence of (pattern, handler) pairs, a mapping or a SimpleNamespace.
    Patterns are compiled regular expressions (searched in strings),
    callables (predicates) or anything else (compared as literals).
    Handlers are called with the extra arguments and then the value, or
    returned as they are when not callable. ``on_default`` is used in the
    same way when nothing matched.

    >>> reducer = match([
    ...     ('bot/create', on_bot_create),
    ...     ('bot/save', on_bot_save),
    ...     (re.compile('^bot', re.I), on_other_bot_actions),
    ... ], nothing_matched)
    >>> next_state = reducer(action.type, state, action)
    """
    return MatchingFunction(patterns, on_default, verbose=verbose, config=config)


def nothing_matched(*args, **_):
    """Fallback raising NoMatchingPatternError for the value (last positional)."""
    value = args[-1] if args else None
    raise NoMatchingPatternError(f'{value!r} did not match any pattern!')
