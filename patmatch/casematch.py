"""Build matching functions case by case with decorators."""
import functools
import typing as T
from warnings import warn

from .core import CONFIG, MatchingFunction, _entries, _equality


class Switch:
    """Implement some sort of switch statement functionality.

    >>> reducer = Switch()
    >>> @reducer.case('bot/create')
    ... def create(state, action, _type):
    ...     return {**state, action['id']: action}
    >>> @reducer.default
    ... def keep(state, action, _type):
    ...     return state
    >>> reducer(action['type'], state, action)
    """

    def __init__(self, verbose: bool = False, config: T.Optional[dict] = None):
        self.cases = []
        self.on_default = None
        self.verbose = verbose
        self.config = config if isinstance(config, dict) else CONFIG

    @classmethod
    def from_patterns(cls, patterns, on_default=None, **kwargs):
        """Seed a switch with anything match() accepts."""
        switch = cls(**kwargs)
        for pattern, handler in _entries(patterns):
            switch.register(pattern, handler)
        switch.on_default = on_default
        return switch

    @functools.cached_property
    def matching(self) -> MatchingFunction:
        """The matching function for the cases registered so far."""
        return MatchingFunction(self.cases, self.on_default,
                                verbose=self.verbose, config=self.config)

    def _changed(self):
        self.__dict__.pop('matching', None)

    def register(self, pattern, handler):
        """Add a case after all existing ones and return handler."""
        same = _equality(self.config)
        if any(same(p, pattern) for p, _ in self.cases):
            warn(f'Pattern {pattern!r} is already registered')
        self.cases.append((pattern, handler))
        self._changed()
        return handler

    def case(self, pattern):
        """Decorator registering the decorated function for pattern."""
        return functools.partial(self.register, pattern)

    def default(self, handler):
        """Decorator registering the decorated function as the fallback."""
        self.on_default = handler
        self._changed()
        return handler

    def __len__(self):
        return len(self.cases)

    def __repr__(self):
        return f'<Switch({len(self)} cases, on_default={self.on_default!r}) />'

    def __call__(self, value, *args, **kwargs):
        return self.matching(value, *args, **kwargs)
