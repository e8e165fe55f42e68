"""Implement first-match pattern dispatch for python."""

from .core import (match, nothing_matched, MatchingFunction, Matcher,
                   PatternCollectionError, NoMatchingPatternError)
from .casematch import Switch
