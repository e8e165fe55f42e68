# pylint: disable=import-error,missing-function-docstring,unused-variable
import re
import warnings
from unittest.mock import Mock

import pytest

import os
import sys

# make sure to import the version of patmatch found in ./
# instead of importing a stable version from /.../site-packages/
cwd = os.path.realpath('.')
if cwd not in sys.path:
    sys.path.insert(0, cwd)

from patmatch import Switch, MatchingFunction, NoMatchingPatternError
from patmatch.core import nothing_matched


def test_switch_decorators():
    """Test Switch.case and Switch.default as decorators."""
    reducer = Switch()

    @reducer.case('bot/create')
    def create(state, action, _type):
        return {**state, action['id']: action}

    @reducer.case(re.compile('^bot/'))
    def other_bot(state, action, _type):
        return state

    @reducer.default
    def keep(state, action, _type):
        return None

    state = {}
    action = {'type': 'bot/create', 'id': 1}
    assert create.__name__ == 'create'  # decorators return the function
    assert reducer('bot/create', state, action) == {1: action}
    assert reducer('bot/save', state, action) is state
    assert reducer('client/drop', state, action) is None
    assert len(reducer) == 2


def test_switch_rebuilds_after_registration():
    handle = Switch()
    handle.register('a', 1)
    first = handle.matching
    assert isinstance(first, MatchingFunction)
    assert handle.matching is first
    assert handle('b') is None

    handle.register('b', 2)
    assert handle.matching is not first
    assert handle('b') == 2

    fallback = Mock(return_value='fallback')
    handle.default(fallback)
    assert handle('c', 'extra') == 'fallback'
    fallback.assert_called_once_with('extra', 'c')


def test_switch_keeps_declaration_order():
    handle = Switch()
    handle.register(lambda v: isinstance(v, int), 'int')
    handle.register(1, 'one')
    assert handle(1) == 'int'
    assert [p for p, _ in handle.cases][1] == 1


def test_switch_duplicate_pattern_warning():
    handle = Switch()
    handle.register('a', 1)
    with pytest.warns(UserWarning) as e:
        handle.register('a', 2)
    assert e[0].message.args[0] == "Pattern 'a' is already registered"
    assert handle('a') == 1


def test_switch_from_patterns():
    handle = Switch.from_patterns({'create': 'c', 'auth': 'a'}, nothing_matched)
    assert handle('auth') == 'a'
    with pytest.raises(NoMatchingPatternError):
        handle('other')

    verbose = Switch.from_patterns([('x', 'y')], 'default', verbose=True)
    with pytest.warns(UserWarning):
        assert verbose('z') == 'default'
    assert repr(verbose) == "<Switch(1 cases, on_default='default') />"


def test_switch_equality_config():
    handle = Switch(config={'equality': 'equal'})
    handle.register(1, 'one')
    assert handle(1.0) == 'one'
    assert Switch.from_patterns([(1, 'one')])(1.0) is None


def test_switch_duplicate_check_follows_equality_config():
    handle = Switch(config={'equality': 'identity'})
    first, second = [1], [1]
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        handle.register(first, 'first')
        handle.register(second, 'second')
    assert handle(first) == 'first'
    assert handle(second) == 'second'
    with pytest.warns(UserWarning):
        handle.register(first, 'again')
