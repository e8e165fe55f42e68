import re

from patmatch import match, nothing_matched

state = {'bots': {}}

reducer = match([
    ('bot/create', lambda state, action, _: {**state, 'bots': {**state['bots'],
                                                          action['id']: action}}),
    ('bot/remove', lambda state, action, _: {**state, 'bots': {
        k: v for k, v in state['bots'].items() if k != action['id']}}),
    (re.compile('^bot', re.I), lambda state, action, _: state),
], nothing_matched)

for action in ({'type': 'bot/create', 'id': 1}, {'type': 'bot/create', 'id': 2},
               {'type': 'bot/remove', 'id': 1}, {'type': 'BOT/ping'}):
    state = reducer(action['type'], state, action)
    print(sorted(state['bots']))

kind = match({str.isdigit: 'number', str.isalpha: 'word'}, 'other')
print([kind(s) for s in ('42', 'abc', '4b')])

try:
    reducer('client/drop', state, {})
except ValueError as e:
    print(e)

# Result:
# |> [1]
# |> [1, 2]
# |> [2]
# |> [2]
# |> ['number', 'word', 'other']
# |> 'client/drop' did not match any pattern!
