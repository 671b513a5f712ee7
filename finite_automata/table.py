"""
Builds automata from transition tables.

Row 0, columns 1..n are the symbols. Rows 1..m are the states: column 0 is the state name,
column c holds the destination state name(s) under the symbol of column c.
For example, a NFA table looks like this::

  [[None, '0',  '1',          EPSILON],
   ['p0', [],   ['p1', 'p0'], []],
   ['p1', [],   ['p2'],       []],
   ['p2', ['p2'], ['p2'],     []]]
"""
import logging
from typing import List, Sequence, Iterable, Any

from finite_automata.automaton import NonDeterministicAutomaton, DeterministicAutomaton
from finite_automata.errors import InvalidConfigurationError
from finite_automata.states import StateArena, NonDeterministicStateGraph, DeterministicStateGraph
from finite_automata.symbols import Symbol, is_epsilon, is_input_symbol

logger = logging.getLogger(__name__)


def _get_table_symbols(table: Sequence[Sequence[Any]], allow_epsilon: bool) -> List[Symbol]:
  if len(table) == 0:
    raise InvalidConfigurationError('Transition table must have a header row with the symbols')
  symbols = list(table[0][1:])
  for symbol in symbols:
    if is_epsilon(symbol) and allow_epsilon:
      continue
    if not is_input_symbol(symbol):
      raise InvalidConfigurationError('Invalid symbol %r in transition table header' % (symbol,))
  if len(set(symbols)) != len(symbols):
    raise InvalidConfigurationError('Transition table header contains duplicate symbols: %r' % (symbols,))
  for row_num, row in enumerate(table[1:], start=1):
    if len(row) != len(symbols) + 1:
      raise InvalidConfigurationError(
        'Row %i of transition table has %i columns, but expected %i' % (row_num, len(row), len(symbols) + 1))
  return symbols


def _get_or_add_state(graph: StateArena, name: str) -> int:
  if not isinstance(name, str):
    raise InvalidConfigurationError('Invalid state name %r in transition table' % (name,))
  state = graph.find_state(name)
  if state is None:
    state = graph.add_state(name)
    logger.debug('Added state %r', name)
  return state


def _find_initial_and_final_states(graph: StateArena, start_state_name: str, accept_state_names: Iterable[str]):
  """
  :raises: InvalidConfigurationError
  :rtype: tuple[int, set[int]]
  """
  accept_state_names = set(accept_state_names)
  initial_state = graph.find_state(start_state_name)
  if initial_state is None:
    raise InvalidConfigurationError('No start state detected: no state is named %r' % start_state_name)
  final_states = {
    state for state in graph if graph.get_state_name(state) in accept_state_names}
  if len(final_states) == 0:
    raise InvalidConfigurationError('No accept state detected: no state is named any of %r' % sorted(
      accept_state_names))
  unknown_names = accept_state_names - {graph.get_state_name(state) for state in final_states}
  if len(unknown_names) >= 1:
    logger.warning('Ignoring accept states %r which do not exist', sorted(unknown_names))
  return initial_state, final_states


def make_nfa_from_table(table: Sequence[Sequence[Any]], start_state_name: str,
                        accept_state_names: Iterable[str]) -> NonDeterministicAutomaton:
  """
  :param table: cells are lists of destination state names, possibly empty. Use `EPSILON` as symbol for epsilon moves.
  :param start_state_name: name of the start state
  :param accept_state_names: names of the accept states
  :raises: InvalidConfigurationError
  """
  symbols = _get_table_symbols(table, allow_epsilon=True)
  graph = NonDeterministicStateGraph()
  for row in table[1:]:
    state = _get_or_add_state(graph, row[0])
    for symbol, cell in zip(symbols, row[1:]):
      next_state_names = [cell] if isinstance(cell, str) else list(cell or ())
      for next_state_name in next_state_names:
        graph.add_transition(state, symbol, _get_or_add_state(graph, next_state_name))

  initial_state, final_states = _find_initial_and_final_states(graph, start_state_name, accept_state_names)
  return NonDeterministicAutomaton(graph, graph, initial_state, final_states)


def make_dfa_from_table(table: Sequence[Sequence[Any]], start_state_name: str,
                        accept_state_names: Iterable[str]) -> DeterministicAutomaton:
  """
  :param table: cells are single destination state names, or `None` (or the empty string) for no transition.
    Then the DFA is partial.
  :param start_state_name: name of the start state
  :param accept_state_names: names of the accept states
  :raises: InvalidConfigurationError
  """
  symbols = _get_table_symbols(table, allow_epsilon=False)
  graph = DeterministicStateGraph()
  for row in table[1:]:
    state = _get_or_add_state(graph, row[0])
    for symbol, next_state_name in zip(symbols, row[1:]):
      if next_state_name is None or next_state_name == '':
        continue
      graph.set_transition(state, symbol, _get_or_add_state(graph, next_state_name))

  initial_state, final_states = _find_initial_and_final_states(graph, start_state_name, accept_state_names)
  return DeterministicAutomaton(graph, graph, initial_state, final_states)
