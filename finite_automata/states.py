"""
States are plain `int` ordinals into the arena that created them.
All transitions are stored as ordinals, so cyclic state graphs need no object references.
"""
from typing import List, Dict, Set, Optional, Iterator, Generic, TypeVar

from finite_automata.errors import InvalidConfigurationError
from finite_automata.symbols import Symbol, is_epsilon

T = TypeVar('T')


class StateArena(Generic[T]):
  """
  Creates states and owns their identity: a unique ordinal (from a counter local to this arena) and a display name.
  Display names do not need to be unique.
  """

  def __init__(self):
    self.state_names: List[str] = []
    self.state_transition_table: List[Dict[Symbol, T]] = []

  def add_state(self, name: str = '') -> int:
    state = len(self.state_names)
    self.state_names.append(name)
    self.state_transition_table.append({})
    return state

  def get_state_name(self, state: int) -> str:
    return self.state_names[state]

  def find_state(self, name: str) -> Optional[int]:
    """
    :returns: the first state with this display name, or `None`
    """
    return next((state for state, state_name in enumerate(self.state_names) if state_name == name), None)

  def __len__(self):
    return len(self.state_names)

  def __iter__(self) -> Iterator[int]:
    return iter(range(len(self.state_names)))

  def __contains__(self, state: int):
    return isinstance(state, int) and 0 <= state < len(self.state_names)


class NonDeterministicStateGraph(StateArena[Set[int]]):
  """
  States of a NFA: per symbol (including `EPSILON`) a set of next states.
  """

  def add_transition(self, state: int, symbol: Symbol, next_state: int) -> bool:
    """
    :returns: whether this transition is new
    """
    assert state in self and next_state in self
    next_states = self.state_transition_table[state].setdefault(symbol, set())
    if next_state in next_states:
      return False
    next_states.add(next_state)
    return True

  def get_next_states(self, state: int, symbol: Symbol) -> Set[int]:
    """
    Walks one step. Having no transition is not an error for a NFA.
    """
    return set(self.state_transition_table[state].get(symbol, ()))

  def get_all_next_states(self, state: int) -> Set[int]:
    return {next_state for next_states in self.state_transition_table[state].values() for next_state in next_states}

  def find_symbols_to_state(self, state: int, next_state: int) -> Set[Symbol]:
    return {
      symbol for symbol, next_states in self.state_transition_table[state].items() if next_state in next_states}


class DeterministicStateGraph(StateArena[int]):
  """
  States of a DFA: per symbol at most one next state, no `EPSILON` transitions.
  """

  def set_transition(self, state: int, symbol: str, next_state: int):
    assert state in self and next_state in self
    if is_epsilon(symbol):
      raise InvalidConfigurationError(
        'Deterministic state %r cannot have an epsilon transition' % self.get_state_name(state))
    self.state_transition_table[state][symbol] = next_state

  def get_next_state(self, state: int, symbol: str) -> Optional[int]:
    return self.state_transition_table[state].get(symbol)

  def get_all_next_states(self, state: int) -> Set[int]:
    return set(self.state_transition_table[state].values())

  def find_symbol_to_state(self, state: int, next_state: int) -> Optional[str]:
    return next(
      (symbol for symbol, to_state in self.state_transition_table[state].items() if to_state == next_state), None)
