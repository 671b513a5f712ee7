from abc import ABC, abstractmethod
from typing import Dict, Set, FrozenSet, Iterator, Iterable, Tuple, Generic, TypeVar

from finite_automata.errors import InvalidConfigurationError, MissingTransitionError
from finite_automata.states import StateArena, NonDeterministicStateGraph, DeterministicStateGraph
from finite_automata.symbols import EPSILON, Symbol, is_epsilon

T = TypeVar('T')


def _collect_owned_states(graph: StateArena, states: Iterable[int]) -> FrozenSet[int]:
  """
  :returns: `states` together with all states transitively reachable from them
  """
  owned_states = set()
  to_add = list(states)
  while len(to_add) >= 1:
    state = to_add.pop()
    assert state in graph, 'state %r does not belong to this graph' % state
    if state in owned_states:
      continue
    owned_states.add(state)
    to_add.extend(graph.get_all_next_states(state))
  return frozenset(owned_states)


class FiniteAutomaton(ABC, Generic[T]):
  """
  Owns a fixed set of states with their transitions.
  The transitions are copied from the state graph on construction, so the automaton does not change afterwards.
  """

  def __init__(self, graph: StateArena, states: Iterable[int], initial_state: int, final_states: Iterable[int]):
    """
    :param graph: the arena the states were created in
    :param states: all states which are not reachable from other states need to be listed here
    :param initial_state: the start state
    :param final_states: the accept states
    """
    self.states: FrozenSet[int] = _collect_owned_states(graph, states)
    self.state_names: Dict[int, str] = {state: graph.get_state_name(state) for state in sorted(self.states)}
    self.state_transition_table: Dict[int, Dict[Symbol, T]] = {
      state: self._copy_transitions(graph.state_transition_table[state]) for state in sorted(self.states)}
    self.initial_state = initial_state
    self.final_states: FrozenSet[int] = frozenset(final_states)
    if self.initial_state not in self.states:
      raise InvalidConfigurationError('Start state %r is not a state of this automaton' % initial_state)
    if not self.final_states <= self.states:
      raise InvalidConfigurationError(
        'Accept states %r are not states of this automaton' % sorted(self.final_states - self.states))
    self.alphabet: FrozenSet[str] = frozenset(
      symbol for transitions in self.state_transition_table.values() for symbol in transitions
      if not is_epsilon(symbol))

  @abstractmethod
  def _copy_transitions(self, transitions: Dict[Symbol, T]) -> Dict[Symbol, T]:
    raise NotImplementedError()

  @abstractmethod
  def iter_transitions(self) -> Iterator[Tuple[int, Symbol, int]]:
    """
    :returns: all transitions as `(state, symbol, next_state)`, ordered by `state`
    """
    raise NotImplementedError()

  @abstractmethod
  def accepts(self, word: Iterable[str]) -> bool:
    raise NotImplementedError()

  def get_state_name(self, state: int) -> str:
    return self.state_names[state]

  def is_final_state(self, state: int) -> bool:
    return state in self.final_states

  def __repr__(self):
    return '%s(states=%r, initial_state=%r, final_states=%r)' % (
      type(self).__name__, len(self.states), self.get_state_name(self.initial_state),
      sorted(self.get_state_name(state) for state in self.final_states))


class NonDeterministicAutomaton(FiniteAutomaton[FrozenSet[int]]):
  """
  A NFA with epsilon transitions.
  """

  def __init__(self, graph: NonDeterministicStateGraph, states: Iterable[int], initial_state: int,
               final_states: Iterable[int]):
    super().__init__(graph, states, initial_state, final_states)

  def _copy_transitions(self, transitions: Dict[Symbol, Set[int]]) -> Dict[Symbol, FrozenSet[int]]:
    return {symbol: frozenset(next_states) for symbol, next_states in transitions.items() if len(next_states) >= 1}

  def get_next_states(self, state: int, symbol: Symbol) -> FrozenSet[int]:
    return self.state_transition_table[state].get(symbol, frozenset())

  def iter_transitions(self) -> Iterator[Tuple[int, Symbol, int]]:
    for state, transitions in self.state_transition_table.items():
      for symbol, next_states in transitions.items():
        for next_state in sorted(next_states):
          yield state, symbol, next_state

  def get_epsilon_closure_of_states(self, states: Iterable[int]) -> FrozenSet[int]:
    """
    Gets all states reachable from `states` only using epsilon transitions, including `states` themselves.
    """
    state_set = set()
    to_add = list(states)
    while len(to_add) >= 1:
      state = to_add.pop()
      assert isinstance(state, int)
      if state in state_set:
        continue
      state_set.add(state)
      to_add.extend(self.get_next_states(state, EPSILON))
    return frozenset(state_set)

  def get_epsilon_closure(self, state: int) -> FrozenSet[int]:
    return self.get_epsilon_closure_without_self(state) | {state}

  def get_epsilon_closure_without_self(self, state: int) -> FrozenSet[int]:
    """
    Gets all states reachable from `state` using at least one epsilon transition.
    Contains `state` only if it lies on an epsilon cycle.
    """
    state_set = set()
    to_add = list(self.get_next_states(state, EPSILON))
    while len(to_add) >= 1:
      next_state = to_add.pop()
      if next_state in state_set:
        continue
      state_set.add(next_state)
      to_add.extend(self.get_next_states(next_state, EPSILON))
    return frozenset(state_set)

  def get_initial_states(self) -> FrozenSet[int]:
    return self.get_epsilon_closure(self.initial_state)

  def move(self, states: Iterable[int], symbol: str) -> FrozenSet[int]:
    """
    Consumes `symbol` from all `states`, and then follows all epsilon transitions.
    """
    assert not is_epsilon(symbol)
    return self.get_epsilon_closure_of_states({
      next_state for state in states for next_state in self.get_next_states(state, symbol)})

  def accepts(self, word: Iterable[str]) -> bool:
    state_set = self.get_initial_states()
    for char in word:
      state_set = self.move(state_set, char)
    return not state_set.isdisjoint(self.final_states)


class DeterministicAutomaton(FiniteAutomaton[int]):
  """
  A DFA (without epsilon-transitions). Its transition function may be partial.
  """

  def __init__(self, graph: DeterministicStateGraph, states: Iterable[int], initial_state: int,
               final_states: Iterable[int]):
    super().__init__(graph, states, initial_state, final_states)

  def _copy_transitions(self, transitions: Dict[str, int]) -> Dict[str, int]:
    assert not any(is_epsilon(symbol) for symbol in transitions)
    return dict(transitions)

  def get_next_state(self, state: int, symbol: str) -> int:
    """
    :raises: MissingTransitionError
    """
    next_state = self.state_transition_table[state].get(symbol)
    if next_state is None:
      raise MissingTransitionError(self.get_state_name(state), symbol)
    return next_state

  def iter_transitions(self) -> Iterator[Tuple[int, Symbol, int]]:
    for state, transitions in self.state_transition_table.items():
      for symbol, next_state in transitions.items():
        yield state, symbol, next_state

  def is_total(self) -> bool:
    """
    :returns: whether every state has a transition for every symbol of the alphabet
    """
    return all(self.alphabet.issubset(transitions) for transitions in self.state_transition_table.values())

  def accepts(self, word: Iterable[str]) -> bool:
    """
    :raises: MissingTransitionError
    """
    state = self.initial_state
    for char in word:
      state = self.get_next_state(state, char)
    return state in self.final_states
