from typing import Set, Optional, Iterable

import networkx as nx

from finite_automata.automaton import FiniteAutomaton


def make_transition_graph(automaton: FiniteAutomaton) -> nx.MultiDiGraph:
  """
  One node per state, one edge per transition, keyed by its symbol.
  """
  graph = nx.MultiDiGraph()
  for state in sorted(automaton.states):
    graph.add_node(
      state, name=automaton.get_state_name(state), initial=state == automaton.initial_state,
      accepting=automaton.is_final_state(state))
  for state, symbol, next_state in automaton.iter_transitions():
    graph.add_edge(state, next_state, key=symbol, symbol=symbol)
  return graph


def get_reachable_states(automaton: FiniteAutomaton, from_states: Optional[Iterable[int]] = None) -> Set[int]:
  """
  :param from_states: defaults to the start state
  :returns: all states reachable from `from_states` with any transitions, including `from_states`
  """
  if from_states is None:
    from_states = {automaton.initial_state}
  graph = make_transition_graph(automaton)
  reachable = set()
  for state in from_states:
    reachable.add(state)
    reachable.update(nx.descendants(graph, state))
  return reachable
