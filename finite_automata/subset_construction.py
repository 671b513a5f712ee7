import logging
from typing import List, Dict, FrozenSet, Tuple, Iterable

from finite_automata.automaton import NonDeterministicAutomaton, DeterministicAutomaton
from finite_automata.graph import get_reachable_states
from finite_automata.states import DeterministicStateGraph

logger = logging.getLogger(__name__)

"""
Name of the absorbing state representing the empty set of NFA states.
"""
DEAD_STATE_NAME = '{}'


def make_powerset_name(nfa: NonDeterministicAutomaton, powerset: Iterable[int]) -> str:
  """
  :returns: the member state names, sorted, e.g. `{p0, p1}`.
  """
  return '{%s}' % ', '.join(sorted(nfa.get_state_name(state) for state in powerset))


def make_dfa_from_nfa(nfa: NonDeterministicAutomaton) -> DeterministicAutomaton:
  """
  Applies powerset construction.
  Each DFA state represents a set of NFA states; equal sets always give the same DFA state.
  The resulting DFA is total: moves to the empty set go to a single, non-accepting dead state `{}`.
  """
  alphabet = sorted(nfa.alphabet)
  initial_powerset = nfa.get_initial_states()
  assert len(initial_powerset) >= 1

  powersets: List[FrozenSet[int]] = [initial_powerset]
  added_powersets: Dict[FrozenSet[int], int] = {initial_powerset: 0}
  powerset_transitions: List[Tuple[int, str, FrozenSet[int]]] = []

  # worklist in discovery order, `powersets` grows while we iterate
  powerset_idx = 0
  while powerset_idx < len(powersets):
    powerset = powersets[powerset_idx]
    for char in alphabet:
      next_powerset = nfa.move(powerset, char)
      powerset_transitions.append((powerset_idx, char, next_powerset))
      if len(next_powerset) >= 1 and next_powerset not in added_powersets:
        added_powersets[next_powerset] = len(powersets)
        powersets.append(next_powerset)
        logger.debug('Discovered powerset %s', make_powerset_name(nfa, next_powerset))
    powerset_idx += 1

  graph = DeterministicStateGraph()
  powerset_states = [graph.add_state(make_powerset_name(nfa, powerset)) for powerset in powersets]
  dead_state = graph.add_state(DEAD_STATE_NAME)
  for char in alphabet:
    graph.set_transition(dead_state, char, dead_state)

  for from_idx, char, next_powerset in powerset_transitions:
    next_state = powerset_states[added_powersets[next_powerset]] if len(next_powerset) >= 1 else dead_state
    graph.set_transition(powerset_states[from_idx], char, next_state)

  initial_state = powerset_states[added_powersets[initial_powerset]]
  final_states = {
    state for state, powerset in zip(powerset_states, powersets) if not powerset.isdisjoint(nfa.final_states)}

  unreachable_final_states = nfa.final_states - get_reachable_states(nfa)
  if len(unreachable_final_states) >= 1:
    logger.warning(
      'NFA accept states %s are not reachable from the start state and do not occur in the DFA',
      ', '.join(sorted(nfa.get_state_name(state) for state in unreachable_final_states)))

  dfa = DeterministicAutomaton(graph, powerset_states + [dead_state], initial_state, final_states)
  logger.info(
    'Converted NFA with %i states to DFA with %i states (%i accepting)', len(nfa.states), len(dfa.states),
    len(dfa.final_states))
  return dfa
