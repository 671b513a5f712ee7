from finite_automata.automaton import FiniteAutomaton
from finite_automata.symbols import make_symbol_sort_key


def _format_state_name(automaton: FiniteAutomaton, state: int) -> str:
  name = automaton.get_state_name(state)
  return name if name != '' else '<unnamed>'


def format_automaton(automaton: FiniteAutomaton) -> str:
  """
  :returns: human readable description of all states and transitions. The same automaton always gives the same text.
  """
  lines = ['----- %s -----' % type(automaton).__name__, 'States:']
  lines += ['  %s' % _format_state_name(automaton, state) for state in sorted(automaton.states)]
  lines += ['', 'Alphabet:']
  lines += ['  %s' % symbol for symbol in sorted(automaton.alphabet)]
  lines += ['', 'Transitions:']
  transitions = sorted(
    automaton.iter_transitions(),
    key=lambda transition: (transition[0], make_symbol_sort_key(transition[1]), transition[2]))
  lines += [
    '  %s --%s--> %s' % (
      _format_state_name(automaton, state), symbol, _format_state_name(automaton, next_state))
    for state, symbol, next_state in transitions]
  lines += ['', 'Start state:', '  %s' % _format_state_name(automaton, automaton.initial_state)]
  lines += ['', 'Accept states:']
  lines += ['  %s' % _format_state_name(automaton, state) for state in sorted(automaton.final_states)]
  return '\n'.join(lines)
