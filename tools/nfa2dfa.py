#!/usr/bin/env python3

"""
Main entry point: Convert the sample NFA to a DFA and simulate words on both.
"""
import argparse
import logging

import better_exchook

import _setup_finite_automata_env  # noqa
from finite_automata.errors import AutomatonError
from finite_automata.formatting import format_automaton
from finite_automata.subset_construction import make_dfa_from_nfa
from finite_automata.symbols import EPSILON
from finite_automata.table import make_nfa_from_table

SAMPLE_NFA_TABLE = [
  [None, '0', '1', EPSILON],
  ['p0', [], ['p1', 'p0'], []],
  ['p1', [], ['p2'], []],
  ['p2', ['p2'], ['p2'], []]
]
SAMPLE_START_STATE = 'p0'
SAMPLE_ACCEPT_STATES = ['p2']


def main():
  """
  Main entry point.
  """
  better_exchook.install()
  parser = argparse.ArgumentParser(description='Convert a sample NFA to a DFA using subset construction.')
  parser.add_argument(
    '--word', dest='words', action='append', default=None, help='Input word to simulate, can be given multiple times.')
  parser.add_argument(
    '--log-level', dest='log_level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
    help='Logging level.')
  parser.add_argument(
    '--verbose', dest='verbose', action='store_true', help='Print full stacktrace for all automaton errors.')

  args = parser.parse_args()
  logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(name)s: %(message)s')
  words = args.words if args.words is not None else ['1100001010101']

  try:
    nfa = make_nfa_from_table(SAMPLE_NFA_TABLE, SAMPLE_START_STATE, SAMPLE_ACCEPT_STATES)
    dfa = make_dfa_from_nfa(nfa)
    print(format_automaton(nfa))
    print()
    print(format_automaton(dfa))
    print()
    for word in words:
      print('%r: NFA %s, DFA %s' % (
        word, 'accepts' if nfa.accepts(word) else 'rejects', 'accepts' if dfa.accepts(word) else 'rejects'))
  except AutomatonError as ae:
    if args.verbose:
      raise ae
    else:
      print(str(ae))
      exit(1)


if __name__ == '__main__':
  main()
