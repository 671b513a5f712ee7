import _setup_test_env  # noqa
import sys
import unittest
import better_exchook
from nose.tools import assert_equal, assert_raises

from finite_automata.errors import InvalidConfigurationError
from finite_automata.states import NonDeterministicStateGraph, DeterministicStateGraph
from finite_automata.symbols import EPSILON, is_epsilon, is_input_symbol, Epsilon, make_symbol_sort_key


def test_Epsilon():
  assert Epsilon() is EPSILON
  assert is_epsilon(EPSILON)
  assert not is_epsilon('e')
  assert not is_epsilon(None)
  assert_equal(str(EPSILON), 'ε')
  assert is_input_symbol('a')
  assert not is_input_symbol('ab')
  assert not is_input_symbol('')
  assert not is_input_symbol(EPSILON)
  assert_equal(sorted(['b', EPSILON, 'a'], key=make_symbol_sort_key), [EPSILON, 'a', 'b'])


def test_StateArena_ordinals():
  graph1 = NonDeterministicStateGraph()
  graph2 = DeterministicStateGraph()
  assert_equal([graph1.add_state('a'), graph1.add_state('b'), graph1.add_state('a')], [0, 1, 2])
  assert_equal(graph2.add_state('x'), 0)  # every arena counts on its own
  assert_equal(len(graph1), 3)
  assert_equal(list(graph1), [0, 1, 2])
  assert_equal(graph1.get_state_name(2), 'a')
  assert_equal(graph1.find_state('a'), 0)
  assert_equal(graph1.find_state('c'), None)
  assert 2 in graph1
  assert 3 not in graph1
  assert_equal(graph2.add_state(), 1)
  assert_equal(graph2.get_state_name(1), '')


def test_NonDeterministicStateGraph():
  graph = NonDeterministicStateGraph()
  p0, p1, p2 = graph.add_state('p0'), graph.add_state('p1'), graph.add_state('p2')
  assert_equal(graph.add_transition(p0, '1', p1), True)
  assert_equal(graph.add_transition(p0, '1', p1), False)
  assert_equal(graph.add_transition(p0, '1', p0), True)
  assert_equal(graph.add_transition(p0, EPSILON, p2), True)
  assert_equal(graph.add_transition(p2, EPSILON, p0), True)
  assert_equal(graph.get_next_states(p0, '1'), {p0, p1})
  assert_equal(graph.get_next_states(p0, '0'), set())
  assert_equal(graph.get_next_states(p1, '1'), set())
  assert_equal(graph.get_all_next_states(p0), {p0, p1, p2})
  assert_equal(graph.find_symbols_to_state(p0, p2), {EPSILON})
  assert_equal(graph.find_symbols_to_state(p0, p0), {'1'})
  assert_equal(graph.find_symbols_to_state(p1, p0), set())


def test_DeterministicStateGraph():
  graph = DeterministicStateGraph()
  q0, q1 = graph.add_state('q0'), graph.add_state('q1')
  graph.set_transition(q0, '0', q1)
  graph.set_transition(q0, '1', q0)
  graph.set_transition(q0, '0', q0)  # overwrites
  assert_equal(graph.get_next_state(q0, '0'), q0)
  assert_equal(graph.get_next_state(q1, '0'), None)
  assert_equal(graph.get_all_next_states(q0), {q0})
  assert_equal(graph.find_symbol_to_state(q0, q0), '0')
  assert_equal(graph.find_symbol_to_state(q0, q1), None)
  with assert_raises(InvalidConfigurationError):
    graph.set_transition(q0, EPSILON, q1)


if __name__ == "__main__":
  try:
    better_exchook.install()
    if len(sys.argv) <= 1:
      for k, v in sorted(globals().items()):
        if k.startswith("test_"):
          print("-" * 40)
          print("Executing: %s" % k)
          try:
            v()
          except unittest.SkipTest as exc:
            print("SkipTest:", exc)
          print("-" * 40)
      print("Finished all tests.")
    else:
      assert len(sys.argv) >= 2
      for arg in sys.argv[1:]:
        print("Executing: %s" % arg)
        if arg in globals():
          globals()[arg]()  # assume function and execute
        else:
          eval(arg)  # assume Python code and execute
  finally:
    pass
