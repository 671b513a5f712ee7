"""
Input symbols of automata.
A regular symbol is a single character `str`.
The empty symbol (!= the empty word) is `EPSILON`, which is of a different type than all regular symbols.
"""
from typing import Union, Any


class Epsilon:
  """
  Type of the empty symbol. `EPSILON` is its only instance.
  """

  _instance = None

  def __new__(cls):
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self):
    return 'EPSILON'

  def __str__(self):
    return 'ε'

  def __reduce__(self):
    return Epsilon, ()


EPSILON = Epsilon()

Symbol = Union[str, Epsilon]


def is_epsilon(symbol: Symbol) -> bool:
  return isinstance(symbol, Epsilon)


def is_input_symbol(symbol: Any) -> bool:
  """
  :returns: whether `symbol` can be consumed from an input word, i.e. is a single character
  """
  return isinstance(symbol, str) and len(symbol) == 1


def make_symbol_sort_key(symbol: Symbol):
  """
  Orders all regular symbols lexicographically, and `EPSILON` before all of them.
  """
  if is_epsilon(symbol):
    return 0, ''
  return 1, symbol
