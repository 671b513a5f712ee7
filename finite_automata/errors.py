from finite_automata.symbols import Symbol


class AutomatonError(Exception):
  def __init__(self, message: str):
    super(AutomatonError, self).__init__(message)


class InvalidConfigurationError(AutomatonError):
  """
  An automaton cannot be constructed, e.g. because its start state or all of its accept states do not exist.
  """


class MissingTransitionError(AutomatonError):
  """
  A (partial) DFA has no transition for the current state and input symbol.
  """

  def __init__(self, state_name: str, symbol: Symbol):
    """
    :param state_name: name of the state the automaton was in
    :param symbol: the symbol that could not be consumed
    """
    self.state_name = state_name
    self.symbol = symbol
    super().__init__(
      'No transition from state %r for symbol %r: invalid symbol or transition function is incomplete' % (
        state_name, symbol))
