"""Define the exceptions raised by invalid operations on states."""


class StateException(Exception):
    """Base class of all errors raised by the state representation library."""


class EmptyStateException(StateException):
    """An error raised when an operation is attempted on a state with no assigned value."""


class IncompatibleStatesException(StateException):
    """An error raised when the two operands of an operation are not compatible states."""


class IncompatibleReferenceFramesException(IncompatibleStatesException):
    """An error raised when two spatial states are not expressed in matching reference frames."""


class DimensionMismatchException(StateException, ValueError):
    """An error raised when a value vector disagrees with the dimension of a state."""


class DivisionByZeroException(StateException, ZeroDivisionError):
    """An error raised when a state is divided by zero or by gains containing a zero."""
