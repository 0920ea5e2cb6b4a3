"""Import utilities for diagnostic output of states."""

from .logging import console as console
from .logging import log_debug as log_debug
from .logging import print_state as print_state
