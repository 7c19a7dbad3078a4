"""Support for the guess the number game rules, engine and GUI."""

from .errors import *
from .rules import *
from .state import *
from .events import *
from .config import *
from .engine import *
