"""Configuration defaults for fayth.

Runtime configuration is supplied in code through layered option functions
(``CallOption`` for transport settings, ``ModelOption`` for generation
parameters). This package only holds the built-in defaults those layers fall
back to.
"""

from .defaults import *  # noqa: F401,F403
from .defaults import __all__  # noqa: F401
