"""Built-in checks and their registration.

Importing this package registers every check in :mod:`argcheck.checks.common`
with its name and prefab message.
"""

from argcheck.checks import common
from argcheck.checks.defs import register_builtins

register_builtins()

__all__ = ["common"]
