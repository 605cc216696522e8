"""Package of algorithms based on reduced ordered binary decision diagrams."""
try:
    from ._version import version as __version__
except ImportError:
    __version__ = None
from robdd._abc import Operator
from robdd.bdd import (
    BDD,
    BooleanFunction,
    Predefined)
