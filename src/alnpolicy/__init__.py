"""
Alignment and seed policy parsing.

Resolve compact policy strings (e.g. "MMP=C44;MA=4;RFG=24,12;FL=8") into immutable scoring and seed
parameters for a read aligner.
"""

__version__ = '0.1.0'

__all__ = [
    'config',
    'const',
    'defaults',
    'errors',
    'model',
    'schema',
    'table',
    'parse_policy',
    'resolve_defaults',
    'PolicyError',
    'ResolvedPolicy',
]

from . import config
from . import const
from . import defaults
from . import errors
from . import model
from . import schema
from . import table

from .config import parse_policy
from .defaults import resolve_defaults
from .errors import PolicyError
from .model import ResolvedPolicy
