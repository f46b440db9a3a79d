"""MINIMALPACK

Small, stateless helpers for everyday Python values: arrays, mappings,
collections, iterables, strings, exceptions and arbitrary objects.

Helpers are free functions taking the value they operate on as their first
argument. Most of them treat ``None`` as a meaningful input and return an
empty or default result instead of raising.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())
