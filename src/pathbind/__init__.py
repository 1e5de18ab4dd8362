"""Minimal name-based dependency injection container.

Factories are registered under a name together with the names of the
dependencies they need. Resolving a name builds its whole dependency tree,
depth-first and left-to-right, and passes the resolved values to the factory
as a list. Every resolution constructs fresh values.

Exports:
- `Container`: registry of factories with recursive, cycle-checked resolution.

Error types live in `pathbind.errors`.
"""

from ._container import Container


__all__ = ["Container"]
