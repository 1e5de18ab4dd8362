from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import (
    CyclicDependency,
    DuplicateRegistration,
    InvalidDependencyList,
    InvalidDependencyName,
    InvalidFactory,
    InvalidName,
    UnregisteredClass,
)


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable

    Factory = Callable[[list[Any]], Any]


@dataclass(frozen=True)
class CreationRecord:
    factory: Factory
    dependencies: tuple[str, ...]


class Container:
    """Minimal DI container.

    - register factories by name, with an ordered list of dependency names
    - resolve by name, building the dependency tree depth-first
    - every `get` constructs fresh values; nothing is cached.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, CreationRecord] = {}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._registrations

    def register(self, name: str, factory: Factory, dependencies: Sequence[str] = ()) -> None:
        """Register a factory for `name`.

        The factory receives a list with the resolved values of `dependencies`,
        in the declared order.

        Example:
          container.register("db", lambda deps: Database())
          container.register("repo", lambda deps: Repo(deps[0]), ["db"])

        """
        if not _is_valid_name(name):
            msg = f"invalid name provided: {name!r}"
            raise InvalidName(msg, name)

        if not callable(factory):
            msg = f"invalid factory provided for {name!r}: {factory!r}"
            raise InvalidFactory(msg, factory)

        if not isinstance(dependencies, Sequence) or isinstance(dependencies, (str, bytes, bytearray)):
            msg = f"dependencies must be a sequence of names, got {type(dependencies).__name__}"
            raise InvalidDependencyList(msg, dependencies)

        for dependency in dependencies:
            if not _is_valid_name(dependency):
                msg = f"invalid dependency name provided for {name!r}: {dependency!r}"
                raise InvalidDependencyName(msg, dependency)

        if name in self._registrations:
            msg = f"attempted to register duplicate class: {name!r}"
            raise DuplicateRegistration(msg, name)

        self._registrations[name] = CreationRecord(factory=factory, dependencies=tuple(dependencies))
        logger.debug("Registered %r with dependencies %s", name, list(dependencies))

    def get(self, name: str) -> Any:
        """Build a new value for `name`, resolving its dependency tree.

        Raises `UnregisteredClass` when `name` or a transitive dependency is not
        registered, and `CyclicDependency` when a name reappears among its own
        ancestors. No factory runs for a branch that fails before reaching it.

        Resolution walks an explicit stack, so graph depth is not limited by
        the interpreter's recursion limit.
        """
        stack = [_Frame(name, self._lookup(name), (name,))]
        while True:
            frame = stack[-1]
            done = len(frame.resolved)
            if done < len(frame.record.dependencies):
                dependency = frame.record.dependencies[done]
                record = self._lookup(dependency, frame.path)
                stack.append(_Frame(dependency, record, (*frame.path, dependency)))
                continue

            stack.pop()
            logger.debug("Constructing %r (path: %s)", frame.name, " -> ".join(frame.path))
            value = frame.record.factory(frame.resolved)
            if not stack:
                return value
            stack[-1].resolved.append(value)

    def _lookup(self, name: str, path: tuple[str, ...] = ()) -> CreationRecord:
        # Checked before lookup so self-references fail as cycles.
        if name in path:
            msg = f"cyclic dependencies: {' -> '.join((*path, name))}"
            raise CyclicDependency(msg, name, path)

        record = self._registrations.get(name)
        if record is None:
            chain = f" (required by {' -> '.join(path)})" if path else ""
            msg = f"unregistered class: {name!r}{chain}"
            raise UnregisteredClass(msg, name, path)

        return record


@dataclass
class _Frame:
    name: str
    record: CreationRecord
    path: tuple[str, ...]
    resolved: list[Any] = field(default_factory=list)


def _is_valid_name(name: object) -> bool:
    return isinstance(name, str) and name != ""
