"""Errors raised by the container.

Registration errors signal caller misuse (bad arguments); resolution errors
signal a broken dependency graph (missing registration or a cycle).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence


class ContainerError(Exception):
    # Attributes passed to __init__ after the message, in order.
    _fields: tuple[str, ...] = ()

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.args[0], *(getattr(self, f) for f in self._fields))


class RegistrationError(ContainerError, ValueError):
    pass


class InvalidName(RegistrationError):
    _fields = ("name",)

    def __init__(self, msg: str, name: object) -> None:
        super().__init__(msg)
        self.name = name


class InvalidFactory(RegistrationError, TypeError):
    _fields = ("factory",)

    def __init__(self, msg: str, factory: object) -> None:
        super().__init__(msg)
        self.factory = factory


class InvalidDependencyList(RegistrationError, TypeError):
    _fields = ("dependencies",)

    def __init__(self, msg: str, dependencies: object) -> None:
        super().__init__(msg)
        self.dependencies = dependencies


class InvalidDependencyName(RegistrationError):
    _fields = ("dependency",)

    def __init__(self, msg: str, dependency: object) -> None:
        super().__init__(msg)
        self.dependency = dependency


class DuplicateRegistration(RegistrationError):
    _fields = ("name",)

    def __init__(self, msg: str, name: str) -> None:
        super().__init__(msg)
        self.name = name


class ResolutionError(ContainerError, RuntimeError):
    """Base for failures while building an object graph.

    `path` holds the ancestor chain that was being resolved when `name` failed.
    """

    _fields = ("name", "path")

    def __init__(self, msg: str, name: str, path: Sequence[str] = ()) -> None:
        super().__init__(msg)
        self.name = name
        self.path = tuple(path)


class UnregisteredClass(ResolutionError):
    pass


class CyclicDependency(ResolutionError):
    pass


__all__ = [
    "ContainerError",
    "CyclicDependency",
    "DuplicateRegistration",
    "InvalidDependencyList",
    "InvalidDependencyName",
    "InvalidFactory",
    "InvalidName",
    "RegistrationError",
    "ResolutionError",
    "UnregisteredClass",
]
