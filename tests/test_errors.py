import pickle
import unittest

import pytest

from pathbind import Container
from pathbind.errors import (
    CyclicDependency,
    DuplicateRegistration,
    InvalidDependencyList,
    InvalidDependencyName,
    InvalidFactory,
    InvalidName,
    UnregisteredClass,
)


class TestErrorPickling(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container()

    def roundtrip(self, err):
        return pickle.loads(pickle.dumps(err))

    def test_unregistered_class_keeps_message_name_and_path(self):
        self.cont.register("p", lambda deps: deps, ["x"])
        with pytest.raises(UnregisteredClass) as ctx:
            self.cont.get("p")

        copy = self.roundtrip(ctx.value)

        assert type(copy) is UnregisteredClass
        assert str(copy) == str(ctx.value)
        assert copy.name == "x"
        assert copy.path == ("p",)

    def test_cyclic_dependency_keeps_message_name_and_path(self):
        self.cont.register("a", lambda deps: deps, ["b"])
        self.cont.register("b", lambda deps: deps, ["a"])
        with pytest.raises(CyclicDependency) as ctx:
            self.cont.get("a")

        copy = self.roundtrip(ctx.value)

        assert type(copy) is CyclicDependency
        assert str(copy) == "cyclic dependencies: a -> b -> a"
        assert copy.name == "a"
        assert copy.path == ("a", "b")

    def test_registration_errors_keep_message_and_offending_value(self):
        cases = [
            (InvalidName, "invalid name provided", "name", ""),
            (InvalidFactory, "invalid factory provided", "factory", None),
            (InvalidDependencyList, "dependencies must be a sequence of names", "dependencies", "dep"),
            (InvalidDependencyName, "invalid dependency name provided", "dependency", 42),
            (DuplicateRegistration, "attempted to register duplicate class", "name", "example"),
        ]
        for kind, msg, attr, value in cases:
            with self.subTest(kind=kind.__name__):
                copy = self.roundtrip(kind(msg, value))

                assert type(copy) is kind
                assert str(copy) == msg
                assert getattr(copy, attr) == value
