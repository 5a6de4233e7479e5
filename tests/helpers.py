"""Test helpers for building objects with public, private and inherited properties."""

from __future__ import annotations


class Base:
    kind = "base"
    _secret_kind = "hidden"

    def describe(self) -> str:
        return self.kind

    @classmethod
    def create(cls) -> Base:
        return cls()

    @staticmethod
    def version_label() -> str:
        return "v"

    @property
    def label(self) -> str:
        return "label"


class Child(Base):
    version = 2

    def __init__(self) -> None:
        self.foo = True
        self.bar = 123
        self._fu = "Hello"


class Shadow(Child):
    kind = "shadow"

    def __init__(self) -> None:
        super().__init__()
        self.version = 3


class Point:
    __slots__ = ("x", "y", "_z")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
