"""
Argsift components: the classified output of a parse.

- ComponentKind: OPTION, COMMAND or ARG.
- Component: kind + resolved name + value.
  • OPTION: name is the resolved option name; value is the given value, or "true"
    for a presence-only flag.
  • COMMAND: name is the resolved command name; value is "".
  • ARG: name is ""; value is the literal token text.
- ComponentQueue: first-in-first-out buffer drained destructively by the caller.
"""
from collections import deque
from enum import IntEnum

TRUE = "true"


class ComponentKind(IntEnum):
    OPTION = 1
    COMMAND = 2
    ARG = 3

    def __str__(self):
        return self.name.title()


class Component:
    __slots__ = ("kind", "name", "value")

    def __init__(self, kind, /, name="", value=""):
        self.kind = ComponentKind(kind)
        self.name = name
        self.value = value

    @classmethod
    def option(cls, name, value=TRUE, /):
        return cls(ComponentKind.OPTION, name, value)

    @classmethod
    def command(cls, name, /):
        return cls(ComponentKind.COMMAND, name)

    @classmethod
    def arg(cls, value, /):
        return cls(ComponentKind.ARG, "", value)

    def __eq__(self, other):
        if not isinstance(other, Component):
            return NotImplemented
        return (self.kind, self.name, self.value) == (other.kind, other.name, other.value)

    def __hash__(self):
        return hash((self.kind, self.name, self.value))

    def __repr__(self):
        return "Component(kind=%s, name=%r, value=%r)" % (self.kind, self.name, self.value)

    def __rich_repr__(self):
        yield "kind", str(self.kind)
        if self.kind is not ComponentKind.ARG:
            yield "name", self.name
        if self.kind is not ComponentKind.COMMAND:
            yield "value", self.value


class ComponentQueue:
    """ordered buffer of emitted components (push at the back, pop from the front)."""

    def __init__(self):
        self._components = deque()

    def push(self, component, /):
        self._components.append(component)

    def pop(self):
        """pop the oldest component, or None once the queue is empty."""
        try:
            return self._components.popleft()
        except IndexError:
            return None

    def clear(self):
        self._components.clear()

    def __len__(self):
        return len(self._components)

    def __bool__(self):
        return bool(self._components)

    def __iter__(self):
        # non-destructive; draining goes through pop()
        return iter(tuple(self._components))

    def __repr__(self):
        return "ComponentQueue(%r)" % (list(self._components),)

    def __rich_repr__(self):
        yield from self._components


__all__ = (
    "ComponentKind",
    "Component",
    "ComponentQueue",
    "TRUE",
)
