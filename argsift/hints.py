"""
Argsift hint table and namespace tracker.

Hints
- A hint is one caller-declared fact that disambiguates classification:
  • ALIAS(alias → name): emitted names are resolved through it.
  • COMMAND(name): the token is a command and enters a deeper namespace.
  • REQUIRES_VALUE(name): the option consumes the next token (or '=value') as its value.
  • LONG_NAME(name): a single-hyphen option spelled as a whole name (-abc is not -a -b -c).
- Every hint is scoped to a namespace (tuple of command names, () for top level) and
  only applies when the current namespace is exactly that tuple: hints do not
  inherit into deeper or shallower commands.

Lookups are linear, exact-match scans (kind, name, namespace); hint counts are small and
caller-controlled.
"""
from collections import namedtuple
from enum import Enum

from .utils import Unset, freeze, mirror


class HintKind(Enum):
    ALIAS = "alias"
    COMMAND = "command"
    REQUIRES_VALUE = "requires-value"
    LONG_NAME = "long-name"

    def __str__(self):
        return self.value


class Hint(namedtuple("Hint", ("kind", "name", "namespace", "target"), defaults=((), None))):
    """
    one declaration of the hint table.

    - kind: HintKind
    - name: the declared name (for ALIAS, the alias being resolved)
    - namespace: tuple of command names the hint is scoped to
    - target: the resolved name (ALIAS only, None otherwise)
    """
    __slots__ = ()

    def matches(self, kind, name, namespace):
        # tuple equality already means same length and element-wise equal
        return self.kind is kind and self.name == name and self.namespace == tuple(namespace)

    def __rich_repr__(self):
        yield "kind", str(self.kind)
        yield "name", self.name
        if self.target is not None:
            yield "target", self.target
        yield "namespace", self.namespace


def _check_name(name, what):
    if not isinstance(name, str):
        raise TypeError("%s must be a string, not %r" % (what, type(name).__name__))
    if not name:
        raise ValueError("%s must be a non-empty string" % what)
    return name


class HintTable:
    """
    Append-only, ordered collection of hints.

    The table is configuration, not parse state: it survives Parser.reset() and
    is only read while parsing.
    """

    hints = mirror("hints")

    def __init__(self):
        self._hints = []

    def __len__(self):
        return len(self._hints)

    def __iter__(self):
        return iter(self._hints)

    def add(self, kind, name, /, namespace=Unset, *, target=None):
        """
        append one hint and return it.

        - name (and target for aliases) must be non-empty strings.
        - namespace: any iterable of strings; Unset means top level.
        - a self-alias (name == target) is rejected since it would be a no-op.
        """
        if not isinstance(kind, HintKind):
            raise TypeError("kind must be a HintKind")
        _check_name(name, "hint name")
        if kind is HintKind.ALIAS:
            _check_name(target, "alias target")
            if target == name:
                raise ValueError("alias %r resolves to itself" % name)
        elif target is not None:
            raise TypeError("only alias hints take a target")

        hint = Hint(kind, name, freeze(namespace), target)
        self._hints.append(hint)
        return hint

    def lookup(self, kind, name, namespace=(), /):
        """return the first hint of kind declared for name in exactly namespace, or None."""
        for hint in self._hints:
            if hint.matches(kind, name, namespace):
                return hint
        return None

    def test(self, kind, name, namespace=(), /):
        """tell whether name itself carries a hint of kind in exactly namespace (aliases are not followed)."""
        return self.lookup(kind, name, namespace) is not None

    def resolve(self, name, namespace=(), /):
        """return the alias target for name in namespace, or name unchanged."""
        hint = self.lookup(HintKind.ALIAS, name, namespace)
        return hint.target if hint is not None else name

    def __repr__(self):
        return "HintTable(%r)" % (self._hints,)

    def __rich_repr__(self):
        yield from self._hints


class Namespace:
    """
    The ordered list of command names entered so far during one parse.

    Append-only while parsing (enter), emptied only between parses (clear).
    Compares equal to tuples and lists holding the same names.
    """

    names = mirror("names")

    def __init__(self):
        self._names = []

    def enter(self, name, /):
        self._names.append(name)

    def clear(self):
        self._names.clear()

    def snapshot(self):
        return tuple(self._names)

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __eq__(self, other):
        if isinstance(other, Namespace):
            return self._names == other._names
        if isinstance(other, (tuple, list)):
            return tuple(self._names) == tuple(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "Namespace(%r)" % (tuple(self._names),)

    def __rich_repr__(self):
        yield from self._names


__all__ = (
    "HintKind",
    "Hint",
    "HintTable",
    "Namespace",
)
