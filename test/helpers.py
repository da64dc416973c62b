"""
Tests for the internal utilities (Unset, coalesce, mirror, freeze, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from argsift.utils import Unset, UnsetType, coalesce, freeze, mirror, ordinal


class UnsetTest(TestCase):
    """Semantic guarantees of the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testUnionWithTypes(self):
        self.assertIsInstance("x", str | Unset)
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance(Unset, Unset | str)
        self.assertNotIsInstance(1, str | Unset)

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce((), "fallback"), ())
        self.assertIsNone(coalesce(Unset))


class FreezeTest(TestCase):
    """Namespace normalization."""

    def testUnsetIsTopLevel(self):
        self.assertEqual(freeze(Unset), ())

    def testIterablesBecomeTuples(self):
        self.assertEqual(freeze(["a", "b"]), ("a", "b"))
        self.assertEqual(freeze(iter(("a",))), ("a",))

    def testStringRejected(self):
        with self.assertRaises(TypeError):
            freeze("sub")

    def testNonIterableRejected(self):
        with self.assertRaises(TypeError):
            freeze(None)


class MirrorTest(TestCase):
    """Read-only mirrored properties."""

    def testContainersAreFrozen(self):
        class Holder:
            items = mirror("items")
            table = mirror("table")
            tags = mirror("tags")
            flag = mirror("flag")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}
                self._tags = {"x"}
                self._flag = True

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertEqual(holder.tags, frozenset({"x"}))
        self.assertIs(holder.flag, True)
        with self.assertRaises(TypeError):
            holder.table["b"] = 2
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(1)


class OrdinalTest(TestCase):
    """Human-friendly ordinals for messages."""

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(24), "24th")

    def testTeens(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(12), "12th")
        self.assertEqual(ordinal(113), "113th")
        self.assertEqual(ordinal(101), "101st")


if __name__ == '__main__':
    unittest.main()
