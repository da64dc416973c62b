"""
Hint table and namespace tracker tests.

Scope
- Validate hint declaration checks (names, aliases, namespaces).
- Validate exact-match namespace scoping (no inheritance, no prefix matching).
- Validate alias resolution and exact-match hint tests (aliases are not followed).
- Validate the append-only namespace tracker.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from argsift.hints import Hint, HintKind, HintTable, Namespace


class HintTableTest(TestCase):
    """Behavioral tests for HintTable."""

    def setUp(self):
        self.table = HintTable()

    def testAddReturnsNormalizedHint(self):
        hint = self.table.add(HintKind.COMMAND, "sub", ["root"])
        self.assertEqual(hint, Hint(HintKind.COMMAND, "sub", ("root",), None))
        self.assertEqual(self.table.hints, (hint,))
        self.assertEqual(len(self.table), 1)

    def testNamespaceDefaultsToTopLevel(self):
        self.assertEqual(self.table.add(HintKind.LONG_NAME, "abc").namespace, ())

    def testDeclarationOrderIsKept(self):
        first = self.table.add(HintKind.COMMAND, "a")
        second = self.table.add(HintKind.REQUIRES_VALUE, "b")
        self.assertEqual(list(self.table), [first, second])

    def testBareStringNamespaceRejected(self):
        with self.assertRaises(TypeError):
            self.table.add(HintKind.COMMAND, "sub", "root")

    def testNonStringNamespaceItemRejected(self):
        with self.assertRaises(TypeError):
            self.table.add(HintKind.COMMAND, "sub", ["root", 1])

    def testEmptyNameRejected(self):
        with self.assertRaises(ValueError):
            self.table.add(HintKind.COMMAND, "")

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            self.table.add(HintKind.COMMAND, 3)

    def testSelfAliasRejected(self):
        with self.assertRaises(ValueError):
            self.table.add(HintKind.ALIAS, "v", target="v")

    def testAliasRequiresTarget(self):
        with self.assertRaises(TypeError):
            self.table.add(HintKind.ALIAS, "v")

    def testTargetOnlyForAliases(self):
        with self.assertRaises(TypeError):
            self.table.add(HintKind.COMMAND, "sub", target="other")

    def testKindMustBeHintKind(self):
        with self.assertRaises(TypeError):
            self.table.add("command", "sub")

    def testLookupMatchesExactNamespace(self):
        hint = self.table.add(HintKind.REQUIRES_VALUE, "b", ["sub"])
        self.assertIs(self.table.lookup(HintKind.REQUIRES_VALUE, "b", ("sub",)), hint)
        self.assertIsNone(self.table.lookup(HintKind.REQUIRES_VALUE, "b", ()))
        self.assertIsNone(self.table.lookup(HintKind.REQUIRES_VALUE, "b", ("sub", "deeper")))
        self.assertIsNone(self.table.lookup(HintKind.COMMAND, "b", ("sub",)))

    def testTopLevelHintDoesNotInherit(self):
        self.table.add(HintKind.COMMAND, "sub")
        self.assertTrue(self.table.test(HintKind.COMMAND, "sub", ()))
        self.assertFalse(self.table.test(HintKind.COMMAND, "sub", ("sub",)))

    def testNoPrefixMatching(self):
        self.table.add(HintKind.COMMAND, "leaf", ["a", "b"])
        self.assertFalse(self.table.test(HintKind.COMMAND, "leaf", ("a",)))
        self.assertFalse(self.table.test(HintKind.COMMAND, "leaf", ("b", "a")))
        self.assertTrue(self.table.test(HintKind.COMMAND, "leaf", ["a", "b"]))

    def testResolveAlias(self):
        self.table.add(HintKind.ALIAS, "v", target="verbose")
        self.assertEqual(self.table.resolve("v"), "verbose")
        self.assertEqual(self.table.resolve("x"), "x")

    def testResolveAliasIsScoped(self):
        self.table.add(HintKind.ALIAS, "j", ["build"], target="jobs")
        self.assertEqual(self.table.resolve("j"), "j")
        self.assertEqual(self.table.resolve("j", ("build",)), "jobs")

    def testTestDoesNotFollowAlias(self):
        self.table.add(HintKind.ALIAS, "o", target="output")
        self.table.add(HintKind.REQUIRES_VALUE, "output")
        self.assertFalse(self.table.test(HintKind.REQUIRES_VALUE, "o"))
        self.assertTrue(self.table.test(HintKind.REQUIRES_VALUE, "output"))
        self.assertFalse(self.table.test(HintKind.REQUIRES_VALUE, "x"))


class NamespaceTest(TestCase):
    """Behavioral tests for the Namespace tracker."""

    def testStartsEmpty(self):
        namespace = Namespace()
        self.assertEqual(len(namespace), 0)
        self.assertEqual(namespace.snapshot(), ())

    def testEnterAppends(self):
        namespace = Namespace()
        namespace.enter("sub")
        namespace.enter("subsub")
        self.assertEqual(namespace.snapshot(), ("sub", "subsub"))
        self.assertEqual(namespace.names, ("sub", "subsub"))
        self.assertEqual(namespace, ["sub", "subsub"])
        self.assertEqual(list(namespace), ["sub", "subsub"])

    def testSnapshotIsDetached(self):
        namespace = Namespace()
        namespace.enter("sub")
        snapshot = namespace.snapshot()
        namespace.enter("subsub")
        self.assertEqual(snapshot, ("sub",))

    def testClear(self):
        namespace = Namespace()
        namespace.enter("sub")
        namespace.clear()
        self.assertEqual(namespace, ())

    def testUnhashable(self):
        with self.assertRaises(TypeError):
            hash(Namespace())


if __name__ == '__main__':
    unittest.main()
