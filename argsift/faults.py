"""
Argsift faults (parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every structural parse error.
- ParseError: base type that carries message + options and knows how to render itself
  in a friendly, lowercased, and actionable way.
- trigger(): entry point for callers that want to surface a fault (raise, or print and exit).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: every message names the raw argument position
  (“at third position”) and the offending option.
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.

Integration
- The parser raises these exceptions; it never prints.
- Callers either catch ParseError or hand it to trigger(fault, shell=True) to have it
  rendered on stderr via rich.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes raised by the classifier (stable identifiers).

    grouping
    - separators (2111x)
      • STRAY_EQUALS, EQUALS_ON_NON_VALUE_OPTION
    - values (2112x)
      • MISSING_REQUIRED_VALUE, GROUPED_OPTION_MISSING_VALUE

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- separator errors (2111x) ---
    STRAY_EQUALS                 = 21111
    EQUALS_ON_NON_VALUE_OPTION   = 21112

    # --- value errors (2112x) ---
    MISSING_REQUIRED_VALUE       = 21121
    GROUPED_OPTION_MISSING_VALUE = 21122

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base class of every fault raised by Parser.parse().

    options (read-only, also reachable as attributes)
    - code: FaultCode
    - title: short lowercased title
    - hint: one actionable sentence
    - index: 1-based position of the raw argument that triggered the fault
    - token: the token text being classified when the fault happened
    - name: the offending option name (None for a stray '=')

    rendering options (only read by __rich__)
    - colorful, fancy, ratio
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __getattr__(self, name):
        if name == "options":
            raise AttributeError(name)
        try:
            return self.options[name]
        except KeyError:
            raise AttributeError("%r object has no attribute %r" % (type(self).__name__, name)) from None

    def __str__(self):
        return str(self.message) if self.message is not Unset else ""

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        prog = text(getattr(main, "__prog__", "argsift"), "prog-name")
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code is not None else "?", "code"),
            " | ",
            text(str(self.options.get("title", "parse error")).title(), "error-title"),
            " ]"
        )
        message = text(self, "error-message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options.get("hint"), "hint"))

        if fancy:
            try:
                width = int((console.width - 4) * self.options["ratio"])
            except KeyError:
                width = None
            return Panel(Group(message, hint), title=header, title_align="left", width=width)

        return Group(header, message, hint)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class StrayEqualsError(ParseError): ...
class EqualsOnNonValueOptionError(ParseError): ...
class MissingRequiredValueError(ParseError): ...
class GroupedOptionMissingValueError(ParseError): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseError).
    - options are merged into the fault via __replace__(**options) before triggering.
    - shell=False (default): the fault is raised.
    - shell=True: the fault is printed on the stderr console and the process exits with 1.

    typical options
    - shell, fancy, colorful, ratio.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseError",
    "StrayEqualsError",
    "EqualsOnNonValueOptionError",
    "MissingRequiredValueError",
    "GroupedOptionMissingValueError",
    "trigger",
    "getdoc",
)
