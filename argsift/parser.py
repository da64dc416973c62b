"""
Argsift parser: single-pass, hint-driven classification of command-line tokens.

What this module provides
- Parser: feed raw argument strings, declare hints, parse once, then drain the
  resulting Component stream (options, commands and positional args).

How a token is classified (first matching rule wins)
1. double-dash: after a literal '--' every token is an ARG; the '--' itself is
   swallowed and resolves any option still pending.
2. positional lock: after the first ARG every token is an ARG.
3. option start: '-x' / '--name' (unless a value-requiring option is waiting for
   its value) flushes the pending option and starts a new one. '-abc' expands to
   -a -b -c unless 'abc' is a long-name hint or grouping is off.
4. '=': marks the pending value-requiring option as explicitly assigned.
5. pending option: a value-requiring option takes the token as its value; any
   other pending option is flushed as a "true" flag.
6. command or arg: a command hint in the current namespace enters that command,
   anything else is an ARG.

Decisions are never revisited: a pending option is resolved when the next token
arrives or at end of input, with no lookahead.

Quick start
    parser = Parser()
    parser.hint_command("sub")
    parser.hint_requires_value("b", ["sub"])
    parser.feed(["-b", "sub", "-b", "ccc"])
    parser.parse()
    for component in parser.drain():
        ...  # Option b=true, Command sub, Option b=ccc
"""
from .components import TRUE, Component, ComponentQueue
from .faults import (
    FaultCode,
    StrayEqualsError,
    EqualsOnNonValueOptionError,
    MissingRequiredValueError,
    GroupedOptionMissingValueError,
    getdoc,
)
from .hints import HintKind, HintTable, Namespace
from .tokens import EQUALS, Tokenizer, unescape
from .utils import Unset, mirror, ordinal

DOUBLE_DASH = "--"


class _State:
    """per-parse mutable state; a fresh one is created by every Parser.parse() call."""

    __slots__ = ("name", "prefix", "token", "equals", "positional", "literal")

    def __init__(self):
        self.name = None  # pending option name (None when nothing is pending)
        self.prefix = ""  # '-' or '--', as typed, for messages
        self.token = None  # token the pending option came from
        self.equals = False  # an explicit '=' followed the pending option
        self.positional = False  # an ARG has been emitted: no more options
        self.literal = False  # a '--' has been consumed: everything is an ARG

    def hold(self, name, prefix, token):
        self.name = name
        self.prefix = prefix
        self.token = token
        self.equals = False

    def release(self):
        self.name = None
        self.prefix = ""
        self.token = None
        self.equals = False


class Parser:
    """
    Hint-driven command-line classifier.

    Lifecycle
    - configure once: hint_alias/hint_command/hint_requires_value/hint_long_name,
      hint_no_grouping/hint_disable_double_dash (or the constructor switches).
    - per run: feed(args) → parse() → get_component()/drain() until exhausted.
    - reset() clears input, results and the namespace; hints and switches stay.

    Errors
    - parse() raises a ParseError subclass on structurally contradictory input;
      components emitted before the fault stay in the queue.
    - unknown names are never errors: they become flags or args.
    """

    grouping = mirror("grouping")
    double_dash = mirror("double_dash")

    def __init__(self, *, grouping=True, double_dash=True):
        self._hints = HintTable()
        self._grouping = bool(grouping)
        self._double_dash = bool(double_dash)
        self._args = ()
        self._tokenizer = Tokenizer()
        self._queue = ComponentQueue()
        self._namespace = Namespace()

    # --- configuration ---

    def hint_alias(self, alias, name, /, namespace=Unset):
        """emit `name` whenever `alias` is classified in namespace."""
        self._hints.add(HintKind.ALIAS, alias, namespace, target=name)

    def hint_command(self, name, /, namespace=Unset):
        """declare `name` a command of namespace (top level when omitted)."""
        self._hints.add(HintKind.COMMAND, name, namespace)

    def hint_requires_value(self, name, /, namespace=Unset):
        """declare that option `name` takes a value (next token or '=value')."""
        self._hints.add(HintKind.REQUIRES_VALUE, name, namespace)

    def hint_long_name(self, name, /, namespace=Unset):
        """declare that '-name' is one option, not a group of short ones."""
        self._hints.add(HintKind.LONG_NAME, name, namespace)

    def hint_no_grouping(self):
        """stop expanding '-abc' into '-a -b -c'."""
        self._grouping = False

    def hint_disable_double_dash(self):
        """treat '--' as an ordinary token instead of an options terminator."""
        self._double_dash = False

    # --- input / output ---

    def feed(self, args, /):
        """replace the raw arguments for the next parse."""
        if isinstance(args, str):
            raise TypeError("feed() argument must be an iterable of strings, not a string")
        self._args = tuple(map(unescape, args))
        self._tokenizer = Tokenizer(self._args)

    def get_component(self):
        """pop the next component, or None once the stream is exhausted."""
        return self._queue.pop()

    def drain(self):
        """yield (and pop) every queued component in order."""
        while (component := self._queue.pop()) is not None:
            yield component

    def reset(self):
        """forget input, results and namespace; hints and switches persist."""
        self._args = ()
        self._tokenizer = Tokenizer()
        self._queue.clear()
        self._namespace.clear()

    @property
    def hints(self):
        """declared hints, in declaration order."""
        return tuple(self._hints)

    @property
    def namespace(self):
        """commands entered so far, outermost first."""
        return self._namespace.snapshot()

    @property
    def queued(self):
        """number of components waiting to be drained."""
        return len(self._queue)

    # --- parsing ---

    def parse(self):
        """
        classify every fed token into the component queue.

        returns None on success; raises StrayEqualsError, EqualsOnNonValueOptionError,
        MissingRequiredValueError or GroupedOptionMissingValueError otherwise.
        """
        self._queue.clear()
        self._namespace.clear()

        state = _State()
        for token in self._tokenizer:
            self._classify(token, state)
        self._settle(state)

    def _classify(self, token, state):
        text = token.text

        if self._double_dash:
            if state.literal:
                return self._queue.push(Component.arg(text))
            if text == DOUBLE_DASH:
                self._settle(state)
                state.literal = True
                return

        if state.positional:
            return self._queue.push(Component.arg(text))

        if self._is_option(text) and (state.name is None or not self._requires_value(state.name)):
            if state.name is not None:
                self._flag(state)
            return self._begin(token, state)

        if text == EQUALS:
            if state.name is None:
                raise self._fault(
                    StrayEqualsError,
                    FaultCode.STRAY_EQUALS,
                    "unexpected '=' at %s position with no option before it" % ordinal(token.index),
                    title="stray equals sign",
                    hint="write the option name right before '=' (for example: --name=value)",
                    token=token,
                    name=None,
                )
            if not self._requires_value(state.name):
                raise self._fault(
                    EqualsOnNonValueOptionError,
                    FaultCode.EQUALS_ON_NON_VALUE_OPTION,
                    "option %r at %s position does not take a value" % (
                        state.prefix + state.name, ordinal(state.token.index)
                    ),
                    title="option cannot take a value",
                    hint="remove everything from '=' (for example: %s)" % (state.prefix + state.name),
                    token=token,
                    name=state.name,
                )
            state.equals = True
            return

        if state.name is not None:
            if self._requires_value(state.name):
                if not self._is_command(text):
                    self._queue.push(Component.option(self._resolve(state.name), text))
                    return state.release()
                if not state.equals:
                    spelling = state.prefix + state.name
                    raise self._fault(
                        MissingRequiredValueError,
                        FaultCode.MISSING_REQUIRED_VALUE,
                        "option %r at %s position requires a value but command %r followed" % (
                            spelling, ordinal(state.token.index), text
                        ),
                        title="missing option value",
                        hint="write %s=%s to pass it as the value, or %s= for an empty one" % (
                            spelling, text, spelling
                        ),
                        token=token,
                        name=state.name,
                    )
                # 'name=' forced an empty value; the token is still a command
                self._queue.push(Component.option(self._resolve(state.name), ""))
                state.release()
            else:
                self._flag(state)

        if self._is_command(text):
            name = self._resolve(text)
            self._queue.push(Component.command(name))
            self._namespace.enter(name)
        else:
            self._queue.push(Component.arg(text))
            state.positional = True

    def _begin(self, token, state):
        text = token.text

        if text.startswith(DOUBLE_DASH):
            return state.hold(text[2:], DOUBLE_DASH, token)

        name = text[1:]
        if not self._grouping or self._hints.test(HintKind.LONG_NAME, name, self._namespace):
            return state.hold(name, "-", token)

        # -abc: a and b are flags, c stays pending and may still take a value
        *heads, last = name
        for head in heads:
            if self._requires_value(head):
                raise self._fault(
                    GroupedOptionMissingValueError,
                    FaultCode.GROUPED_OPTION_MISSING_VALUE,
                    "option %r grouped in %r at %s position requires a value" % (
                        "-" + head, text, ordinal(token.index)
                    ),
                    title="grouped option needs a value",
                    hint="pass it on its own (for example: -%s <value>) or last in the group" % head,
                    token=token,
                    name=head,
                )
            self._queue.push(Component.option(self._resolve(head)))
        state.hold(last, "-", token)

    def _settle(self, state):
        """resolve the pending option when no further token can be its value."""
        if state.name is None:
            return
        if not self._requires_value(state.name):
            return self._flag(state)
        if not state.equals:
            spelling = state.prefix + state.name
            raise self._fault(
                MissingRequiredValueError,
                FaultCode.MISSING_REQUIRED_VALUE,
                "option %r at %s position requires a value" % (spelling, ordinal(state.token.index)),
                title="missing option value",
                hint="add a value after it (for example: %s <value>) or pass an empty one with %s=" % (
                    spelling, spelling
                ),
                token=state.token,
                name=state.name,
            )
        self._queue.push(Component.option(self._resolve(state.name), ""))
        state.release()

    def _flag(self, state):
        self._queue.push(Component.option(self._resolve(state.name), TRUE))
        state.release()

    # --- hint lookups (always scoped to the current namespace) ---

    @staticmethod
    def _is_option(text):
        return text.startswith("-") and text not in ("-", DOUBLE_DASH)

    def _requires_value(self, name):
        return self._hints.test(HintKind.REQUIRES_VALUE, name, self._namespace)

    def _is_command(self, text):
        return self._hints.test(HintKind.COMMAND, text, self._namespace)

    def _resolve(self, name):
        return self._hints.resolve(name, self._namespace)

    def _fault(self, cls, code, message, /, *, token, **options):
        return cls(
            message,
            code=code,
            index=token.index,
            token=token.text,
            namespace=self._namespace.snapshot(),
            docs=getdoc(code),
            **options,
        )

    def __repr__(self):
        return "Parser(grouping=%r, double_dash=%r, hints=%d, queued=%d)" % (
            self._grouping, self._double_dash, len(self._hints), len(self._queue)
        )

    def __rich_repr__(self):
        yield "args", self._args
        yield "namespace", self._namespace.snapshot()
        yield "hints", tuple(self._hints)
        yield "grouping", self._grouping
        yield "double_dash", self._double_dash
        yield "queued", tuple(self._queue)


__all__ = (
    "Parser",
    "DOUBLE_DASH",
)
