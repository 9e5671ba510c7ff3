"""
Courier faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the dispatcher
  raises. Codes are grouped by domain to keep logs/searches predictable.
- DispatchException: base type that carries message + options and knows how to
  render itself through rich (header, one-sentence body, a single clear hint).
- Concrete faults: each one also derives from the closest built-in exception so
  callers may catch either the courier type or the builtin (TypeError, LookupError, ...).

Taxonomy
- input       (211xx): malformed command / namespace / options; raised before any lookup.
- resolution  (212xx): the fully-qualified name is not registered.
- conformance (213xx): the resolved object does not satisfy the configured policy.
- registration(214xx): conflicting registry entries.
- execution   (215xx): lifecycle misuse of a conforming command.

Faults raised by the commands themselves are never wrapped; they reach the caller verbatim.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text


class FaultCode(IntEnum):
    """
    canonical fault codes used across the dispatcher (stable identifiers).

    numeric ranges encode domains; spacing leaves room for future additions
    without reshuffling existing codes.
    """
    # --- input errors (211xx) ---
    INVALID_ARGUMENT_TYPE       = 21101
    EMPTY_COMMAND               = 21102

    # --- resolution errors (212xx) ---
    INVALID_CLASS_CONSTANT      = 21201

    # --- conformance errors (213xx) ---
    INVALID_COMMAND             = 21301
    REQUIRED_CLASS_METHOD       = 21302

    # --- registration errors (214xx) ---
    DUPLICATE_COMMAND           = 21401

    # --- execution errors (215xx) ---
    ALREADY_CALLED              = 21501

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class DispatchException(Exception):
    code = None
    title = "dispatch error"
    hint = ""

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "courier"), "prog-name"),
            " — ",
            text(self.code.normalize() if self.code is not None else "-", "code"),
            " | ",
            text(self.options.get("title", self.title).title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options.get("hint", self.hint), "hint"))

        if self.options.get("fancy", False):
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)


class ArgumentTypeError(DispatchException, TypeError):
    code = FaultCode.INVALID_ARGUMENT_TYPE
    title = "invalid argument"
    hint = "pass the command as a string and the namespace as a string, sequence or mapping"

    def __init__(self, message, /, *, argument=None, **options):
        super().__init__(message, **options)
        self.argument = argument


class EmptyCommandError(DispatchException, ValueError):
    code = FaultCode.EMPTY_COMMAND
    title = "empty command"
    hint = "name the command class to call"


class InvalidClassConstantError(DispatchException, LookupError):
    code = FaultCode.INVALID_CLASS_CONSTANT
    title = "unknown command"
    hint = "register the command or include the module that defines it"

    def __init__(self, constant, reason, /, **options):
        super().__init__(
            f'"{constant}" is not a valid class constant. Error message: "{reason}".',
            **options
        )
        self.constant = constant
        self.reason = reason


class InvalidCommandError(DispatchException, TypeError):
    code = FaultCode.INVALID_COMMAND
    title = "invalid command"
    hint = "derive the command from CommandCallable or allow custom commands"

    def __init__(self, constant, /, **options):
        super().__init__(f'Class "{constant}" is not a valid command; it does not derive from CommandCallable.', **options)
        self.constant = constant


class RequiredClassMethodMissingError(DispatchException, TypeError):
    code = FaultCode.REQUIRED_CLASS_METHOD
    title = "missing class method"
    hint = "define call as a classmethod or staticmethod"

    def __init__(self, constant, /, **options):
        super().__init__(f'Class "{constant}" does not respond to class method "call".', **options)
        self.constant = constant


class DuplicateCommandError(DispatchException, ValueError):
    code = FaultCode.DUPLICATE_COMMAND
    title = "duplicate command"
    hint = "register the command under a different name or discard the existing one"

    def __init__(self, constant, /, **options):
        super().__init__(f'"{constant}" is already registered to a different object.', **options)
        self.constant = constant


class CommandAlreadyCalledError(DispatchException, RuntimeError):
    code = FaultCode.ALREADY_CALLED
    title = "already called"
    hint = "call the command class again to get a fresh instance"

    def __init__(self, command, /, **options):
        super().__init__(f"{type(command).__name__} has already been called.", **options)


__all__ = (
    "FaultCode",
    "DispatchException",
    "ArgumentTypeError",
    "EmptyCommandError",
    "InvalidClassConstantError",
    "InvalidCommandError",
    "RequiredClassMethodMissingError",
    "DuplicateCommandError",
    "CommandAlreadyCalledError",
)
