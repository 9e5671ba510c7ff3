"""
Per-dispatch options.

Recognized keys (all boolean, default False)
- camelize / titleize: shorthands that switch on both the class_* and module_* variant.
- class_camelize / class_titleize: transform the command name only.
- module_camelize / module_titleize: transform the namespace only.
- debug: log the dispatch flow (begin, resolved name, end, faults).
- pretend: log the fully-qualified command name right before invocation.

Unrecognized keys are ignored.
"""
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass

from .faults import ArgumentTypeError
from .utils import Unset


@dataclass(frozen=True, slots=True)
class DispatchOptions:
    camelize: bool = False
    titleize: bool = False
    class_camelize: bool = False
    class_titleize: bool = False
    module_camelize: bool = False
    module_titleize: bool = False
    debug: bool = False
    pretend: bool = False

    def __post_init__(self):
        if self.camelize:
            object.__setattr__(self, "class_camelize", True)
            object.__setattr__(self, "module_camelize", True)
        if self.titleize:
            object.__setattr__(self, "class_titleize", True)
            object.__setattr__(self, "module_titleize", True)

    @classmethod
    def coerce(cls, options=Unset, /):
        """
        Build options from whatever the caller handed to dispatch().

        - Unset / None      -> defaults
        - DispatchOptions   -> returned as-is
        - Mapping           -> known keys picked, values coerced to bool
        """
        if options is Unset or options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ArgumentTypeError("Argument options is not a Mapping.", argument="options")
        known = {field.name for field in dataclasses.fields(cls)}
        return cls(**{str(key): bool(value) for key, value in options.items() if str(key) in known})


__all__ = (
    "DispatchOptions",
)
