"""
Courier dispatcher: resolve a command by name and namespace, then call it.

Flow
    dispatch(command, command_namespace, request_params, options)
      → format the namespace into a qualifier          (courier.namespaces)
      → look up qualifier + command in the registry     (courier.registry)
      → check it against the configured policy           (allow_custom_commands)
      → call its class-level `call` with request_params

Calling convention (by the shape of request_params)
- Mapping                 → call(**request_params)
- list / tuple            → call(*request_params)
- None, False, blank str  → call()
- anything else           → call(request_params)

Return value
- conforming commands (CommandCallable subclasses) return the executed instance,
  exposing result / success / failure / errors.
- custom commands return whatever their `call` returns, untouched.

Faults detected by the dispatcher are raised as typed courier faults before anything
is invoked. Exceptions raised by the command itself propagate untouched.

Example
    from courier import dispatch

    command = dispatch(
        "Authenticate",
        ["Api", "AppName", "V1"],
        {"email": "a@b.com", "password": "secret"},
    )
    command.success
"""
from collections.abc import Mapping

from .configuration import configuration as shared_configuration
from .commands import conforms, entry_point
from .faults import DispatchException, InvalidCommandError, RequiredClassMethodMissingError
from .logger import log_debug, log_error
from .namespaces import command_name, format_namespace
from .options import DispatchOptions
from .registry import registry as shared_registry
from .utils import Unset


def arguments(request_params=Unset, /):
    """
    Split request parameters into (args, kwargs) following the calling convention.

    Blank scalars (None, False, empty or whitespace-only strings) pass no arguments.
    """
    if request_params is Unset or request_params is None or request_params is False:
        return (), {}
    if isinstance(request_params, str) and not request_params.strip():
        return (), {}
    if isinstance(request_params, Mapping):
        return (), dict(request_params)
    if isinstance(request_params, (list, tuple)):
        return tuple(request_params), {}
    return (request_params,), {}


class Dispatcher:
    """
    Binds a configuration and a registry.

    Either may be omitted, in which case the process-wide instance is used (looked up
    on every access, so a later reset()/configure() is honoured).
    """

    def __init__(self, configuration=Unset, registry=Unset):
        self._configuration = configuration
        self._registry = registry

    @property
    def configuration(self):
        if self._configuration is Unset:
            return shared_configuration()
        return self._configuration

    @property
    def registry(self):
        if self._registry is Unset:
            return shared_registry
        return self._registry

    def _debug(self, message, options):
        if options.debug:
            log_debug(message, configuration=self.configuration)

    def resolve(self, command, command_namespace=Unset, /, options=Unset):
        """
        Return the validated command object for command + command_namespace.

        Raises
        - ArgumentTypeError / EmptyCommandError: malformed input.
        - InvalidClassConstantError: nothing is registered under the qualified name.
        - InvalidCommandError: not a CommandCallable while custom commands are disallowed.
        - RequiredClassMethodMissingError: custom command without a class-level `call`.
        """
        options = DispatchOptions.coerce(options)
        qualifier = format_namespace(command_namespace, options)
        name = qualifier + command_name(command, options)
        target = self.registry.lookup(name)

        self._debug(f"Resolved command: {name!r}", options)
        if options.pretend:
            log_debug(f"Command to execute: {name!r}", configuration=self.configuration)

        if conforms(target):
            return target
        if not self.configuration.allow_custom_commands:
            raise InvalidCommandError(name)
        if entry_point(target) is None:
            raise RequiredClassMethodMissingError(name)
        return target

    def invoke(self, target, request_params=Unset, /):
        """
        Call target's class-level `call` with request_params spread by shape.
        """
        entry = entry_point(target)
        if entry is None:
            raise RequiredClassMethodMissingError(getattr(target, "__qualname__", repr(target)))
        args, kwargs = arguments(request_params)
        return entry(*args, **kwargs)

    def dispatch(self, command, command_namespace=Unset, request_params=Unset, options=Unset):
        """
        Resolve and call a command.

        Parameters
        - command: str
          bare command name ("Authenticate"), qualified name or route (with camelize).
        - command_namespace: str | list | tuple | Mapping
          the qualifier; mapping keys are documentation only.
        - request_params: Mapping | list | tuple | object | None
          forwarded to the command's `call` (see calling convention).
        - options: Mapping | DispatchOptions
          camelize/titleize variants, debug, pretend. Unknown keys are ignored.

        Returns
        - the executed CommandCallable instance, or the raw result of a custom command.
        """
        options = DispatchOptions.coerce(options)
        self._debug(
            "Begin dispatching command\n"
            f"  command: {command!r}\n"
            f"  command_namespace: {command_namespace!r}",
            options
        )
        try:
            target = self.resolve(command, command_namespace, options=options)
        except DispatchException as fault:
            if options.debug:
                log_error(fault.message, configuration=self.configuration)
            raise

        outcome = self.invoke(target, request_params)
        self._debug("End dispatching command", options)
        return outcome


def dispatch(command, command_namespace=Unset, request_params=Unset, options=Unset):
    """
    Dispatch through the process-wide configuration and registry.

    See Dispatcher.dispatch for parameters and return value.
    """
    return Dispatcher().dispatch(command, command_namespace, request_params, options)


__all__ = (
    "Dispatcher",
    "dispatch",
    "arguments",
)
