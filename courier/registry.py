"""
Courier registry: the table mapping fully-qualified names to command objects.

Names are canonical qualified names ("Api::AppName::V1::Authenticate"). The table is
filled at start-up, either explicitly

    @register(namespace=["Api", "AppName", "V1"])
    class Authenticate(CommandCallable): ...

or by importing whole module trees with include(), where the module path becomes
the namespace:

    include("myapp.commands.**", root="myapp.commands")
    # myapp.commands.api.app_name.v1.Authenticate -> "Api::AppName::V1::Authenticate"

At dispatch time the table is only read; register everything before serving
concurrent traffic.
"""
import importlib
import inspect

from .commands import conforms, entry_point
from .faults import DuplicateCommandError, InvalidClassConstantError
from .namespaces import command_name, format_namespace
from .options import DispatchOptions
from .utils import coalesce, mglob, Unset


class Registry:
    def __init__(self):
        self._commands = {}

    def __len__(self):
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands)

    def __contains__(self, name):
        try:
            return command_name(name) in self._commands
        except (TypeError, ValueError):
            return False

    def __repr__(self):
        return f"Registry({list(self._commands)!r})"

    def names(self):
        return tuple(self._commands)

    def add(self, target, name, /):
        """
        Register target under name (canonicalized).

        Registering the same object twice under one name is a no-op; a different
        object under a taken name raises DuplicateCommandError.
        """
        key = command_name(name)
        existing = self._commands.get(key, Unset)
        if existing is not Unset and existing is not target:
            raise DuplicateCommandError(key)
        self._commands[key] = target
        return target

    def register(self, target=Unset, /, *, name=Unset, namespace=Unset):
        """
        Register a command, directly or as a decorator.

        Parameters
        - target: the command object (omit to get a decorator).
        - name: bare or qualified name; defaults to the target's __qualname__, so
          nested classes (class Api: class V1: class Auth) register as "Api::V1::Auth".
        - namespace: any namespace specification prefixed to the name.

        Returns
        - the target itself, or a decorator when target is omitted.
        """
        def wrapper(target, /):
            label = coalesce(name, getattr(target, "__qualname__", None))
            if label is None:
                raise TypeError("register() cannot infer a name; pass name=...")
            # functions and classes defined in a local scope carry '<locals>' in their qualname
            label = label.rsplit("<locals>.", 1)[-1]
            return self.add(target, format_namespace(namespace) + command_name(label))

        return wrapper(target) if target is not Unset else wrapper

    def discard(self, name, /):
        self._commands.pop(command_name(name), None)

    def clear(self):
        self._commands.clear()

    def lookup(self, name, /):
        """
        Return the object registered under the exact fully-qualified name.

        Raises
        - InvalidClassConstantError: carrying the attempted name and the reason.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise InvalidClassConstantError(name, f"no command is registered under {name!r}") from None

    def resolve(self, command, qualifier="", /, options=Unset):
        """
        Validate/transform the bare command name, prefix the qualifier and look it up.

        - registry.resolve("Authenticate", "Api::V1::") -> <class Authenticate>
        """
        options = DispatchOptions.coerce(options)
        return self.lookup(format_namespace(qualifier) + command_name(command, options))

    def include(self, source, /, *, root=Unset):
        """
        Import command modules and register every command class they define.

        Parameters
        - source: str
          Module glob pattern expanded via mglob(...) (e.g. "myapp.commands.**").
        - root: str (keyword-only)
          Package prefix removed from module names before they become namespaces.

        Behavior
        - A class is picked when it is defined in the module itself (not imported)
          and either derives from CommandCallable or exposes a class-level `call`.
        - Its name is the camelized module path (minus root) plus the class name.

        Returns
        - the list of registered command objects, in discovery order.

        Raises
        - TypeError: when source is not a string or a module cannot be imported.
        - DuplicateCommandError: when a name is already taken by another object.
        """
        if not isinstance(source, str):
            raise TypeError("include() argument must be a string")

        included = []
        for module_name in mglob(source):
            try:
                module = importlib.import_module(module_name)
            except ImportError as error:
                raise TypeError(f"unable to import module {module_name!r}") from error

            relative = module_name
            if root is not Unset and (module_name == root or module_name.startswith(root + ".")):
                relative = module_name[len(root) + 1:]
            qualifier = format_namespace(relative, {"module_camelize": True})

            for _, object in inspect.getmembers(module, inspect.isclass):
                if object.__module__ != module.__name__:
                    continue
                if not conforms(object) and entry_point(object) is None:
                    continue
                included.append(self.add(object, qualifier + object.__name__))
        return included


registry = Registry()
"""
Process-wide default registry used by the module-level register/include/dispatch.
"""

register = registry.register
include = registry.include


__all__ = (
    "Registry",
    "registry",
    "register",
    "include",
)
