"""
Courier command layer: the conforming command contract and its error collection.

What this module provides
- CommandCallable: base class for commands that follow courier's calling convention.
  • Subclasses implement `__init__` (receiving the request parameters) and `call()`
    (the single execution method, taking no arguments besides self).
  • `Cmd.call(*args, **kwargs)` on the class is a factory: it builds a fresh instance
    with the given arguments, executes it and returns the instance.
  • `instance.call()` executes the body once, stores its return value in `result` and
    returns the instance; a second call raises CommandAlreadyCalledError.
  • `success` is True when called without errors; `failure` when called with errors.
    Before the call both are False.

- Errors: ordered, duplicate-suppressing collection of messages keyed by field.

Quick start
    from courier import CommandCallable, register

    @register(namespace="Api::V1")
    class Authenticate(CommandCallable):
        def __init__(self, email, password):
            self.email = email
            self.password = password

        def call(self):
            if self.password != "secret":
                self.errors.add("password", "is invalid")
                return None
            return {"email": self.email}

    command = Authenticate.call(email="a@b.com", password="secret")
    command.success  # True
    command.result   # {"email": "a@b.com"}

Design notes
- The metaclass wraps whatever `call` a class body defines into a descriptor that
  dispatches on class vs instance access, so the class-level factory and the
  instance-level execution share one public name.
- Exceptions raised by `call()` are not caught: the instance is marked called and
  the exception reaches the caller untouched.
"""
import functools
import inspect
from collections.abc import Mapping

from .faults import CommandAlreadyCalledError
from .utils import array_wrap, rename


class Errors(Mapping):
    """
    Error collection for conforming commands.

    Maps a field name (or the sentinel Errors.BASE) to the ordered list of unique
    messages recorded for it. Adding the same (field, message) twice keeps one copy.

    Example
        errors.add("email", "is required")
        errors.add("base", "Something went wrong")
        errors.full_messages()  # ['Email is required', 'Something went wrong']
    """
    BASE = "base"

    def __init__(self):
        self._messages = {}

    def __getitem__(self, field):
        return list(self._messages[field])

    def __iter__(self):
        return iter(self._messages)

    def __len__(self):
        return len(self._messages)

    def add(self, field, message, /):
        """
        append message to field unless it is already recorded; return the field's messages.
        """
        messages = self._messages.setdefault(field, [])
        if message not in messages:
            messages.append(message)
        return list(messages)

    def add_multiple(self, errors, /):
        """
        add every message of a {field: message | [messages] | None} mapping.

        None contributes nothing and does not create the field.
        """
        for field, values in errors.items():
            for value in array_wrap(values):
                self.add(field, value)

    add_multiple_errors = add_multiple

    def pairs(self):
        """
        yield (field, message) for every message, in insertion order.
        """
        for field, messages in self._messages.items():
            for message in messages:
                yield field, message

    def full_message(self, field, message, /):
        if field == self.BASE:
            return message
        return f"{str(field).replace('.', '_').capitalize()} {message}"

    def full_messages(self):
        return [self.full_message(field, message) for field, message in self.pairs()]

    def any(self):
        return bool(self._messages)

    def clear(self):
        self._messages.clear()

    def __rich_repr__(self):
        for field, messages in self._messages.items():
            yield str(field), list(messages)

    def __repr__(self):
        return f"Errors({self._messages!r})"


def _execute(self, function):
    if self._called:
        raise CommandAlreadyCalledError(self)
    self._called = True
    self._executing = True
    try:
        self._result = function(self)
    finally:
        self._executing = False
    return self


class _Entry:
    """
    Descriptor installed in place of a command's `call`.

    - class access: factory that instantiates with the given arguments and executes.
    - instance access: bound execution that tracks state and returns the instance.
    - instance access during that execution (super().call()): the plain bound body.
    """

    def __init__(self, function):
        self.function = function
        functools.update_wrapper(self, function)

    def __get__(self, instance, owner=None):
        if instance is None:
            @rename("call")
            def factory(*args, **kwargs):
                return owner(*args, **kwargs).call()
            factory.__doc__ = self.function.__doc__
            return factory
        if instance._executing:
            return self.function.__get__(instance, owner)
        return functools.partial(_execute, instance, self.function)


class CommandType(type):
    """
    Metaclass for conforming commands.

    Responsibilities
    - Replace the `call` defined in a class body by an _Entry descriptor.
    - Provide a stable __repr__/__rich_repr__ pair on instances showing the outcome.
    """

    def __new__(cls, name, bases, namespace, **options):
        if "call" in namespace and not isinstance(namespace["call"], _Entry):
            namespace["call"] = _Entry(namespace["call"])
        return super().__new__(cls, name, bases, namespace, **options)


class CommandCallable(metaclass=CommandType):
    _called = False
    _executing = False
    _result = None

    def call(self):
        """
        Execute the command and return its result value.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement call()")

    @property
    def result(self):
        return self._result

    @property
    def called(self):
        return self._called

    @property
    def errors(self):
        try:
            return self.__dict__["_errors"]
        except KeyError:
            return self.__dict__.setdefault("_errors", Errors())

    @property
    def success(self):
        return self.called and not self.failure

    successful = success

    @property
    def failure(self):
        return self.called and self.errors.any()

    def __rich_repr__(self):
        yield "result", self.result
        yield "success", self.success
        yield "errors", self.errors

    def __repr__(self):
        return f"{type(self).__name__}({', '.join('%s=%r' % item for item in self.__rich_repr__())})"


def conforms(object, /):
    """
    return True when object is a CommandCallable subclass.
    """
    return isinstance(object, type) and issubclass(object, CommandCallable)


def entry_point(object, /):
    """
    Return the public class-level `call` of object, or None when it has none.

    Accepted
    - CommandCallable subclasses (the generated factory),
    - classes with a classmethod/staticmethod or callable attribute named `call`,
    - non-class objects (modules, instances) exposing a callable `call`.

    Rejected
    - classes whose `call` is a plain instance method.
    """
    try:
        static = inspect.getattr_static(object, "call")
    except AttributeError:
        return None
    if isinstance(object, type) and inspect.isfunction(static):
        return None
    entry = getattr(object, "call")
    return entry if callable(entry) else None


__all__ = (
    "CommandCallable",
    "Errors",
    "conforms",
    "entry_point",
)
