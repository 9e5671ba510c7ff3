"""
Process-wide dispatcher configuration.

Settings
- allow_custom_commands: when False (default) only CommandCallable subclasses may be
  dispatched; when True any object exposing a class-level `call` is accepted.
- logger: sink used for diagnostic output. Anything exposing debug()/error() works;
  the default is the "courier" stdlib logger rendered through a rich stderr console.

Lifecycle
- configuration() lazily builds the shared instance.
- configure(...) mutates it (keyword settings and/or a callback receiving it).
- reset() restores defaults.

Writes are not synchronized. Configure once at start-up, before dispatching from
several threads; concurrent reads are fine.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

from .utils import Unset

console = Console(stderr=True)


def default_logger():
    """
    return the "courier" logger, attaching a rich handler the first time.
    """
    logger = logging.getLogger("courier")
    if not logger.handlers:
        logger.addHandler(RichHandler(console=console, show_path=False))
        logger.setLevel(logging.DEBUG)
    return logger


class Configuration:
    __settings__ = ("allow_custom_commands", "logger")

    def __init__(self, **settings):
        self.reset()
        self.update(**settings)

    def reset(self):
        """
        restore every setting to its default value.
        """
        self.allow_custom_commands = False
        self.logger = default_logger()

    def update(self, **settings):
        for name in settings:
            if name not in self.__settings__:
                raise TypeError(f"configuration got an unexpected setting {name!r}")
        for name, value in settings.items():
            setattr(self, name, value)
        return self

    def __rich_repr__(self):
        for name in self.__settings__:
            yield name, getattr(self, name)

    def __repr__(self):
        return "Configuration(%s)" % ", ".join("%s=%r" % item for item in self.__rich_repr__())


_configuration = Unset


def configuration():
    """
    return the process-wide configuration, creating it on first use.
    """
    global _configuration
    if _configuration is Unset:
        _configuration = Configuration()
    return _configuration


def configure(function=Unset, /, **settings):
    """
    Configure the process-wide dispatcher settings.

    Forms
    - configure(allow_custom_commands=True)
    - configure(lambda config: setattr(config, "logger", my_logger))
    - @configure
      def setup(config): ...

    Keyword settings are applied first, then the callback (if any) receives the
    configuration object.

    Returns
    - the callback when one is given (so the decorator form keeps the function),
    - otherwise the configuration.
    """
    config = configuration().update(**settings)
    if function is Unset:
        return config
    if not callable(function):
        raise TypeError("configure() argument must be callable")
    function(config)
    return function


def reset():
    """
    restore defaults on the process-wide configuration.
    """
    config = configuration()
    config.reset()
    return config


__all__ = (
    "Configuration",
    "configuration",
    "configure",
    "reset",
)
