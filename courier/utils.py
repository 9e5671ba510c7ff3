"""
Courier utilities (internal helpers, carefully exposed)

Scope
- Building blocks shared by the namespace formatter, the registry and the dispatcher.
- Public-but-internal leaning: stable enough for consumers, designed primarily to
  support the higher-level layers.

Overview
- UnsetType / Unset
  • Singleton sentinel for “value not provided” without conflating it with None.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; falsey values like None/0/""/[] are kept.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables.

- trim_all / underscore / titleize / camelize
  • Locale-free inflections used to turn routes and loose names into qualified
    command names ("/api/app_name/v1" → "Api::AppName::V1").

- array_wrap(value)
  • None → [], list/tuple → list, anything else → [value].

- mglob(pattern)
  • Module globbing: expands "pkg.**.commands" style patterns into importable module names.
"""
import builtins
import functools
import importlib
import pkgutil
import re
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None   # None is preserved, not replaced
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - rename(name)           -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


_WHITESPACE = re.compile(r"\s+")
_HUMPS = re.compile(r"([A-Z]+)(?=[A-Z][a-z])|([a-z\d])(?=[A-Z])")
_ROUTE_SEPARATORS = re.compile(r"[/\-.:]+")


def trim_all(text, /):
    """
    Remove every run of whitespace (Unicode aware), leading, trailing and embedded.

    - trim_all(" Api :: V1 ") -> "Api::V1"
    """
    return _WHITESPACE.sub("", text)


def underscore(word, /):
    """
    snake_case a camel-cased word: humps become underscores, hyphens become
    underscores, everything is lowercased.

    - underscore("AppName") -> "app_name"
    - underscore("HTTPServer") -> "http_server"
    - underscore("aPi") -> "a_pi"
    """
    word = _HUMPS.sub(lambda match: (match.group(1) or match.group(2)) + "_", word)
    return word.replace("-", "_").lower()


def titleize(word, /):
    """
    Capitalize every word of a loosely written name.

    Words are split on underscores, camel humps and whitespace; each word gets an
    upper-cased first letter and a lower-cased rest. Words are joined with single
    spaces, so callers that need an identifier strip them with trim_all().

    - titleize("app_name") -> "App Name"
    - titleize("appName")  -> "App Name"
    - titleize("v1")       -> "V1"
    """
    return " ".join(part.capitalize() for part in underscore(word).replace("_", " ").split())


def _pascalize(segment):
    return "".join(part.capitalize() for part in underscore(segment).split("_"))


def camelize(token, /):
    """
    Transform a route-like or namespace-like string into a qualified name.

    Whitespace is removed first, then every run of '/', '-', '.' or ':' acts as a
    separator. Each segment is snake_cased and then PascalCased; empty segments are
    dropped and the rest are joined with '::'.

    - camelize("/api/app_name/v1")        -> "Api::AppName::V1"
    - camelize("api::app::auth::v1")      -> "Api::App::Auth::V1"
    - camelize("api-app_name.auth/v1")    -> "Api::AppName::Auth::V1"
    - camelize("api app auth")            -> "Apiappauth"
    """
    if not isinstance(token, str):
        raise TypeError("Token is not a String")
    segments = map(_pascalize, _ROUTE_SEPARATORS.split(trim_all(token)))
    return "::".join(segment for segment in segments if segment)


def array_wrap(object, /):
    """
    Wrap a value into a list.

    - None            -> []
    - list / tuple    -> list(object)
    - anything else   -> [object]   (mappings and strings included)
    """
    if object is None:
        return []
    if isinstance(object, (list, tuple)):
        return list(object)
    return [object]


@functools.cache
def _compile_glob(pattern):
    """
    compile a dotted module glob into a regex.
    - '**' is a whole-segment wildcard for zero or more segments
    - '*' / '?' match within one segment (never across dots)
    """
    parts = []
    for segment in pattern.split("."):
        if segment == "**":
            parts.append(r"(?:\.[A-Za-z_]\w*)*")
            continue
        body = "".join(
            r"[^.]*" if char == "*" else r"[^.]" if char == "?" else re.escape(char)
            for char in segment
        )
        parts.append(r"\." + body)
    return re.compile("".join(parts)[2:])


def mglob(source, /):
    """
    Expand a dot-separated module glob into fully-qualified module names.

    Rules
    - the pattern must start with at least one concrete segment.
    - matches are case-sensitive and returned in sorted order.
    - without wildcards, [source] is returned untouched.
    - an unimportable prefix yields no matches.

    Examples
    - "myapp.commands.*"      → direct children of myapp.commands
    - "myapp.**.v1"           → any v1 subpackage under myapp
    """
    if not isinstance(source, str):
        raise TypeError("mglob() argument must be a string")
    elif not (source := source.strip()):
        raise ValueError("mglob() argument must be a non-empty string")

    if re.fullmatch(r"(?!\d)\w+(\.(?!\d)\w+)*", source):
        return [source]

    prefixes = []
    for segment in source.split("."):
        if not re.fullmatch(r"(?!\d)\w+", segment):
            break
        prefixes.append(segment)

    if not prefixes:
        raise ValueError("mglob() pattern must start with a concrete package segment")

    try:
        package = importlib.import_module(prefix := ".".join(prefixes))
    except ImportError:
        return []

    pattern = _compile_glob(source)
    matches = {prefix} if pattern.fullmatch(prefix) else set()

    if hasattr(package, "__path__"):
        for metadata in pkgutil.walk_packages(package.__path__, prefix + "."):
            if pattern.fullmatch(metadata.name):
                matches.add(metadata.name)

    return sorted(matches)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value (request
parameters, for one) but “no input” still has to be told apart.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "trim_all",
    "underscore",
    "titleize",
    "camelize",
    "array_wrap",
    "mglob",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
