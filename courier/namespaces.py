"""
Namespace formatting: turn a loose namespace specification into a qualifier.

A namespace may be given as
- a string, already joined or route-like ("Api::AppName::V1", "/api/app_name/v1"),
- a list/tuple of fragments (["Api", "AppName", "V1"]; a fragment may itself be joined
  or a nested list/tuple, which is flattened),
- a mapping whose values, in insertion order, are the fragments (keys document only).

The canonical qualifier joins non-empty segments with '::' and keeps a trailing '::'
("Api::AppName::V1::"); an empty namespace yields "". Every run of '/', '-', '.' or ':'
separates segments, whitespace is dropped, and empty segments (from doubled separators,
None or blank fragments) are discarded. Re-formatting a qualifier returns it unchanged.
"""
import re
from collections.abc import Mapping

from . import utils
from .faults import ArgumentTypeError, EmptyCommandError
from .options import DispatchOptions
from .utils import trim_all, Unset

SEPARATOR = "::"

_SEPARATORS = re.compile(r"[/\-.:]+")


def segments(text, /, *, camelize=False, titleize=False):
    """
    Split a joined or route-like name into its non-empty segments.

    titleize runs before whitespace is stripped (so "app name" → "AppName"), camelize
    after it (so "app name" → "Appname").
    """
    for segment in _SEPARATORS.split(str(text)):
        if titleize:
            segment = utils.titleize(segment)
        segment = trim_all(segment)
        if camelize:
            segment = utils.camelize(segment)
        if segment:
            yield segment


def _blank(namespace):
    if namespace is Unset or namespace is None:
        return True
    if isinstance(namespace, str):
        return not namespace.strip()
    if isinstance(namespace, (Mapping, list, tuple)):
        return not namespace
    return False


def _flatten(fragments):
    for fragment in fragments:
        if isinstance(fragment, (list, tuple)):
            yield from _flatten(fragment)
        else:
            yield fragment


def _fragments(namespace):
    if isinstance(namespace, str):
        return [namespace]
    if isinstance(namespace, Mapping):
        return list(_flatten(namespace.values()))
    if isinstance(namespace, (list, tuple)):
        return list(_flatten(namespace))
    raise ArgumentTypeError(
        "Argument command_namespace is not a String, Hash or Array.",
        argument="command_namespace"
    )


def format_namespace(namespace=Unset, /, options=Unset):
    """
    Produce the canonical qualifier for a namespace specification.

    Examples
    - format_namespace("Api")                                   -> "Api::"
    - format_namespace(["Api", "AppName", "V1"])                -> "Api::AppName::V1::"
    - format_namespace({"api": "Api", "version": "V1"})         -> "Api::V1::"
    - format_namespace("/api/app_name/v1", {"camelize": True})  -> "Api::AppName::V1::"
    - format_namespace(None) / ("") / ([]) / ({})                -> ""

    Raises
    - ArgumentTypeError: when namespace is not a string, list/tuple or mapping.
    """
    options = DispatchOptions.coerce(options)
    if _blank(namespace):
        return ""
    parts = [
        segment
        for fragment in _fragments(namespace) if fragment is not None
        for segment in segments(fragment, camelize=options.module_camelize, titleize=options.module_titleize)
    ]
    return SEPARATOR.join(parts) + SEPARATOR if parts else ""


def command_name(command, /, options=Unset):
    """
    Validate and transform the bare command name.

    The command may already carry qualifiers ("Api::V1::Authenticate") or be a route
    ("/api/v1/authenticate" with class_camelize).

    Raises
    - ArgumentTypeError: command is not a string.
    - EmptyCommandError: command is blank, or has no segment left after transformation.
    """
    if not isinstance(command, str):
        raise ArgumentTypeError(
            "Argument command is not a String. command must name the command class to call.",
            argument="command"
        )
    if not command.strip():
        raise EmptyCommandError("Argument command is empty.")

    options = DispatchOptions.coerce(options)
    parts = list(segments(command, camelize=options.class_camelize, titleize=options.class_titleize))
    if not parts:
        raise EmptyCommandError(f"Argument command {command!r} has no name segments.")
    return SEPARATOR.join(parts)


def qualify(command, command_namespace=Unset, /, options=Unset):
    """
    Return the fully-qualified name (qualifier + command) without resolving it.

    - qualify("Authenticate", ["Api", "AppName", "V1"]) -> "Api::AppName::V1::Authenticate"
    """
    options = DispatchOptions.coerce(options)
    name = command_name(command, options)
    return format_namespace(command_namespace, options) + name


__all__ = (
    "SEPARATOR",
    "segments",
    "format_namespace",
    "command_name",
    "qualify",
)
