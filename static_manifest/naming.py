"""
Derivation of namespace paths and record identifiers from filesystem paths.

Path separators are normalised to ``/`` and the characters which may not
appear in an identifier (``.`` and ``-``) are replaced with ``_``.

"""
import pathlib
import typing

from .errors import InvalidAssetPath


def _segments(rel_path: typing.Union[str, pathlib.PurePath]) -> list[str]:
    text = str(rel_path).replace("\\", "/")
    return [part for part in text.split("/") if part and part != "."]


def sanitize(name: str) -> str:
    return name.replace(".", "_").replace("-", "_")


def module_path(rel_path: typing.Union[str, pathlib.PurePath]) -> str:
    """Return the normalised namespace path, e.g. ``js-lib/v1.2`` -> ``js_lib/v1_2``."""
    return "/".join(sanitize(segment) for segment in _segments(rel_path))


def namespace_segments(rel_path: typing.Union[str, pathlib.PurePath]) -> tuple[str, ...]:
    return tuple(sanitize(segment) for segment in _segments(rel_path))


def scope_name(rel_path: typing.Union[str, pathlib.PurePath]) -> str:
    """The name of the scope for a directory, taken from its final component."""
    segments = _segments(rel_path)
    if not segments:
        return ""
    return sanitize(segments[-1])


def identifier_for(file_name: str) -> str:
    return sanitize(file_name.replace("/", "_").replace("\\", "_"))


def qualify(namespace: typing.Iterable[str], identifier: str, separator: str) -> str:
    """Join the non-empty namespace segments and the identifier with ``separator``."""
    return separator.join([*(segment for segment in namespace if segment), identifier])


def check_identifier(name: str, path: pathlib.Path) -> str:
    if not name.isidentifier():
        raise InvalidAssetPath(
            f"{str(path)!r} produces {name!r}, which is not a valid identifier",
            path=path,
        )
    return name
