from __future__ import annotations

import fnmatch
import logging
import pathlib
import typing

from . import hashing, naming
from .errors import InvalidAssetPath
from .mime import mime_type_from_extension
from .model import Manifest, NamespaceScope, RecordReference, StaticRecord

logger = logging.getLogger(__name__)


def _path_text(path: pathlib.Path) -> str:
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidAssetPath(f"{text!r} is not a valid UTF-8 path", path=path) from None
    return text


def normalize_url_prefix(url_prefix: str) -> str:
    stripped = url_prefix.strip("/")
    return f"/{stripped}" if stripped else ""


class ManifestBuilder:
    """
    Discover static files and collect them into a :class:`Manifest`.

    Asset directories are walked recursively, each subdirectory opening a
    namespace scope. Extra files are always declared in the root namespace.
    Nothing is written to disk: rendering happens once discovery has fully
    succeeded, so an error never leaves a partial output behind.

    """
    def __init__(
        self,
        *,
        url_prefix: str = "/static",
        hash_algorithm: str = "md5",
        hash_length: typing.Optional[int] = None,
        ignore_patterns: typing.Sequence[str] = (),
    ) -> None:
        hashing.check_algorithm(hash_algorithm)
        if hash_length is not None and hash_length < 1:
            raise ValueError(f"hash_length must be positive, got {hash_length}")
        self.url_prefix = normalize_url_prefix(url_prefix)
        self.hash_algorithm = hash_algorithm
        self.hash_length = hash_length
        self.ignore_patterns = tuple(ignore_patterns)
        self.root = NamespaceScope(name="")

    def build(self) -> Manifest:
        return Manifest(root=self.root, url_prefix=self.url_prefix)

    def add_directory(self, asset_dir: pathlib.Path) -> None:
        """Walk ``asset_dir``, declaring its top level files in the root namespace."""
        if not asset_dir.is_dir():
            raise InvalidAssetPath(f"Asset directory {str(asset_dir)!r} is not a directory", path=asset_dir)
        logger.debug("Walking asset directory %s", asset_dir)
        self._walk(asset_dir, base_dir=asset_dir, scope=self.root)

    def add_extra_file(self, path: pathlib.Path) -> RecordReference:
        # The file is relative to its own parent, so it never gets a namespace.
        return self.add_file(path, base_dir=path.parent, scope=self.root)

    def add_file(
        self,
        path: pathlib.Path,
        base_dir: pathlib.Path,
        scope: NamespaceScope,
    ) -> RecordReference:
        record = self.create_record(path, base_dir)
        scope.add(record)
        logger.debug("Declared %s as %s", record.file_name, record.name)
        return RecordReference(scope.path, record.identifier)

    def create_record(self, path: pathlib.Path, base_dir: pathlib.Path) -> StaticRecord:
        if not path.name or not path.suffix:
            raise InvalidAssetPath(f"{str(path)!r} has no file extension", path=path)
        file_name = _path_text(path.resolve(strict=True))
        file_hash = hashing.file_digest(path, self.hash_algorithm, self.hash_length)

        rel_dir = path.relative_to(base_dir).parent
        rel_dir_str = _path_text(rel_dir).replace("\\", "/")
        hashed_name = f"{path.stem}-{file_hash}{path.suffix}"
        if rel_dir_str in ("", "."):
            url_path = f"{self.url_prefix}/{hashed_name}"
        else:
            url_path = f"{self.url_prefix}/{rel_dir_str}/{hashed_name}"

        identifier = naming.check_identifier(naming.identifier_for(path.name), path)
        return StaticRecord(
            identifier=identifier,
            file_name=file_name,
            name=url_path,
            mime=mime_type_from_extension(path.suffix),
        )

    def _is_ignored(self, path: pathlib.Path) -> bool:
        return any(fnmatch.fnmatch(path.name, pattern) for pattern in self.ignore_patterns)

    def _walk(
        self,
        directory: pathlib.Path,
        base_dir: pathlib.Path,
        scope: NamespaceScope,
    ) -> None:
        rel_path = directory.relative_to(base_dir)
        if naming.namespace_segments(rel_path):
            name = naming.check_identifier(naming.scope_name(rel_path), directory)
            scope = scope.child(name, location=directory)
            logger.debug("Entering namespace %s", naming.module_path(rel_path))

        # Sorted, so that repeated runs produce identical output.
        subdirectories = []
        for entry in sorted(directory.iterdir()):
            if self._is_ignored(entry):
                logger.debug("Ignoring %s", entry)
            elif entry.is_dir():
                if entry.is_symlink():
                    raise InvalidAssetPath(
                        f"Symlinked directory {str(entry)!r} is not supported in an asset directory",
                        path=entry,
                    )
                subdirectories.append(entry)
            elif entry.is_file():
                self.add_file(entry, base_dir=base_dir, scope=scope)
            else:
                logger.debug("Skipping %s (not a regular file)", entry)

        for subdirectory in subdirectories:
            self._walk(subdirectory, base_dir=base_dir, scope=scope)


def build_manifest(
    asset_directories: typing.Sequence[pathlib.Path],
    extra_files: typing.Sequence[pathlib.Path],
    **builder_options: typing.Any,
) -> Manifest:
    builder = ManifestBuilder(**builder_options)
    for asset_dir in asset_directories:
        builder.add_directory(pathlib.Path(asset_dir))
    for extra_file in extra_files:
        builder.add_extra_file(pathlib.Path(extra_file))
    return builder.build()
