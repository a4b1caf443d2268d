from __future__ import annotations

import json
import logging
import pathlib
import shutil
import typing

from .builder import build_manifest
from .model import Manifest
from .render import get_renderer

logger = logging.getLogger(__name__)


def generate(
    destination: pathlib.Path,
    asset_directories: typing.Sequence[pathlib.Path],
    extra_files: typing.Sequence[pathlib.Path],
    *,
    output_format: str = "python",
    **builder_options: typing.Any,
) -> Manifest:
    """
    Generate the manifest module for the given asset directories and extra files.

    The module is rendered entirely in memory and only then written to
    ``destination``. Any ``OSError`` raised during discovery therefore leaves
    the destination untouched. If the final write fails, the destination must
    be considered unusable.

    """
    renderer = get_renderer(output_format)
    manifest = build_manifest(asset_directories, extra_files, **builder_options)
    content = renderer.render(manifest)
    write_manifest(pathlib.Path(destination), content)
    logger.info("Wrote %d static files to %s", len(manifest), destination)
    return manifest


def write_manifest(destination: pathlib.Path, content: str) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    # Created with a plain open, so the umask applies as it would to the destination.
    tmp = destination.with_name(f".{destination.name}.tmp")
    try:
        with tmp.open("w", encoding="utf-8") as handle:
            handle.write(content)
        tmp.replace(destination)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def export_static_files(*, destination: pathlib.Path, manifest: Manifest) -> None:
    """Copy every file of the manifest to its hashed name under ``destination``."""
    # Useful for serving the static files via apache/nginx/etc.
    file_map: dict[str, dict[str, str]] = {"file-map": {}}

    for record in manifest.records:
        hashed_relpath = record.name[len(manifest.url_prefix):].lstrip("/")
        target = destination / hashed_relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy(record.file_name, target)
        file_map["file-map"][record.name] = record.file_name
        logger.debug("Copied %s to %s", record.file_name, target)

    with (destination / ".manifest.json").open("w", encoding="utf-8") as fh:
        json.dump(file_map, fh, indent=2)
    (destination / ".gitignore").write_text("*")
    logger.info("Exported %d static files to %s", len(manifest), destination)
