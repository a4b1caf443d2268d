import pathlib
import typing


class ManifestError(ValueError):
    def __init__(
        self,
        msg: str,
        path: typing.Optional[pathlib.Path] = None,
    ) -> None:
        super().__init__(msg)
        self.path = path


class DuplicateIdentifier(ManifestError):
    """Two declarations would share one name in the same namespace."""


class InvalidAssetPath(ManifestError):
    """A path which cannot be turned into a manifest record or namespace."""
