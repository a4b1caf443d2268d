import hashlib
import pathlib
import typing

_CHUNK_SIZE = 64 * 1024


def check_algorithm(algorithm: str) -> None:
    if algorithm not in hashlib.algorithms_available:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    if algorithm.startswith("shake_"):
        # Variable length digests have no default hexdigest size.
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")


def file_digest(
    path: pathlib.Path,
    algorithm: str = "md5",
    length: typing.Optional[int] = None,
) -> str:
    """
    Compute the lowercase hex digest of the contents of ``path``.

    The digest only serves cache-busting, so MD5 is an acceptable default.
    When ``length`` is given the digest is truncated to that many characters.
    Any failure to open or read the file is raised as an ``OSError``.

    """
    digest = hashlib.new(algorithm)
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    hexdigest = digest.hexdigest()
    if length is not None:
        hexdigest = hexdigest[:length]
    return hexdigest
