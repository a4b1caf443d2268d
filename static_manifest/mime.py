import typing

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES: typing.Mapping[str, str] = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "css": "text/css",
    "js": "application/javascript",
    "wasm": "application/wasm",
}


def mime_type_from_extension(extension: str) -> str:
    # Accept both "css" and ".css".
    return MIME_TYPES.get(extension.lstrip(".").lower(), DEFAULT_MIME_TYPE)
