"""Media type detection, Content-Type parsing and domain matching."""

from __future__ import annotations

from urllib.parse import urlsplit

# Magic signatures are compared byte for byte, the dots included.
_FILE_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    # Image
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\xFF\xD8\xFF", "image/jpeg"),
    (b"\x89PNG\x0D\x0A\x1A\x0A", "image/png"),
    (b"<svg ", "image/svg+xml"),
    (b"RIFF....WEBPVP8 ", "image/webp"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    # Audio
    (b"ID3", "audio/mpeg"),
    (b"\xFF\x0E", "audio/mpeg"),
    (b"\xFF\x0F", "audio/mpeg"),
    (b"OggS", "audio/ogg"),
    (b"RIFF....WAVEfmt ", "audio/wav"),
    (b"fLaC", "audio/x-flac"),
    # Video
    (b"RIFF....AVI LIST", "video/avi"),
    (b"....ftyp", "video/mp4"),
    (b"\x00\x00\x01\x0B", "video/mpeg"),
    (b"....moov", "video/quicktime"),
    (b"\x1A\x45\xDF\xA3", "video/webm"),
)

_EXTENSION_MEDIA_TYPES: dict[str, str] = {
    "avi": "video/avi",
    "bmp": "image/bmp",
    "css": "text/css",
    "flac": "audio/flac",
    "gif": "image/gif",
    "htm": "text/html",
    "html": "text/html",
    "ico": "image/x-icon",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "js": "application/javascript",
    "json": "application/json",
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
    "m4v": "video/mp4",
    "ogg": "audio/ogg",
    "ogv": "video/ogg",
    "pdf": "application/pdf",
    "png": "image/png",
    "svg": "image/svg+xml",
    "swf": "application/x-shockwave-flash",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "txt": "text/plain",
    "wav": "audio/wav",
    "webp": "image/webp",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "xml": "text/xml",
}

_PLAINTEXT_MEDIA_TYPES = frozenset(
    {
        "application/javascript",
        "application/json",
        "image/svg+xml",
    }
)


def detect_media_type(data: bytes, url: str) -> str:
    """Guess the media type of ``data``, first by signature, then by URL file name."""
    for signature, media_type in _FILE_SIGNATURES:
        if data.startswith(signature):
            return media_type

    path = urlsplit(str(url)).path
    return detect_media_type_by_file_name(path.split("/")[-1])


def detect_media_type_by_file_name(filename: str) -> str:
    """Return the media type for the file name's extension, or an empty string."""
    extension = filename.lower().split(".")[-1]
    return _EXTENSION_MEDIA_TYPES.get(extension, "")


def _reversed_labels(domain: str) -> list[str]:
    return domain.rstrip(".").split(".")[::-1]


def domain_is_within_domain(domain: str, domain_to_match_against: str) -> bool:
    """Return True if ``domain`` falls within ``domain_to_match_against``.

    A pattern starting with a dot also matches subdomains; "." matches everything.
    """
    if not domain_to_match_against:
        return False
    if domain_to_match_against == ".":
        return True

    labels = _reversed_labels(domain)
    pattern_labels = _reversed_labels(domain_to_match_against)
    pattern_starts_with_dot = domain_to_match_against.startswith(".")

    for i in range(max(len(labels), len(pattern_labels))):
        if not pattern_starts_with_dot and i >= len(pattern_labels):
            return False

        label = labels[i] if i < len(labels) else ""
        pattern_label = pattern_labels[i] if i < len(pattern_labels) else ""

        if pattern_label and pattern_label.lower() != label.lower():
            return False

    return True


def is_plaintext_media_type(media_type: str) -> bool:
    """Return True if the media type denotes textual content."""
    lowered = media_type.lower()
    return lowered.startswith("text/") or lowered in _PLAINTEXT_MEDIA_TYPES


def parse_content_type(content_type: str) -> tuple[str, str, bool]:
    """Split a Content-Type value into ``(media_type, charset, is_base64)``."""
    media_type = "text/plain"
    charset = "US-ASCII"
    is_base64 = False

    first, *parameters = content_type.split(";")
    if first.strip():
        media_type = first.strip()

    for parameter in parameters:
        item = parameter.strip()
        if item.lower() == "base64":
            is_base64 = True
        elif item.startswith("charset="):
            charset = item[len("charset="):]

    return media_type, charset, is_base64