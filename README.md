# monolith

Building blocks for a tool that saves a web page as a single, self-contained
HTML document: an asset cache, a Netscape cookie-file reader, media-type and
Content-Type helpers, domain matching, and run options with diagnostic output.

The package has no third-party dependencies.

## Installation

```
pip install .
```

## Asset cache (`monolith.cache`)

`Cache(min_file_size, db_file_path)` stores assets together with their media
type and charset. When `db_file_path` is given and an SQLite database can be
opened there, assets larger than `min_file_size` bytes are written to it;
everything else, or everything when no database is in use, stays in memory.
The `db_ok` property tells whether the database is in use.

```python
from monolith.cache import Cache, CacheMissError

cache = Cache(0, None)
cache.set("https://example.com/style.css", b"body{}", "text/css", "UTF-8")

if "https://example.com/style.css" in cache:
    data, media_type, charset = cache.get("https://example.com/style.css")

try:
    cache.get("https://example.com/missing.png")
except CacheMissError:
    pass
```

`CacheMissError` is a subclass of `KeyError`. `destroy_database_file()` closes
the database, stops using it, and overwrites its file with zero bytes; it does
nothing when no database is in use.

## Cookies (`monolith.cookies`)

`parse_cookie_file_contents(text)` reads Netscape-format cookie files. The
first line must be `# HTTP Cookie File` or `# Netscape HTTP Cookie File`;
other lines starting with `#` are skipped, as are lines that do not have
exactly seven tab-separated fields. Domains are lower-cased.

```python
from monolith.cookies import parse_cookie_file_contents

with open("cookies.txt") as handle:
    cookies = parse_cookie_file_contents(handle.read())

for cookie in cookies:
    if not cookie.is_expired() and cookie.matches_url("https://example.com/"):
        print(cookie.name, cookie.value)
```

`CookieFileContentsParseError` (a `ValueError`) is raised for a wrong header
line or an expiry field that is not a whole number. A `Cookie` with
`expires == 0` is a session cookie and never expires. `matches_url` accepts
only `http` and `https` URLs, refuses `http` for HTTPS-only cookies, and
checks host and path.

## Media types and domains (`monolith.media`)

```python
from monolith.media import (
    detect_media_type,
    detect_media_type_by_file_name,
    domain_is_within_domain,
    is_plaintext_media_type,
    parse_content_type,
)

detect_media_type(b"GIF89a...", "https://example.com/pic")  # "image/gif"
detect_media_type_by_file_name("photo.JPG")                  # "image/jpeg"
detect_media_type_by_file_name("archive.xyz")                # ""
parse_content_type("text/html; charset=utf-8")               # ("text/html", "utf-8", False)
parse_content_type("")                                       # ("text/plain", "US-ASCII", False)
is_plaintext_media_type("application/json")                  # True
domain_is_within_domain("www.example.com", ".example.com")   # True
domain_is_within_domain("example.com", ".")                  # True
```

`detect_media_type` checks the data against known file signatures first and
falls back to the extension of the last path segment of the URL.

## Options and messages (`monolith.options`)

`Options` is a dataclass holding the settings for one run: which asset kinds
to leave out (`no_css`, `no_fonts`, `no_frames`, `no_images`, `no_js`,
`no_audio`, `no_video`), `domains` with `blacklist_domains`, `cookies`,
`base_url`, `encoding`, `timeout`, `user_agent`, `isolate`,
`unwrap_noscript`, `no_metadata`, `ignore_errors`, `insecure`, `silent` and
`output_format` (`OutputFormat.HTML`).

`print_info_message(text, options)` and `print_error_message(text, options)`
write a line to standard error unless `options.silent` is set. Error lines
are red only when standard error is a terminal, `NO_COLOR` is not set, and
`TERM` is not `dumb`. `read_stdin()` returns all of standard input as bytes.
`MonolithError` is an exception type whose message is its `details`.

## What this package does not do

It does not fetch pages or assets over the network, parse or rewrite HTML,
embed CSS, scripts or images, or write out a finished document, and it has no
command-line program. It provides the pieces listed above for such a tool.

## Running the tests

```
pip install .[test]
pytest
```