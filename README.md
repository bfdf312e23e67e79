# easyreq

Small, dependency-free value types for describing HTTP requests and for
reading the raw header and cookie data that comes back.

## Modules

- `easyreq.types`
  - `Url` and `Body`: string holders. They can be built from nothing, from a
    string, from a string and a length (the first `length` characters), or
    from several strings that are joined in order. They support `+`, `+=`,
    `len()`, `str()`, and comparison with plain strings.
  - `Header`: a mutable mapping whose keys are compared without regard to
    case. A key keeps the spelling it had when first inserted. Iteration
    runs in case-insensitive sorted order. Reading a missing key returns `""`
    instead of raising.
  - `case_insensitive_less(a, b)`: the ordering used for header keys.
- `easyreq.auth`: `Authentication(username, password)`, whose `str()` and
  `auth_string` are `username:password`. `Digest` is a subclass of it.
  `Bearer(token)` holds a bearer token.
- `easyreq.options`
  - `Timeout` and `ConnectTimeout`: take an integer number of milliseconds
    or a `datetime.timedelta`. `milliseconds()` raises `OverflowError` when
    the value lies outside the signed 64-bit range.
  - `UnixSocket(path)`: the path of a Unix domain socket.
  - `LimitRate(downrate, uprate)`: limits in bytes per second.
  - `HttpVersionCode` and `HttpVersion`: the HTTP version to use. The
    default is `VERSION_NONE`.
  - `Redirect(maximum=50, follow=True, cont_send_cred=False,
    post_flags=PostRedirectFlags.POST_ALL)`: the redirect policy. A
    `maximum` of 0 refuses all redirects; -1 allows any number.
  - `PostRedirectFlags`: an `IntFlag` with `POST_301`, `POST_302`,
    `POST_303`, `POST_ALL` and `NONE`. `any_flags(flag)` tells whether any
    flag is set.
- `easyreq.callback`: `ReadCallback`, `HeaderCallback`, `WriteCallback`,
  `ProgressCallback` and `DebugCallback`. Each one wraps a user function
  and passes its `userdata` value along on every call.
  - A `ReadCallback` returns at most `size` bytes, or `None` to abort.
    Returning more than `size` bytes raises `ValueError`.
  - The header, write and progress callbacks return a boolean; a false
    result means abort.
  - `DebugCallback` tags its data with an `InfoType`.
- `easyreq.multipart`: `File(filepath)`, `Buffer(data, filename)`,
  `Part(name, value, content_type="")` and `Multipart(parts)`.
  - A `Part` value may be a string, an integer (stored as its decimal
    string), a `File` or a `Buffer`.
  - `Multipart` accepts `Part` objects, or tuples that it passes as
    arguments to `Part`.
- `easyreq.util`
  - `parse_header(headers)` returns a `ParsedHeader` with the `header`
    fields, the `status_line` and the `reason`. Each `HTTP/` line starts a
    new response, so only the fields of the last response remain.
  - `parse_cookies(lines)` reads tab-separated cookie-jar lines into a
    `dict`.
  - `split(text, delimiter)` splits text; a single trailing empty field is
    dropped.
  - `url_encode(s)` and `url_decode(s)` handle UTF-8 percent-encoding.

## Installation

```
pip install .
```

## Examples

```python
from datetime import timedelta

from easyreq.auth import Authentication
from easyreq.multipart import File, Multipart, Part
from easyreq.options import Redirect, Timeout
from easyreq.types import Header, Url
from easyreq.util import parse_cookies, parse_header, url_decode, url_encode

url = Url("http://localhost:8080") + "/hello.html"
assert url == "http://localhost:8080/hello.html"

headers = Header({"Content-Type": "text/html"})
assert headers["content-type"] == "text/html"
assert headers["missing"] == ""

password = "password"
auth = Authentication("user", password)
assert str(auth) == "user:password"

redirect = Redirect(maximum=5)
assert Timeout(timedelta(seconds=2)).milliseconds() == 2000

parsed = parse_header("HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n")
assert parsed.header["content-type"] == "text/plain"
assert parsed.status_line == "HTTP/1.1 200 OK"
assert parsed.reason == "OK"

assert parse_cookies(["localhost\tFALSE\t/\tFALSE\t0\tflavour\tvanilla"]) == {"flavour": "vanilla"}

assert url_encode("Hello World!") == "Hello%20World%21"
assert url_decode("Hello%20World%21") == "Hello World!"

form = Multipart([("x", 5), Part("report", File("report.txt"))])
assert [part.value for part in form] == ["5", "report.txt"]
```

## What it does not do

easyreq only describes requests and parses header and cookie text. It does
not open connections or send requests. It has no session object and no
transport.

## Running the tests

```
pip install ".[test]"
pytest
```