# webget

A small command-line tool and library function that connects to the `http`
service of a host, sends a minimal HTTP/1.1 `GET` request with
`Connection: close`, and copies everything the server sends back until the
server closes the connection.

## Installation

```
pip install .
```

## Command-line use

```
webget HOST PATH
```

For example:

```
webget example.com /index.html
```

The request text is echoed first, prefixed with `Message: \r`, then the raw
server response (status line, headers and body) is written unchanged to
standard output. With a wrong number of arguments a usage message goes to
standard error and the exit status is 1. Any error while connecting or
reading is written to standard error, also with exit status 1.

The port is the one the system lists for the `http` service over TCP, or 80
if the system has no such entry.

## Library use

```python
import sys
from webget.client import build_request, get_url

print(build_request("example.com", "/"))
get_url("example.com", "/", sys.stdout.buffer)
```

- `build_request(host, path)` returns the request as a string.
- `get_url(host, path, out=None)` performs the request and writes the echoed
  request and the raw reply as bytes to the binary stream `out`; when `out`
  is not given it writes to `sys.stdout.buffer`. Connection errors are
  raised as `OSError`.
- `main(argv=None)` is the command-line entry point; it reads `sys.argv`
  when `argv` is not given and returns the exit status.

## What it does not do

The reply is not parsed or decoded in any way. There is no HTTPS, no
redirect following, no chunked-transfer decoding, no timeouts and no
choice of port.

## Running the tests

```
pip install ".[test]"
pytest
```