"""Fetch a URL over plain HTTP/1.1 and copy the server's reply to a stream."""

from __future__ import annotations

import socket
import sys
from typing import BinaryIO, Sequence

_FALLBACK_HTTP_PORT = 80
_RECV_SIZE = 64 * 1024


def build_request(host: str, path: str) -> str:
    """Return the GET request sent for ``path`` on ``host``."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n\r\n"
    )


def _http_port() -> int:
    try:
        return socket.getservbyname("http", "tcp")
    except OSError:
        return _FALLBACK_HTTP_PORT


def get_url(host: str, path: str, out: BinaryIO | None = None) -> None:
    """Request ``path`` from ``host`` and write everything received to ``out``.

    The request itself is echoed first, then the reply is copied until the
    server closes the connection.
    """
    if out is None:
        out = sys.stdout.buffer
    request = build_request(host, path).encode("latin-1")
    with socket.create_connection((host, _http_port())) as conn:
        conn.sendall(request)
        out.write(b"Message: \r" + request)
        while chunk := conn.recv(_RECV_SIZE):
            out.write(chunk)
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``webget HOST PATH``."""
    prog = "webget"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(f"Usage: {prog} HOST PATH\n")
        sys.stderr.write(f"\tExample: {prog} stanford.edu /class/cs144\n")
        return 1
    host, path = args
    try:
        get_url(host, path)
    except Exception as exc:  # report any failure the way the command line expects
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())