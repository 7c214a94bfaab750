"""Fixtures for session provider and gate tests."""

import pytest
from starlette.requests import Request


@pytest.fixture
def build_request():
    """Factory for bare Starlette requests with optional cookies and headers."""

    def _build(path="/en/dashboard", cookies=None, headers=None):
        raw_headers = []
        if cookies:
            cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
            raw_headers.append((b"cookie", cookie_header.encode()))
        for name, value in (headers or {}).items():
            raw_headers.append((name.lower().encode(), value.encode()))
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": raw_headers,
        }
        return Request(scope)

    return _build
