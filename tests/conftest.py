import os
import sys

import httpx
import pytest
import structlog

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class RecordingClient:
    """Transporte falso: devuelve una respuesta fija y guarda lo enviado."""

    def __init__(self, status=200, content=b'', base_url='https://api.example.com'):
        self.status = status
        self.content = content
        self.base_url = base_url
        self.sent = []

    def base(self):
        return self.base_url

    async def send(self, request):
        self.sent.append(request)
        return httpx.Response(self.status, content=self.content, request=request)


class FailingClient:
    def __init__(self, error):
        self.error = error
        self.calls = 0

    def base(self):
        return 'https://api.example.com'

    async def send(self, request):
        self.calls += 1
        raise self.error


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_request():
    def _make(method='GET', url='https://api.example.com/items', content=b'', headers=None):
        return httpx.Request(method, url, content=content, headers=headers)
    return _make
