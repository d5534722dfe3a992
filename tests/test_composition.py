import httpx
import pytest
from pydantic import SecretStr

from httpexec.adapters.bearer_auth import BearerTokenAuthClient
from httpexec.adapters.http_client import HttpxClient
from httpexec.core.config import ClientSettings
from httpexec.core.interfaces.client import execute
from httpexec.core.services.composition import build_client
from httpexec.core.services.requests import build_request


def _echo_auth(request):
    return httpx.Response(200, text=request.headers.get('Authorization', '<none>'))


@pytest.mark.asyncio
async def test_without_token_chain_is_terminal():
    settings = ClientSettings(_env_file=None, base_url='https://svc.example.com')
    chain, terminal = build_client(settings, transport=httpx.MockTransport(_echo_auth))
    try:
        assert chain is terminal
        assert isinstance(chain, HttpxClient)
        response = await execute(chain, build_request(chain, 'GET', 'me'))
    finally:
        await terminal.aclose()
    assert response.text == '<none>'


@pytest.mark.asyncio
async def test_token_wraps_terminal_with_bearer_auth():
    settings = ClientSettings(_env_file=None, base_url='https://svc.example.com', token=SecretStr('abc'))
    chain, terminal = build_client(settings, transport=httpx.MockTransport(_echo_auth))
    try:
        assert isinstance(chain, BearerTokenAuthClient)
        assert chain.base() == 'https://svc.example.com'
        response = await execute(chain, build_request(chain, 'GET', 'me'))
    finally:
        await terminal.aclose()
    assert response.text == 'Bearer abc'
