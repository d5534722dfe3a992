import pytest

from httpexec.core.domain.headers import (
    REDACTED,
    InvalidHeaderValue,
    redact_headers,
    validate_header_value,
)
from httpexec.core.domain.models import decode_body


def test_visible_ascii_and_tab_are_legal():
    assert validate_header_value('Bearer a.b-c_d~e+f/g=\tx') == 'Bearer a.b-c_d~e+f/g=\tx'


@pytest.mark.parametrize('value', ['a\rb', 'a\nb', '\x00', '\x1f', '\x7f', 'ñ'])
def test_forbidden_characters_are_rejected(value):
    with pytest.raises(InvalidHeaderValue):
        validate_header_value(value)


def test_redact_headers_hides_credentials():
    out = redact_headers({'Authorization': 'Bearer x', 'Accept': 'text/plain'})
    assert out == {'Authorization': REDACTED, 'Accept': 'text/plain'}


def test_decode_body():
    assert decode_body(b'') == ''
    assert decode_body('ok ✓'.encode('utf-8')) == 'ok ✓'
    assert decode_body(b'\xc3\x28') is None
