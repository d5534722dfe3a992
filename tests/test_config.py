from httpexec.core import config
from httpexec.core.config import ClientSettings


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv('HTTPEXEC_BASE_URL', 'https://env.example.com')
    monkeypatch.setenv('HTTPEXEC_TOKEN', 'from-env')
    monkeypatch.setenv('HTTPEXEC_HTTP_TIMEOUT_SECONDS', '5')
    settings = ClientSettings(_env_file=None)
    assert settings.base_url == 'https://env.example.com'
    assert settings.http_timeout_seconds == 5.0
    assert settings.token.get_secret_value() == 'from-env'
    assert 'from-env' not in repr(settings)


def test_defaults(monkeypatch):
    for key in ('HTTPEXEC_BASE_URL', 'HTTPEXEC_TOKEN', 'HTTPEXEC_FOLLOW_REDIRECTS'):
        monkeypatch.delenv(key, raising=False)
    settings = ClientSettings(_env_file=None)
    assert settings.token is None
    assert settings.follow_redirects is False


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setattr(config, 'get_user_env_file', lambda: tmp_path / 'cfg' / '.env')
    config.write_user_env_vars({'HTTPEXEC_BASE_URL': 'https://a'})
    path = config.write_user_env_vars({'HTTPEXEC_TOKEN': 't'})
    text = path.read_text(encoding='utf-8')
    assert 'HTTPEXEC_BASE_URL=https://a' in text
    assert 'HTTPEXEC_TOKEN=t' in text


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, 'platform', 'linux')
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path))
    assert config.get_user_config_dir() == tmp_path / 'httpexec'
