# conftest.py (repo root)
import pytest


@pytest.fixture(autouse=True)
def _test_sane_http(settings, monkeypatch):
    # Kill HTTPS + HSTS so test client doesn't get 301 to https://
    settings.SECURE_SSL_REDIRECT = False
    settings.SECURE_HSTS_SECONDS = 0
    settings.SECURE_HSTS_INCLUDE_SUBDOMAINS = False
    settings.SECURE_HSTS_PRELOAD = False
    settings.SECURE_PROXY_SSL_HEADER = None
    settings.APPEND_SLASH = False

    # Tests send all sorts of Host headers (apex, www-xx, localhost...)
    settings.ALLOWED_HOSTS = ["*"]

    # Start every test without an environment tag; tests set it explicitly.
    monkeypatch.delenv("APP_ENV", raising=False)
