"""
Django settings for the apexsite project.
Django 5.2.x
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# ------------------------------------------------------------------------------
# Paths & env helper
# ------------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")  # optional; may also provide APP_ENV


def env(key: str, default=None, cast=str):
    val = os.getenv(key, default)
    if cast is bool:
        return str(val).lower() in {"1", "true", "yes", "on"}
    if cast is list:
        return [x.strip() for x in str(val or "").split(",") if x.strip()]
    return val


# ------------------------------------------------------------------------------
# Core
# ------------------------------------------------------------------------------
SECRET_KEY = env("DJANGO_SECRET_KEY", default="dev-secret-unsafe-DO_NOT_USE_IN_PRODUCTION")

DEBUG: bool = env("DJANGO_DEBUG", default="1", cast=bool)

ALLOWED_HOSTS = env("ALLOWED_HOSTS", default="127.0.0.1,localhost", cast=list)

# ------------------------------------------------------------------------------
# Security (kept strict when DEBUG=False, lenient in dev)
# ------------------------------------------------------------------------------
if not DEBUG:
    SECURE_SSL_REDIRECT = True
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
    SECURE_HSTS_SECONDS = 60 * 60 * 24 * 365
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True
else:
    SECURE_SSL_REDIRECT = False
    SECURE_PROXY_SSL_HEADER = None
    SECURE_HSTS_SECONDS = 0
    SECURE_HSTS_INCLUDE_SUBDOMAINS = False
    SECURE_HSTS_PRELOAD = False

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# ------------------------------------------------------------------------------
# Apps
# ------------------------------------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "apex.apps.ApexConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    # apex -> www; sees the response of everything below it
    "apex.middleware.ApexMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "apexsite.urls"

WSGI_APPLICATION = "apexsite.wsgi.application"
ASGI_APPLICATION = "apexsite.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ------------------------------------------------------------------------------
# i18n / tz
# ------------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ------------------------------------------------------------------------------
# Logging (simple, quiet by default)
# ------------------------------------------------------------------------------
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{levelname}] {asctime} {name} - {message}", "style": "{"},
        "simple": {"format": "[{levelname}] {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": True},
        "app": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}
