"""
Django settings for the Slooze ordering site.

All persistent state lives behind the ordering API; this process only keeps
the signed-cookie session (cart + flash messages).
Run with: SLOOZE_API_URL=http://localhost:8080 python manage.py runserver
"""

from pathlib import Path

import environ  # type: ignore[import-untyped]

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1", "testserver"]),
    SLOOZE_API_URL=(str, "http://localhost:8080"),
    SLOOZE_API_TIMEOUT=(float, 10.0),
    SLOOZE_RESTAURANTS_PAGE_SIZE=(int, 3),
    SLOOZE_TOKEN_COOKIE=(str, "access_token"),
    LOG_LEVEL=(str, "INFO"),
)
environ.Env.read_env(BASE_DIR.parent.parent / ".env")

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-slooze-dev-key")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Local apps
    "apps.web.core",
    "apps.web.accounts",
    "apps.web.restaurant",
    "apps.web.cart",
    "apps.web.orders",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "apps.web.core.middleware.RouteProtectionMiddleware",
    "apps.web.core.middleware.APIClientMiddleware",
]

ROOT_URLCONF = "apps.web.config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.template.context_processors.csrf",
                "django.contrib.messages.context_processors.messages",
                "apps.web.core.context_processors.navbar",
            ],
        },
    },
]

WSGI_APPLICATION = "apps.web.config.wsgi.application"

# Database
# No local persistence: users, restaurants and orders belong to the API.
DATABASES: dict = {}

# Sessions live in a signed cookie, the server-side stand-in for localStorage
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = env.bool("SESSION_COOKIE_SECURE", default=False)

MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

# Ordering API
SLOOZE_API_URL = env("SLOOZE_API_URL")
SLOOZE_API_TIMEOUT = env("SLOOZE_API_TIMEOUT")
SLOOZE_RESTAURANTS_PAGE_SIZE = env("SLOOZE_RESTAURANTS_PAGE_SIZE")
SLOOZE_TOKEN_COOKIE = env("SLOOZE_TOKEN_COOKIE")

# Cart
CART_SESSION_KEY = "cart"

# Logging
LOG_LEVEL = env("LOG_LEVEL")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "apps": {"handlers": ["console"], "level": LOG_LEVEL},
        "django": {"handlers": ["console"], "level": "WARNING"},
    },
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR.parent.parent / "staticfiles"  # /app/staticfiles in production
