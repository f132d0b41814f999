"""Django settings for the GigFlow API.

All state lives in process memory: there is no database, sessions and contract
drafts use the local-memory cache.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "gigflow-dev-secret-change-me")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.sessions",
    "rest_framework",
    "bookings",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "gigflow.urls"
WSGI_APPLICATION = "gigflow.wsgi.application"

DATABASES = {}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "gigflow",
    }
}

SESSION_ENGINE = "django.contrib.sessions.backends.cache"

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "bookings.handlers.errors.domain_exception_handler",
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "bookings": {
            "handlers": ["console"],
            "level": os.environ.get("GIGFLOW_LOG_LEVEL", "INFO"),
        },
    },
}

# GigFlow

GIGFLOW_STORE_CLASS = os.environ.get(
    "GIGFLOW_STORE_CLASS", "bookings.stores.memory_store.InMemoryGigStore"
)

# Fixed demo logins: username -> (password, role).
GIGFLOW_CREDENTIALS = {
    "artist": ("artist", "DJ"),
    "client": ("client", "CLIENT"),
    "promoter": ("promoter", "PROMOTER"),
}

GOOGLE_GENAI_API_KEY = os.environ.get("GOOGLE_GENAI_API_KEY", "")
GIGFLOW_GENAI_MODEL = os.environ.get("GIGFLOW_GENAI_MODEL", "gemini-2.5-flash")
GIGFLOW_GENAI_TIMEOUT = float(os.environ.get("GIGFLOW_GENAI_TIMEOUT", "30"))
GIGFLOW_CONTRACT_CACHE_TIMEOUT = int(os.environ.get("GIGFLOW_CONTRACT_CACHE_TIMEOUT", "3600"))
