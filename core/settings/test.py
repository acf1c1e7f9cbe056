from .base import *  # noqa

SECRET_KEY = "test-only-not-secure"
DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "marketplace-tests",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

PROFILE_ROLE_SYNC = "always"
CREATIVES_BUCKET = "test-creatives"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "loggers": {
        "django": {"handlers": ["null"], "level": "ERROR"},
        "apps": {"handlers": ["null"], "level": "DEBUG"},
    },
}
