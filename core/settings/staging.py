from .dev import *  # noqa
from decouple import config, Csv

# Same Cloud SQL / Memorystore layout as dev, on the staging instances
ALLOWED_HOSTS = config("DJANGO_ALLOWED_HOSTS", cast=Csv(), default="staging.dooh-market.com,*.run.app")
CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS",
    cast=Csv(),
    default="https://staging-app.dooh-market.com"
)

CACHES["default"]["TIMEOUT"] = config("DJANGO_CACHE_TIMEOUT", cast=int, default=600)

SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
CREATIVES_BUCKET = config("CREATIVES_BUCKET", default="dooh-creatives-staging")

LOGGING["loggers"]["django"]["level"] = "WARNING"
