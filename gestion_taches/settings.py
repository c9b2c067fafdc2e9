"""Réglages Django du projet gestion_taches.

Les valeurs sensibles ou propres au déploiement se surchargent par variables
d'environnement ``TACHES_*``.
"""

import os
from pathlib import Path

from django.contrib.messages import constants as message_constants

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(nom, defaut=False):
    valeur = os.getenv(nom)
    if valeur is None:
        return defaut
    return valeur.strip().lower() in {"1", "true", "yes", "on"}


def _env_liste(nom, defaut):
    valeur = os.getenv(nom)
    if not valeur:
        return defaut
    return [element.strip() for element in valeur.split(",") if element.strip()]


def default_db_path():
    """
    Base SQLite par défaut : db.sqlite3 à côté de manage.py.

    Surcharge possible avec la variable TACHES_DB.
    """
    env = os.getenv("TACHES_DB")
    if env:
        return Path(env).expanduser().resolve()
    return BASE_DIR / "db.sqlite3"


SECRET_KEY = os.getenv("TACHES_SECRET_KEY", "django-insecure-gestion-taches-dev-only")

DEBUG = _env_bool("TACHES_DEBUG", defaut=False)

ALLOWED_HOSTS = _env_liste("TACHES_ALLOWED_HOSTS", ["localhost", "127.0.0.1", "[::1]"])

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "taches",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "gestion_taches.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "gestion_taches.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": default_db_path(),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "fr-fr"

TIME_ZONE = os.getenv("TACHES_TIME_ZONE", "Europe/Paris")

USE_I18N = True

USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

MESSAGE_TAGS = {
    message_constants.ERROR: "danger",
}

LOG_LEVEL = os.getenv("TACHES_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "standard",
        },
    },
    "loggers": {
        "taches": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}
