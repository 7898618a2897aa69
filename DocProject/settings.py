"""
Django settings for DocProject.

A minimal host for the doccomments app: no database, templates from the
installed apps only.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-doc-project-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "doccomments",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

DOC_COMMENTS = {
    "MAX_LENGTH": int(os.environ.get("DOC_COMMENTS_MAX_LENGTH", "120")),
    "IMG_PATH": os.environ.get("DOC_COMMENTS_IMG_PATH") or None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "doccomments": {
            "handlers": ["console"],
            "level": os.environ.get("DOC_COMMENTS_LOG_LEVEL", "WARNING"),
        },
    },
}
