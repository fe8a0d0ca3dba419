"""
attribute-schema - Product Attribute Schema Provisioning
Copyright © 2025 The attribute-schema Authors

This file is part of attribute-schema.

attribute-schema is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

attribute-schema is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with attribute-schema. If not, see <https://www.gnu.org/licenses/>.

Contact: the attribute-schema maintainers.
"""

"""
Django settings for attribute-schema.

Only what the management commands need: one database connection, the
attribute_schema app, logging and the ATTRIBUTE_SCHEMA_* settings.
"""

from pathlib import Path

from utils.env import env_bool, env_str, setting_env

BASE_DIR = Path(__file__).resolve().parent.parent
REPO_ROOT = BASE_DIR.parent

SECRET_KEY = env_str("DJANGO_SECRET_KEY", "attribute-schema-local-dev-key")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
  "attribute_schema",
]

DATABASES = {
  "default": {
    "ENGINE": env_str("DJANGO_DB_ENGINE", "django.db.backends.sqlite3"),
    "NAME": env_str("DJANGO_DB_NAME", str(REPO_ROOT / "attribute_schema.sqlite3")),
    "USER": env_str("DJANGO_DB_USER", ""),
    "PASSWORD": env_str("DJANGO_DB_PASSWORD", ""),
    "HOST": env_str("DJANGO_DB_HOST", ""),
    "PORT": env_str("DJANGO_DB_PORT", ""),
  }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True

# Inserted verbatim before every product attribute table name.
ATTRIBUTE_SCHEMA_TABLE_PREFIX = setting_env("TABLE_PREFIX", "")
ATTRIBUTE_SCHEMA_PROFILES_PATH = setting_env("PROFILES_PATH")

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
    "attribute_schema": {
      "handlers": ["console"],
      "level": setting_env("LOG_LEVEL", "INFO"),
      "propagate": True,
    },
  },
}
