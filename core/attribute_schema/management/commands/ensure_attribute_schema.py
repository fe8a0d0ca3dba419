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

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from sqlalchemy.exc import ArgumentError

from attribute_schema.adapters import (
  DbAdapter,
  DjangoConnectionAdapter,
  SqlAlchemyAdapter,
  adapter_from_profile,
)
from attribute_schema.config.profiles import Profile, load_profile
from attribute_schema.dialects import get_schema_dialect
from attribute_schema.schema_manager import SchemaManager

logger = logging.getLogger(__name__)

# Unparseable URL, unknown dialect, or a driver that is not installed.
URL_ERRORS = (ArgumentError, ModuleNotFoundError)


class Command(BaseCommand):
  help = (
    "Create the product attribute tables if they do not exist.\n\n"
    "Examples:\n"
    "  python manage.py ensure_attribute_schema\n"
    "  python manage.py ensure_attribute_schema --database legacy --prefix 0_\n"
    "  python manage.py ensure_attribute_schema --url sqlite:///./attributes.db --prefix fa_\n"
    "  python manage.py ensure_attribute_schema --profile prod\n"
    "  python manage.py ensure_attribute_schema --dialect sqlite --prefix fa_ --print-sql\n"
  )

  def add_arguments(self, parser) -> None:
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
      "--database",
      dest="database",
      default=None,
      help="Django database alias to provision (default: 'default').",
    )
    target.add_argument(
      "--url",
      dest="url",
      default=None,
      help="SQLAlchemy URL of the database to provision.",
    )
    target.add_argument(
      "--profile",
      dest="profile",
      default=None,
      help="Profile name from attribute_schema_profiles.yaml.",
    )
    parser.add_argument(
      "--prefix",
      dest="prefix",
      default=None,
      help="Table prefix, inserted verbatim before every table name.",
    )
    parser.add_argument(
      "--dialect",
      dest="dialect",
      default=None,
      help="Dialect override: 'sqlite' or a MySQL family name (default: as reported by the connection).",
    )
    parser.add_argument(
      "--print-sql",
      action="store_true",
      dest="print_sql",
      help="Print the statements instead of executing them.",
    )

  # ---------------------------------------------------------------------------
  # Helpers
  # ---------------------------------------------------------------------------

  def _load_profile(self, name: str) -> Profile:
    try:
      return load_profile(name)
    except (FileNotFoundError, KeyError) as exc:
      raise CommandError(str(exc)) from exc

  def _build_adapter(self, options: dict[str, Any], profile: Profile | None = None) -> DbAdapter:
    prefix = options.get("prefix")
    dialect = options.get("dialect")

    try:
      if options.get("url"):
        if prefix is None:
          prefix = getattr(settings, "ATTRIBUTE_SCHEMA_TABLE_PREFIX", "") or ""
        return SqlAlchemyAdapter(options["url"], table_prefix=prefix, dialect=dialect)

      if profile is not None:
        return adapter_from_profile(profile, table_prefix=prefix, dialect=dialect)
    except URL_ERRORS as exc:
      raise CommandError(f"Cannot use database URL: {exc}") from exc
    except ValueError as exc:
      raise CommandError(str(exc)) from exc

    return DjangoConnectionAdapter(
      alias=options.get("database") or "default",
      table_prefix=prefix,
      dialect=dialect,
    )

  def _render_profile_statements(self, profile: Profile, options: dict[str, Any]) -> list[str]:
    """
    Render statements from profile values alone, for profiles without a
    database_url. Command-line --prefix and --dialect still win.
    """
    prefix = options.get("prefix")
    if prefix is None:
      prefix = profile.table_prefix
    dialect = get_schema_dialect(options.get("dialect") or profile.dialect)
    return dialect.render_schema_statements(prefix)

  # ---------------------------------------------------------------------------
  # Main
  # ---------------------------------------------------------------------------

  def handle(self, *args: Any, **options: Any) -> None:
    profile = self._load_profile(options["profile"]) if options.get("profile") else None

    if options.get("print_sql") and profile is not None and not profile.database_url:
      self.stdout.write("\n\n".join(self._render_profile_statements(profile, options)))
      return

    adapter = self._build_adapter(options, profile)
    manager = SchemaManager()

    try:
      if options.get("print_sql"):
        statements = manager.render_statements(adapter)
        self.stdout.write("\n\n".join(statements))
        return

      dialect_name = manager.resolve_dialect(adapter).DIALECT_NAME
      try:
        manager.ensure_schema(adapter)
      except Exception as exc:
        logger.exception("Product attribute schema provisioning failed")
        raise CommandError(f"Schema provisioning failed: {exc}") from exc
    finally:
      close = getattr(adapter, "close", None)
      if callable(close):
        close()

    self.stdout.write(self.style.SUCCESS(
      f"Product attribute schema ensured "
      f"(dialect={dialect_name}, prefix={adapter.table_prefix()!r})."
    ))
