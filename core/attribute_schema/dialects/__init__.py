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

from typing import Optional, Type

from attribute_schema.constants import DEFAULT_DIALECT
from attribute_schema.dialects.base import SchemaDialect
from attribute_schema.dialects.mysql import MySqlSchemaDialect
from attribute_schema.dialects.sqlite import SqliteSchemaDialect

"""
Schema dialects.

Two variants exist: the MySQL family (default) and SQLite. The adapter's
dialect name is resolved to one of them exactly once per provisioning run.
"""

_DIALECT_REGISTRY: dict[str, Type[SchemaDialect]] = {
  MySqlSchemaDialect.DIALECT_NAME: MySqlSchemaDialect,
  SqliteSchemaDialect.DIALECT_NAME: SqliteSchemaDialect,
}


def get_available_dialect_names() -> list[str]:
  return sorted(_DIALECT_REGISTRY)


def get_schema_dialect(name: Optional[str] = None) -> SchemaDialect:
  """
  Return the SchemaDialect for a dialect name reported by an adapter.

  Only the exact name "sqlite" selects SQLite. Any other value, including
  None, "mariadb" or unknown strings, selects the MySQL family. The name is
  not normalized or validated.
  """
  if name == SqliteSchemaDialect.DIALECT_NAME:
    return SqliteSchemaDialect()
  return _DIALECT_REGISTRY[DEFAULT_DIALECT]()
