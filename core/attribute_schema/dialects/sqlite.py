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

from .base import SchemaDialect
from attribute_schema.constants import (
  CATEGORIES_TABLE,
  VALUES_TABLE,
  ASSIGNMENTS_TABLE,
  CATEGORY_ASSIGNMENTS_TABLE,
  DIALECT_SQLITE,
)


class SqliteSchemaDialect(SchemaDialect):
  """
  SQLite schema.

  Uses INTEGER PRIMARY KEY AUTOINCREMENT and TEXT columns. Unique
  constraints stay inline; lookup indexes are separate CREATE INDEX
  statements issued right after their table.
  """

  DIALECT_NAME = DIALECT_SQLITE

  def render_create_index(self, prefix: str, index_name: str, table: str, column: str) -> str:
    return (
      f"CREATE INDEX IF NOT EXISTS {index_name} "
      f"ON {self.table_identifier(prefix, table)}({column});"
    )

  def render_schema_statements(self, prefix: str) -> list[str]:
    idx = self.render_create_index
    return [
      self.render_categories_table(prefix),
      self.render_values_table(prefix),
      idx(prefix, "idx_pav_category", VALUES_TABLE, "category_id"),
      self.render_assignments_table(prefix),
      idx(prefix, "idx_paa_stock", ASSIGNMENTS_TABLE, "stock_id"),
      idx(prefix, "idx_paa_category", ASSIGNMENTS_TABLE, "category_id"),
      idx(prefix, "idx_paa_value", ASSIGNMENTS_TABLE, "value_id"),
      self.render_category_assignments_table(prefix),
      idx(prefix, "idx_paca_stock", CATEGORY_ASSIGNMENTS_TABLE, "stock_id"),
      idx(prefix, "idx_paca_category", CATEGORY_ASSIGNMENTS_TABLE, "category_id"),
    ]

  def render_categories_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, CATEGORIES_TABLE)} (\n"
      "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
      "  code TEXT NOT NULL UNIQUE,\n"
      "  label TEXT NOT NULL,\n"
      "  description TEXT NULL,\n"
      "  sort_order INTEGER NOT NULL DEFAULT 0,\n"
      "  active INTEGER NOT NULL DEFAULT 1,\n"
      "  updated_ts TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP\n"
      ");"
    )

  def render_values_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, VALUES_TABLE)} (\n"
      "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
      "  category_id INTEGER NOT NULL,\n"
      "  value TEXT NOT NULL,\n"
      "  slug TEXT NOT NULL,\n"
      "  sort_order INTEGER NOT NULL DEFAULT 0,\n"
      "  active INTEGER NOT NULL DEFAULT 1,\n"
      "  updated_ts TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  UNIQUE(category_id, slug)\n"
      ");"
    )

  def render_assignments_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, ASSIGNMENTS_TABLE)} (\n"
      "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
      "  stock_id TEXT NOT NULL,\n"
      "  category_id INTEGER NOT NULL,\n"
      "  value_id INTEGER NOT NULL,\n"
      "  sort_order INTEGER NOT NULL DEFAULT 0,\n"
      "  updated_ts TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  UNIQUE(stock_id, category_id, value_id)\n"
      ");"
    )

  def render_category_assignments_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, CATEGORY_ASSIGNMENTS_TABLE)} (\n"
      "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
      "  stock_id TEXT NOT NULL,\n"
      "  category_id INTEGER NOT NULL,\n"
      "  updated_ts TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  UNIQUE(stock_id, category_id)\n"
      ");"
    )
