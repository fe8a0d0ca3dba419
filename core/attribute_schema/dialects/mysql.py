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
  DIALECT_MYSQL,
)


class MySqlSchemaDialect(SchemaDialect):
  """
  MySQL / MariaDB schema.

  Uses AUTO_INCREMENT, INT(11), TINYINT(1) etc. All unique and lookup keys
  are declared inline in CREATE TABLE, so there is one statement per table.
  """

  DIALECT_NAME = DIALECT_MYSQL

  def render_schema_statements(self, prefix: str) -> list[str]:
    return [
      self.render_categories_table(prefix),
      self.render_values_table(prefix),
      self.render_assignments_table(prefix),
      self.render_category_assignments_table(prefix),
    ]

  def render_categories_table(self, prefix: str) -> str:
    # Attribute types such as color, size, material.
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, CATEGORIES_TABLE)} (\n"
      "  id INT(11) NOT NULL AUTO_INCREMENT,\n"
      "  code VARCHAR(64) NOT NULL,\n"
      "  label VARCHAR(64) NOT NULL,\n"
      "  description VARCHAR(255) NULL,\n"
      "  sort_order INT(11) NOT NULL DEFAULT 0,\n"
      "  active TINYINT(1) NOT NULL DEFAULT 1,\n"
      "  updated_ts TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  PRIMARY KEY (id),\n"
      "  UNIQUE KEY uq_code (code)\n"
      ");"
    )

  def render_values_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, VALUES_TABLE)} (\n"
      "  id INT(11) NOT NULL AUTO_INCREMENT,\n"
      "  category_id INT(11) NOT NULL,\n"
      "  value VARCHAR(64) NOT NULL,\n"
      "  slug VARCHAR(32) NOT NULL,\n"
      "  sort_order INT(11) NOT NULL DEFAULT 0,\n"
      "  active TINYINT(1) NOT NULL DEFAULT 1,\n"
      "  updated_ts TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  PRIMARY KEY (id),\n"
      "  UNIQUE KEY uq_category_slug (category_id, slug),\n"
      "  KEY idx_category (category_id)\n"
      ");"
    )

  def render_assignments_table(self, prefix: str) -> str:
    # stock_id is the product SKU of the host application.
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, ASSIGNMENTS_TABLE)} (\n"
      "  id INT(11) NOT NULL AUTO_INCREMENT,\n"
      "  stock_id VARCHAR(32) NOT NULL,\n"
      "  category_id INT(11) NOT NULL,\n"
      "  value_id INT(11) NOT NULL,\n"
      "  sort_order INT(11) NOT NULL DEFAULT 0,\n"
      "  updated_ts TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  PRIMARY KEY (id),\n"
      "  UNIQUE KEY uq_stock_category_value (stock_id, category_id, value_id),\n"
      "  KEY idx_stock (stock_id),\n"
      "  KEY idx_category (category_id),\n"
      "  KEY idx_value (value_id)\n"
      ");"
    )

  def render_category_assignments_table(self, prefix: str) -> str:
    return (
      f"CREATE TABLE IF NOT EXISTS {self.table_identifier(prefix, CATEGORY_ASSIGNMENTS_TABLE)} (\n"
      "  id INT(11) NOT NULL AUTO_INCREMENT,\n"
      "  stock_id VARCHAR(32) NOT NULL,\n"
      "  category_id INT(11) NOT NULL,\n"
      "  updated_ts TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
      "  PRIMARY KEY (id),\n"
      "  UNIQUE KEY uq_stock_category (stock_id, category_id),\n"
      "  KEY idx_stock (stock_id),\n"
      "  KEY idx_category (category_id)\n"
      ");"
    )
