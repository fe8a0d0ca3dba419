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

from attribute_schema.adapters import DbAdapter
from attribute_schema.dialects import get_schema_dialect
from attribute_schema.dialects.base import SchemaDialect

"""
Schema manager for the product attribute tables.

Creates the four product attribute tables (and, on SQLite, their lookup
indexes) if they do not exist yet:

- product_attribute_categories: attribute categories (color, size, ...)
- product_attribute_values: values within a category (red, large, ...)
- product_attribute_assignments: product -> value links per category
- product_attribute_category_assignments: product -> category links

Safe to call any number of times: every statement is guarded with
IF NOT EXISTS, so a second run issues the same statements and changes
nothing. Statements are executed one by one; the first failure aborts the
run and is propagated unchanged. Tables created before the failure stay.
"""

logger = logging.getLogger(__name__)


class SchemaManager:
  """Stateless provisioner for the product attribute schema."""

  def resolve_dialect(self, db: DbAdapter) -> SchemaDialect:
    return get_schema_dialect(db.dialect())

  def render_statements(self, db: DbAdapter) -> list[str]:
    """
    Return the statements ensure_schema() would execute for this adapter,
    without executing anything.
    """
    return self.resolve_dialect(db).render_schema_statements(db.table_prefix())

  def ensure_schema(self, db: DbAdapter) -> None:
    """
    Ensure the complete product attribute schema exists.

    Dispatches once on db.dialect(): "sqlite" gets the SQLite statement set
    (ten statements), everything else the MySQL family set (four
    statements). The table prefix from db.table_prefix() is inserted
    verbatim into every table name.
    """
    prefix = db.table_prefix()
    dialect = self.resolve_dialect(db)
    statements = dialect.render_schema_statements(prefix)

    logger.info(
      "Ensuring product attribute schema: dialect=%s prefix=%r statements=%d",
      dialect.DIALECT_NAME,
      prefix,
      len(statements),
    )

    for i, sql in enumerate(statements, start=1):
      logger.debug("Schema statement %d/%d:\n%s", i, len(statements), sql)
      db.execute(sql)

    logger.info("Product attribute schema ensured (%s).", dialect.DIALECT_NAME)


def ensure_schema(db: DbAdapter) -> None:
  SchemaManager().ensure_schema(db)
