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
Table names and dialect names for the product attribute schema.

The table names are a compatibility contract: other parts of the
application query these tables directly by name and column.
"""

CATEGORIES_TABLE = "product_attribute_categories"
VALUES_TABLE = "product_attribute_values"
ASSIGNMENTS_TABLE = "product_attribute_assignments"
CATEGORY_ASSIGNMENTS_TABLE = "product_attribute_category_assignments"

# Creation order. Values and assignments reference categories.
SCHEMA_TABLES = (
  CATEGORIES_TABLE,
  VALUES_TABLE,
  ASSIGNMENTS_TABLE,
  CATEGORY_ASSIGNMENTS_TABLE,
)

DIALECT_MYSQL = "mysql"
DIALECT_SQLITE = "sqlite"

# Only "sqlite" is recognized explicitly; everything else is MySQL family.
DEFAULT_DIALECT = DIALECT_MYSQL
