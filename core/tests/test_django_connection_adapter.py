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

import pytest
from django.db import connection

from attribute_schema.adapters import DjangoConnectionAdapter
from attribute_schema.schema_manager import SchemaManager


def test_prefix_defaults_to_setting(settings):
  settings.ATTRIBUTE_SCHEMA_TABLE_PREFIX = "0_"

  assert DjangoConnectionAdapter().table_prefix() == "0_"


def test_explicit_prefix_wins_over_setting(settings):
  settings.ATTRIBUTE_SCHEMA_TABLE_PREFIX = "0_"

  # An explicit empty prefix is still explicit.
  assert DjangoConnectionAdapter(table_prefix="").table_prefix() == ""


def test_dialect_is_connection_vendor():
  adapter = DjangoConnectionAdapter()

  assert adapter.dialect() == connection.vendor
  assert DjangoConnectionAdapter(dialect="mysql").dialect() == "mysql"


@pytest.mark.django_db
def test_ensure_schema_on_django_connection():
  adapter = DjangoConnectionAdapter(table_prefix="dj_")
  manager = SchemaManager()

  manager.ensure_schema(adapter)
  manager.ensure_schema(adapter)

  tables = set(connection.introspection.table_names())
  assert {
    "dj_product_attribute_categories",
    "dj_product_attribute_values",
    "dj_product_attribute_assignments",
    "dj_product_attribute_category_assignments",
  } <= tables
