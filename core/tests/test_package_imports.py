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

import importlib

import pytest


@pytest.mark.parametrize("module_name", [
  "attribute_schema",
  "attribute_schema.schema_manager",
  "attribute_schema.adapters",
  "attribute_schema.dialects",
  "attribute_schema.config.profiles",
  "attribute_schema.management.commands.ensure_attribute_schema",
  "attribute_schema_site.settings",
  "utils.env",
])
def test_module_imports(module_name):
  assert importlib.import_module(module_name) is not None


def test_package_exports_schema_manager():
  import attribute_schema
  from attribute_schema.schema_manager import SchemaManager, ensure_schema

  assert attribute_schema.SchemaManager is SchemaManager
  assert attribute_schema.ensure_schema is ensure_schema
