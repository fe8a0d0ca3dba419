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

from attribute_schema.schema_manager import SchemaManager

from tests._adapter_test_helpers import RecordingAdapter


@pytest.fixture
def schema_manager():
  """Provide a SchemaManager instance."""
  return SchemaManager()


@pytest.fixture
def mysql_adapter():
  """Recording adapter reporting prefix 'fa_' and dialect 'mysql'."""
  return RecordingAdapter(prefix="fa_", dialect="mysql")


@pytest.fixture
def sqlite_adapter():
  """Recording adapter reporting prefix 'fa_' and dialect 'sqlite'."""
  return RecordingAdapter(prefix="fa_", dialect="sqlite")


@pytest.fixture(autouse=True)
def clear_attribute_schema_env(monkeypatch):
  """Ensure ATTRIBUTE_SCHEMA_* env vars are clean by default."""
  for name in (
    "ATTRIBUTE_SCHEMA_PROFILE",
    "ATTRIBUTE_SCHEMA_DATABASE_URL",
    "ATTRIBUTE_SCHEMA_TABLE_PREFIX",
    "ATTRIBUTE_SCHEMA_DIALECT",
  ):
    monkeypatch.delenv(name, raising=False)
  yield
