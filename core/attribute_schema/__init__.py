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
Product attribute schema provisioning.

Public API:
- SchemaManager().ensure_schema(adapter)
- ensure_schema(adapter)
"""

from .schema_manager import SchemaManager, ensure_schema  # noqa: F401

__all__ = ["SchemaManager", "ensure_schema"]
