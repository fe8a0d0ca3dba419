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

from django.apps import AppConfig


class AttributeSchemaConfig(AppConfig):
  default_auto_field = "django.db.models.BigAutoField"
  name = "attribute_schema"
  verbose_name = "Product Attribute Schema"
