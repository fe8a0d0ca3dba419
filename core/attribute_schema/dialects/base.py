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

from abc import ABC, abstractmethod


class SchemaDialect(ABC):
  """
  Base interface for schema dialects.
  Implementations return the fixed, ordered DDL statements that create the
  product attribute tables for one SQL variant.
  """

  DIALECT_NAME = "base"

  def table_identifier(self, prefix: str, table: str) -> str:
    """
    Render a prefixed table identifier in backticks.

    The prefix is inserted verbatim. Callers are responsible for passing a
    prefix that is safe inside an identifier.
    """
    return f"`{prefix}{table}`"

  @abstractmethod
  def render_schema_statements(self, prefix: str) -> list[str]:
    """
    Return the ordered DDL statements for the full schema.
    Every statement must be guarded with IF NOT EXISTS.
    """
    raise NotImplementedError

  def render_script(self, prefix: str) -> str:
    """
    Render all statements as one script, e.g. for a manual install.
    """
    return "\n\n".join(self.render_schema_statements(prefix)) + "\n"

  def __repr__(self) -> str:
    return f"{self.__class__.__name__}()"
