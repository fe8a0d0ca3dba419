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

from typing import Optional, TYPE_CHECKING

from django.conf import settings
from django.db import connections
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

if TYPE_CHECKING:
  from attribute_schema.config.profiles import Profile

"""
Database adapters.

An adapter is everything the schema manager needs from a database:
- table_prefix(): string prepended to every table name
- dialect(): dialect name; "sqlite" or anything else (MySQL family)
- execute(sql): run one raw DDL statement, raise on failure
"""


class DbAdapter:
  def table_prefix(self) -> str:
    raise NotImplementedError

  def dialect(self) -> str:
    raise NotImplementedError

  def execute(self, sql: str) -> None:
    raise NotImplementedError


class SqlAlchemyAdapter(DbAdapter):
  """
  Adapter on top of a SQLAlchemy engine.

  Accepts either an Engine or a URL string. The dialect defaults to the
  engine's dialect name ("mysql", "mariadb", "sqlite", ...). Each statement
  runs in its own transaction, so statements that succeeded before a
  failure stay committed.
  """

  def __init__(
    self,
    engine: Engine | str,
    table_prefix: str = "",
    dialect: Optional[str] = None,
  ):
    if isinstance(engine, str):
      self.engine = create_engine(engine)
      self._owns_engine = True
    else:
      self.engine = engine
      self._owns_engine = False

    self._table_prefix = table_prefix or ""
    self._dialect = dialect

  def table_prefix(self) -> str:
    return self._table_prefix

  def dialect(self) -> str:
    if self._dialect:
      return self._dialect
    return self.engine.dialect.name

  def execute(self, sql: str) -> None:
    # exec_driver_sql: no bind parameter parsing of the raw DDL text.
    with self.engine.begin() as conn:
      conn.exec_driver_sql(sql)

  def close(self) -> None:
    # Only dispose engines created from a URL by this adapter.
    if self._owns_engine:
      self.engine.dispose()

  def __repr__(self) -> str:
    return (
      f"SqlAlchemyAdapter(url={self.engine.url!r}, "
      f"table_prefix={self._table_prefix!r}, dialect={self.dialect()!r})"
    )


class DjangoConnectionAdapter(DbAdapter):
  """
  Adapter on top of a configured Django database connection.

  The dialect is the connection vendor ("mysql", "sqlite", "postgresql",
  ...). The prefix defaults to settings.ATTRIBUTE_SCHEMA_TABLE_PREFIX.
  """

  def __init__(
    self,
    alias: str = "default",
    table_prefix: Optional[str] = None,
    dialect: Optional[str] = None,
  ):
    self.alias = alias
    self._table_prefix = table_prefix
    self._dialect = dialect

  @property
  def connection(self):
    return connections[self.alias]

  def table_prefix(self) -> str:
    if self._table_prefix is not None:
      return self._table_prefix
    return getattr(settings, "ATTRIBUTE_SCHEMA_TABLE_PREFIX", "") or ""

  def dialect(self) -> str:
    if self._dialect:
      return self._dialect
    return self.connection.vendor

  def execute(self, sql: str) -> None:
    # No params: the backend passes the text through without % formatting.
    with self.connection.cursor() as cursor:
      cursor.execute(sql)


def adapter_from_profile(
  profile: "Profile",
  *,
  table_prefix: Optional[str] = None,
  dialect: Optional[str] = None,
) -> SqlAlchemyAdapter:
  """
  Build a SqlAlchemyAdapter from a profile. Explicit arguments win over
  the profile values.
  """
  if not profile.database_url:
    raise ValueError(
      f"Profile '{profile.name}' has no database_url. "
      f"Set it in the profiles file or via ATTRIBUTE_SCHEMA_DATABASE_URL."
    )

  return SqlAlchemyAdapter(
    profile.database_url,
    table_prefix=table_prefix if table_prefix is not None else profile.table_prefix,
    dialect=dialect or profile.dialect,
  )
