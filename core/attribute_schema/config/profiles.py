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

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from django.conf import settings

from utils.env import setting_env

"""
Profile loading for attribute-schema.

Profiles define environment-specific connection settings:
- database_url: SQLAlchemy URL of the target database
- table_prefix: prefix for all product attribute tables (e.g. "0_" or "fa_")
- dialect: optional dialect override ("sqlite" or MySQL family)

Example attribute_schema_profiles.yaml:

  active_profile: dev
  profiles:
    dev:
      database_url: sqlite:///./attributes.db
      table_prefix: fa_
    prod:
      database_url: mysql+pymysql://fa:secret@db/frontaccounting
      table_prefix: "0_"
"""

PROFILES_FILENAME = "attribute_schema_profiles.yaml"


@dataclass
class Profile:
  name: str

  # SQLAlchemy URL; may be empty when only used with a Django connection
  database_url: Optional[str] = None

  # Inserted verbatim before every table name
  table_prefix: str = ""

  # None means: use what the connection reports
  dialect: Optional[str] = None


def _find_profiles_path(explicit_path: str | None = None) -> Path:
  """
  Locate attribute_schema_profiles.yaml in several common locations:

  1. explicit_path argument (if provided and exists)
  2. Django settings.ATTRIBUTE_SCHEMA_PROFILES_PATH (if set and exists)
  3. common fallback locations relative to the package and CWD

  Raises:
      FileNotFoundError: if no suitable file can be found.
  """
  candidates: list[Path] = []

  if explicit_path:
    candidates.append(Path(explicit_path))

  cfg_path = getattr(settings, "ATTRIBUTE_SCHEMA_PROFILES_PATH", None)
  if cfg_path:
    candidates.append(Path(cfg_path))

  here = Path(__file__).resolve()
  candidates += [
    here.parents[3] / "config" / PROFILES_FILENAME,
    Path.cwd() / "config" / PROFILES_FILENAME,
    Path("/etc/attribute_schema") / PROFILES_FILENAME,
  ]

  for c in candidates:
    if c and c.exists():
      return c

  raise FileNotFoundError(
    f"{PROFILES_FILENAME} not found in expected locations. "
    "Provide an explicit path or configure ATTRIBUTE_SCHEMA_PROFILES_PATH."
  )


def load_profile(
  profile_name: Optional[str] = None,
  profiles_path: Optional[str] = None,
) -> Profile:
  """
  Load and return a profile.

  Resolution order for the profile name:
    - profile_name argument
    - ATTRIBUTE_SCHEMA_PROFILE env var
    - `active_profile` key in the profiles file
    - default 'dev'

  ATTRIBUTE_SCHEMA_DATABASE_URL, ATTRIBUTE_SCHEMA_TABLE_PREFIX and
  ATTRIBUTE_SCHEMA_DIALECT override the file values when set.
  """
  path = _find_profiles_path(profiles_path)

  with open(path, "r") as f:
    data = yaml.safe_load(f) or {}

  active = profile_name or setting_env("PROFILE", data.get("active_profile") or "dev")
  profiles = data.get("profiles") or {}

  if active not in profiles:
    available = ", ".join(sorted(profiles)) if profiles else "(none)"
    raise KeyError(
      f"Profile '{active}' not found in {PROFILES_FILENAME} "
      f"at {path}. Available profiles: {available}."
    )

  p = profiles[active] or {}

  # YAML turns an unquoted 0_ into a string, but a bare 0 into an int.
  raw_prefix = p.get("table_prefix")
  file_prefix = "" if raw_prefix is None else str(raw_prefix)

  return Profile(
    name=active,
    database_url=setting_env("DATABASE_URL", p.get("database_url")),
    table_prefix=setting_env("TABLE_PREFIX", file_prefix),
    dialect=setting_env("DIALECT", p.get("dialect")),
  )
