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

import os
from typing import Optional

# All attribute-schema environment variables share this prefix.
ENV_PREFIX = "ATTRIBUTE_SCHEMA_"


def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
  """Get env var as string with default. Empty values count as unset."""
  val = os.getenv(key)
  return val if val not in (None, "") else default

def env_bool(key: str, default: bool = False) -> bool:
  """Get env var as boolean."""
  val = os.getenv(key)
  return default if val is None else val.strip().lower() in ("1","true","yes","on")

def setting_env(name: str, default: Optional[str] = None) -> Optional[str]:
  """Get ATTRIBUTE_SCHEMA_<name>, e.g. setting_env("TABLE_PREFIX")."""
  return env_str(f"{ENV_PREFIX}{name}", default)
