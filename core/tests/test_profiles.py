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

import textwrap

import pytest

from attribute_schema.adapters import SqlAlchemyAdapter, adapter_from_profile
from attribute_schema.config.profiles import Profile, load_profile


@pytest.fixture
def profiles_file(tmp_path):
  path = tmp_path / "attribute_schema_profiles.yaml"
  path.write_text(textwrap.dedent(
    """
    active_profile: dev
    profiles:
      dev:
        database_url: sqlite://
        table_prefix: fa_
      legacy:
        database_url: sqlite://
        table_prefix: 0
        dialect: sqlite
      empty: {}
    """
  ))
  return path


def test_active_profile_from_file(profiles_file):
  profile = load_profile(profiles_path=str(profiles_file))

  assert profile == Profile(name="dev", database_url="sqlite://", table_prefix="fa_", dialect=None)


def test_profile_name_argument_wins(profiles_file, monkeypatch):
  monkeypatch.setenv("ATTRIBUTE_SCHEMA_PROFILE", "dev")

  profile = load_profile("legacy", profiles_path=str(profiles_file))

  assert profile.name == "legacy"
  # Bare YAML integers are turned back into a prefix string.
  assert profile.table_prefix == "0"
  assert profile.dialect == "sqlite"


def test_env_selects_profile_and_overrides_values(profiles_file, monkeypatch):
  monkeypatch.setenv("ATTRIBUTE_SCHEMA_PROFILE", "legacy")
  monkeypatch.setenv("ATTRIBUTE_SCHEMA_TABLE_PREFIX", "env_")
  monkeypatch.setenv("ATTRIBUTE_SCHEMA_DATABASE_URL", "sqlite:///env.db")

  profile = load_profile(profiles_path=str(profiles_file))

  assert profile.name == "legacy"
  assert profile.table_prefix == "env_"
  assert profile.database_url == "sqlite:///env.db"


def test_unknown_profile_lists_available(profiles_file):
  with pytest.raises(KeyError) as excinfo:
    load_profile("prod", profiles_path=str(profiles_file))

  assert "dev, empty, legacy" in str(excinfo.value)


def test_missing_profiles_file_raises(tmp_path, monkeypatch, settings):
  settings.ATTRIBUTE_SCHEMA_PROFILES_PATH = None
  monkeypatch.chdir(tmp_path)

  with pytest.raises(FileNotFoundError):
    load_profile(profiles_path=str(tmp_path / "nope.yaml"))


def test_settings_path_is_used(profiles_file, settings):
  settings.ATTRIBUTE_SCHEMA_PROFILES_PATH = str(profiles_file)

  assert load_profile().name == "dev"


def test_adapter_from_profile(profiles_file):
  adapter = adapter_from_profile(load_profile("legacy", profiles_path=str(profiles_file)))
  try:
    assert isinstance(adapter, SqlAlchemyAdapter)
    assert adapter.table_prefix() == "0"
    assert adapter.dialect() == "sqlite"
  finally:
    adapter.close()


def test_adapter_from_profile_explicit_values_win(profiles_file):
  profile = load_profile("dev", profiles_path=str(profiles_file))
  adapter = adapter_from_profile(profile, table_prefix="", dialect="mysql")
  try:
    assert adapter.table_prefix() == ""
    assert adapter.dialect() == "mysql"
  finally:
    adapter.close()


def test_adapter_from_profile_requires_url(profiles_file):
  profile = load_profile("empty", profiles_path=str(profiles_file))

  with pytest.raises(ValueError, match="has no database_url"):
    adapter_from_profile(profile)


def test_profile_defaults():
  profile = Profile(name="bare")

  assert profile.database_url is None
  assert profile.table_prefix == ""
  assert profile.dialect is None
