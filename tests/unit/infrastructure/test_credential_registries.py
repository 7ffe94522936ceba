"""Tests for the credential registries."""

import json
from pathlib import Path

import pytest

from azmgmt.domain.base.exceptions import ConfigurationError
from azmgmt.domain.credentials import CredentialSource, select_default_profile
from azmgmt.infrastructure.registry.json_registry import JsonCredentialRegistry


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.mark.unit
class TestJsonCredentialRegistry:
    """Test loading profiles from a JSON file."""

    def test_profiles_in_file_order(self, temp_dir, logger):
        registry_file = _write(
            temp_dir / "credentials.json",
            {
                "profiles": [
                    {
                        "kind": "azure-management",
                        "name": "dev",
                        "subscription_id": "sub-dev",
                        "certificate_file": "dev.pem",
                    },
                    {
                        "kind": "azure-management",
                        "name": "prod",
                        "default": True,
                        "subscription_id": "sub-prod",
                        "certificate_file": "/abs/prod.pem",
                        "key_file": "prod.key",
                    },
                ]
            },
        )

        profiles = JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert [p.name for p in profiles] == ["dev", "prod"]
        assert [p.is_default for p in profiles] == [False, True]
        assert profiles[0].credentials.certificate.certificate_file == temp_dir / "dev.pem"
        assert profiles[1].credentials.certificate.certificate_file == Path("/abs/prod.pem")
        assert profiles[1].credentials.certificate.key_file == temp_dir / "prod.key"
        assert profiles[1].credentials.source is CredentialSource.PROFILE
        assert profiles[1].credentials.profile_name == "prod"

    def test_filters_by_kind(self, temp_dir, logger):
        registry_file = _write(
            temp_dir / "credentials.json",
            {
                "profiles": [
                    {"kind": "storage", "name": "s", "subscription_id": "x", "certificate_file": "s.pem"},
                    {"name": "untyped", "subscription_id": "y", "certificate_file": "u.pem"},
                ]
            },
        )

        profiles = JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert [p.name for p in profiles] == ["untyped"]

    def test_missing_file_has_no_profiles(self, temp_dir, logger):
        registry = JsonCredentialRegistry(temp_dir / "absent.json", logger)

        assert registry.profiles_for("azure-management") == ()

    def test_invalid_json_is_configuration_error(self, temp_dir, logger):
        registry_file = temp_dir / "credentials.json"
        registry_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

    def test_wrong_shape_is_configuration_error(self, temp_dir, logger):
        registry_file = _write(temp_dir / "credentials.json", ["not", "a", "mapping"])

        with pytest.raises(ConfigurationError):
            JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

    def test_profile_without_certificate_is_configuration_error(self, temp_dir, logger):
        registry_file = _write(
            temp_dir / "credentials.json",
            {"profiles": [{"name": "broken", "subscription_id": "sub"}]},
        )

        with pytest.raises(ConfigurationError) as exc_info:
            JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert exc_info.value.details["profile"] == "broken"

    @pytest.mark.parametrize(
        "flag,expected",
        [("false", False), ("true", True), ("0", False), (1, True), (None, False)],
    )
    def test_default_flag_uses_boolean_parsing(self, temp_dir, logger, flag, expected):
        registry_file = _write(
            temp_dir / "credentials.json",
            {
                "profiles": [
                    {"name": "a", "default": flag, "subscription_id": "sub-a", "certificate_file": "a.pem"},
                ]
            },
        )

        profiles = JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert profiles[0].is_default is expected

    def test_string_false_does_not_shadow_real_default(self, temp_dir, logger):
        registry_file = _write(
            temp_dir / "credentials.json",
            {
                "profiles": [
                    {"name": "staging", "default": "false", "subscription_id": "sub-s", "certificate_file": "s.pem"},
                    {"name": "prod", "default": True, "subscription_id": "sub-p", "certificate_file": "p.pem"},
                ]
            },
        )

        profiles = JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert [p.is_default for p in profiles] == [False, True]
        assert select_default_profile(profiles).name == "prod"

    def test_unparseable_default_flag_is_configuration_error(self, temp_dir, logger):
        registry_file = _write(
            temp_dir / "credentials.json",
            {
                "profiles": [
                    {"name": "odd", "default": "maybe", "subscription_id": "sub", "certificate_file": "o.pem"},
                ]
            },
        )

        with pytest.raises(ConfigurationError) as exc_info:
            JsonCredentialRegistry(registry_file, logger).profiles_for("azure-management")

        assert exc_info.value.details["profile"] == "odd"
