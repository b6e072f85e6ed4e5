"""Unit tests for Config and related Pydantic models (create_project.config).

Tests cover:
- RegistryConfig / CIConfig defaults and validation
- Config.from_env
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_project.config import CIConfig, Config, RegistryConfig
from create_project.models import PackageManager


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class TestRegistryConfig:
    @pytest.mark.unit
    def test_defaults(self):
        registry = RegistryConfig()
        assert registry.url == "https://registry.npmjs.org"
        assert registry.timeout == 3.0
        assert registry.offline is False

    @pytest.mark.unit
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            RegistryConfig(timeout=0)


class TestCIConfig:
    @pytest.mark.unit
    def test_default_node_version(self):
        assert CIConfig().node_version == "20"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.default_package_manager is PackageManager.NPM
        assert isinstance(config.registry, RegistryConfig)
        assert isinstance(config.ci, CIConfig)

    @pytest.mark.unit
    def test_package_manager_coerced(self):
        config = Config(default_package_manager="pnpm")
        assert config.default_package_manager is PackageManager.PNPM


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_environment_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_reads_all_variables(self):
        env = {
            "CREATE_PROJECT_REGISTRY_URL": "http://localhost:4873/",
            "CREATE_PROJECT_REGISTRY_TIMEOUT": "1.5",
            "CREATE_PROJECT_OFFLINE": "yes",
            "CREATE_PROJECT_NODE_VERSION": "22",
            "CREATE_PROJECT_PACKAGE_MANAGER": "yarn",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.registry.url == "http://localhost:4873"
        assert config.registry.timeout == 1.5
        assert config.registry.offline is True
        assert config.ci.node_version == "22"
        assert config.default_package_manager is PackageManager.YARN

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("0", False), ("no", False)])
    def test_offline_flag_parsing(self, value: str, expected: bool):
        with patch.dict(os.environ, {"CREATE_PROJECT_OFFLINE": value}, clear=True):
            assert Config.from_env().registry.offline is expected

    @pytest.mark.unit
    def test_invalid_package_manager(self):
        with patch.dict(os.environ, {"CREATE_PROJECT_PACKAGE_MANAGER": "bun"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()

    @pytest.mark.unit
    def test_non_numeric_timeout(self):
        with patch.dict(os.environ, {"CREATE_PROJECT_REGISTRY_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValueError):
                Config.from_env()
