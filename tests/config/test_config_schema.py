# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Schema-level validation tests.

These focus on the pydantic models themselves: boundary values, constraint
enforcement, and structural correctness.
"""

import pytest
from pydantic import ValidationError

from aocw.config.schema import (
    DEFAULT_COMMIT_MESSAGE,
    AocwConfig,
    GlobalConfig,
    RunnerConfig,
    ToolchainConfig,
    WorkspaceConfig,
)


class TestGlobalConfigSchema:
    def test_default_log_level_is_info(self) -> None:
        assert GlobalConfig().log_level == "INFO"

    def test_log_level_is_normalised(self) -> None:
        assert GlobalConfig(log_level="warning").log_level == "WARNING"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(log_level="chatty")

    def test_log_file_defaults_to_none(self) -> None:
        assert GlobalConfig().log_file is None


class TestToolchainConfigSchema:
    def test_defaults_use_path_binaries(self) -> None:
        config = ToolchainConfig()
        assert config.cargo == "cargo"
        assert config.git == "git"
        assert config.timeout_seconds is None
        assert config.env == {}

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            ToolchainConfig(timeout_seconds=timeout)

    def test_empty_binary_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToolchainConfig(cargo="")

    def test_unknown_field_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToolchainConfig(rustc="rustc")  # type: ignore[call-arg]


class TestSectionDefaults:
    def test_workspace_commit_message(self) -> None:
        assert WorkspaceConfig().commit_message == DEFAULT_COMMIT_MESSAGE

    def test_runner_defaults(self) -> None:
        config = RunnerConfig()
        assert config.workspace_root is None
        assert config.input_directory == "inputs"


class TestAocwConfigSchema:
    def test_every_section_is_optional(self) -> None:
        config = AocwConfig.default()
        assert config.global_config.log_level == "INFO"
        assert config.runner.input_directory == "inputs"

    def test_global_section_uses_alias(self) -> None:
        config = AocwConfig.model_validate({"global": {"log_level": "debug"}})
        assert config.global_config.log_level == "DEBUG"

    def test_rejects_top_level_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            AocwConfig.model_validate({"unknown_section": {"something": True}})

    def test_models_are_frozen(self) -> None:
        config = AocwConfig.default()
        with pytest.raises(ValidationError):
            config.toolchain.cargo = "other"  # type: ignore[misc]
