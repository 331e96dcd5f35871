# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schema for aocw.

A config file is optional. Every section has defaults that reproduce the
tool's built-in behaviour (plain `cargo` and `git` from PATH, no timeouts,
inputs under `inputs/`), so `AocwConfig.default()` is what runs when no
`--config` is given.

All models are frozen pydantic v2 models with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown keys fail loudly instead of being ignored
  - validate_default=True: defaults get type-checked too
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_COMMIT_MESSAGE = "Initial commit: Advent of Code workspace"


class GlobalConfig(BaseModel):
    """Cross-cutting settings: config version and log output."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        default="1.0.0",
        description="Schema version for compatibility tracking, e.g. '1.0.0'",
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return upper


class ToolchainConfig(BaseModel):
    """
    Which external binaries to call and how long to let them run.

    timeout_seconds is None by default: a hung build blocks until it
    finishes. Set it to have the executor kill the process and raise
    CommandTimeoutError instead. env is layered over the inherited
    environment of every command.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    cargo: str = Field(default="cargo", min_length=1, description="Cargo executable")
    git: str = Field(default="git", min_length=1, description="Git executable")
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Kill any external command that runs longer than this",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for cargo and git, e.g. CARGO_TARGET_DIR",
    )


class WorkspaceConfig(BaseModel):
    """Settings for `aocw init`."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    commit_message: str = Field(
        default=DEFAULT_COMMIT_MESSAGE,
        min_length=1,
        description="Message of the single commit made after scaffolding",
    )


class RunnerConfig(BaseModel):
    """Settings for `aocw run`, `aocw check` and `aocw test`."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    workspace_root: Optional[str] = Field(
        default=None,
        description="Workspace to operate on; the current directory when unset",
    )
    input_directory: str = Field(
        default="inputs",
        description="Where dayNN.txt input files live, relative to the workspace",
    )


class AocwConfig(BaseModel):
    """Top-level config container. Every section is optional in the YAML."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)

    @classmethod
    def default(cls) -> "AocwConfig":
        return cls.model_validate({})
