from __future__ import annotations

import os
from pathlib import Path

import pytest

from gradle_patterns.config import (
    POLICY_ENV_VAR,
    MissingConfigurationError,
    get_policy_source,
    optional_env_var,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.delenv("OTHER_MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["OTHER_MISSING_VAR", "MISSING_VAR"])

    assert "MISSING_VAR, OTHER_MISSING_VAR" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_policy_source_prefers_explicit_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(POLICY_ENV_VAR, "/from/env.toml")

    source = get_policy_source("explicit.toml")

    assert source.path == Path("explicit.toml")


def test_policy_source_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(POLICY_ENV_VAR, "~/policy.toml")

    source = get_policy_source()

    assert source.path == Path("~/policy.toml")
    assert source.resolve_path() == (Path(os.path.expanduser("~")) / "policy.toml").resolve()


def test_policy_source_requires_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(POLICY_ENV_VAR, raising=False)

    with pytest.raises(MissingConfigurationError, match=POLICY_ENV_VAR):
        get_policy_source()


def test_require_env_vars_reads_injected_mapping() -> None:
    environ = {"FIRST": " one ", "SECOND": "two"}

    assert require_env_vars(["FIRST", "SECOND"], environ=environ) == {
        "FIRST": "one",
        "SECOND": "two",
    }


def test_optional_env_var_treats_blank_as_unset() -> None:
    assert optional_env_var("NAME", environ={"NAME": "  "}) is None
    assert optional_env_var("NAME", environ={}) is None
    assert optional_env_var("NAME", environ={"NAME": "x"}) == "x"
