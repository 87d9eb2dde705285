from __future__ import annotations

import json
import sys
from signal import SIGINT
from typing import TYPE_CHECKING

import pytest

from gradle_patterns.config import LOG_LEVEL_ENV_VAR, POLICY_ENV_VAR
from gradle_patterns.ui import cli as cli_module
from tests.helpers.conventions import KOTLIN, SPRING, TEST

if TYPE_CHECKING:
    from pathlib import Path


def test_cli_resolve_prints_decisions(
    policy_toml: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli_module.main(
        ["resolve", "--policy", str(policy_toml), ":core", ":legacy-module", ":user-service"]
    )

    out = capsys.readouterr().out.splitlines()
    assert out[0] == f":core: apply {KOTLIN}, {TEST}"
    assert out[1] == ":legacy-module: skip"
    assert out[2] == f":user-service: apply {KOTLIN}, {SPRING}"
    assert any("Mode: EXCLUDE specific" in line for line in out)


def test_cli_resolve_json(policy_toml: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["resolve", "--policy", str(policy_toml), "--json", ":core", ":legacy-module"])

    document = json.loads(capsys.readouterr().out)
    assert document["decisions"] == {
        ":core": {"status": "apply", "conventions": [KOTLIN, TEST]},
        ":legacy-module": {"status": "skip"},
    }
    assert document["summary"]["mode"] == "EXCLUDE"
    assert document["summary"]["override_count"] == 1


def test_cli_summary_uses_environment_policy(
    policy_toml: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(POLICY_ENV_VAR, str(policy_toml))

    cli_module.main(["summary", "--json"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["default_conventions"] == [KOTLIN, TEST]
    assert summary["excluded_count"] == 1


def test_cli_missing_policy_exits_with_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(POLICY_ENV_VAR, raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["summary"])

    assert excinfo.value.code == 2


def test_cli_invalid_policy_exits_with_config_error(tmp_path: Path) -> None:
    path = tmp_path / "policy.toml"
    path.write_text('unexpected = ["x"]\n', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["summary", "--policy", str(path)])

    assert excinfo.value.code == 2


def test_cli_unexpected_failure_exits_with_one(
    policy_toml: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def broken_resolve(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "resolve", broken_resolve)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["resolve", "--policy", str(policy_toml), ":core"])

    assert excinfo.value.code == 1


def test_cli_requires_units_for_resolve(policy_toml: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["resolve", "--policy", str(policy_toml)])

    assert excinfo.value.code == 2


def test_cli_invalid_log_level_exits_with_config_error(
    policy_toml: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["summary", "--policy", str(policy_toml)])

    assert excinfo.value.code == 2


def test_cli_verbose_flag_is_accepted(
    policy_toml: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    cli_module.main(["--verbose", "summary", "--policy", str(policy_toml)])

    assert "Mode: EXCLUDE specific" in capsys.readouterr().out


def test_sigint_handler_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.sigint_handler(SIGINT, None)

    assert excinfo.value.code == 0


def test_run_loads_dotenv_from_working_directory(
    policy_toml: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # Registered so teardown also removes the value load_dotenv writes.
    monkeypatch.setenv(POLICY_ENV_VAR, "unset")
    monkeypatch.delenv(POLICY_ENV_VAR)
    (tmp_path / ".env").write_text(f"{POLICY_ENV_VAR}={policy_toml}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["gradle-patterns", "summary"])
    handlers: list[object] = []
    monkeypatch.setattr(cli_module, "signal", lambda _signum, handler: handlers.append(handler))

    cli_module.run()

    assert handlers == [cli_module.sigint_handler]
    assert "Mode: EXCLUDE specific" in capsys.readouterr().out
