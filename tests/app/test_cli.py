from __future__ import annotations

import io
import json
import logging
from typing import TYPE_CHECKING

import pytest

from envplugins.app import NOT_MU_PLUGIN_MESSAGE
from envplugins.ui import cli

if TYPE_CHECKING:
    from pathlib import Path

SNAPSHOT = {
    "active_plugins": ["akismet/akismet.php", "hello.php"],
    "active_sitewide_plugins": {"wordfence/wordfence.php": 1600000000},
}


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path


@pytest.fixture
def authorized_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WPMU_PLUGIN_DIR", "/srv/mu-plugins")
    monkeypatch.setenv("ENVPLUGINS_INSTALL_DIR", "/srv/mu-plugins/envplugins")


@pytest.mark.usefixtures("authorized_env")
def test_cli_reconciles_snapshot_file(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    snapshot_file: Path,
) -> None:
    monkeypatch.setenv("ENABLED_PLUGINS", "query-monitor/query-monitor.php")
    monkeypatch.setenv("DISABLED_PLUGINS", "hello.php,wordfence/wordfence.php")

    cli.main(["--snapshot", str(snapshot_file)])

    output = json.loads(capsys.readouterr().out)
    assert output["active_plugins"] == [
        "akismet/akismet.php",
        "query-monitor/query-monitor.php",
    ]
    assert set(output["active_sitewide_plugins"]) == {"query-monitor/query-monitor.php"}


@pytest.mark.usefixtures("authorized_env")
def test_cli_reads_stdin_and_limits_scope(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("DISABLED_PLUGINS", "hello.php,wordfence/wordfence.php")
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(SNAPSHOT)))

    cli.main(["--scope", "local"])

    output = json.loads(capsys.readouterr().out)
    assert output["active_plugins"] == ["akismet/akismet.php"]
    assert output["active_sitewide_plugins"] == SNAPSHOT["active_sitewide_plugins"]


def test_cli_echoes_snapshot_without_configuration(
    capsys: pytest.CaptureFixture[str],
    snapshot_file: Path,
) -> None:
    cli.main(["--snapshot", str(snapshot_file)])

    assert json.loads(capsys.readouterr().out) == SNAPSHOT


def test_cli_leaves_snapshot_alone_outside_mu_plugins(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
    snapshot_file: Path,
) -> None:
    caplog.set_level(logging.WARNING)
    monkeypatch.setenv("WPMU_PLUGIN_DIR", "/srv/mu-plugins")
    monkeypatch.setenv("ENVPLUGINS_INSTALL_DIR", "/srv/plugins/envplugins")
    monkeypatch.setenv("DISABLED_PLUGINS", "hello.php")

    cli.main(["--snapshot", str(snapshot_file), "--admin"])

    assert json.loads(capsys.readouterr().out) == SNAPSHOT
    assert caplog.text.count(NOT_MU_PLUGIN_MESSAGE) == 1


def test_cli_exits_with_2_on_invalid_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--snapshot", str(path)])

    assert excinfo.value.code == 2


def test_cli_exits_with_2_on_missing_snapshot(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--snapshot", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 2


def test_cli_strict_requires_trusted_dir(snapshot_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--snapshot", str(snapshot_file), "--strict"])

    assert excinfo.value.code == 2


def test_cli_exits_with_2_on_invalid_plugin_list(
    monkeypatch: pytest.MonkeyPatch, snapshot_file: Path
) -> None:
    monkeypatch.setenv("ENABLED_PLUGINS", "[broken")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--snapshot", str(snapshot_file)])

    assert excinfo.value.code == 2


def test_cli_exits_with_1_on_unexpected_error(
    monkeypatch: pytest.MonkeyPatch, snapshot_file: Path
) -> None:
    def explode(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "reconcile_snapshot", explode)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--snapshot", str(snapshot_file)])

    assert excinfo.value.code == 1
