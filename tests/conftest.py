"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import subprocess
from typing import List, Optional, Tuple

import pytest

from ptv5_winners import runner
from ptv5_winners.networks import NETWORKS


class FakeSubprocess:
    """
    Stands in for subprocess.run. Records every call and fails the first
    `main_failures` compileWinners runs with a non-zero exit.
    """

    def __init__(
        self,
        main_failures: int = 0,
        version_check_ok: bool = True,
        install_ok: bool = True,
        main_error: Optional[BaseException] = None,
        version_check_exits_non_zero: bool = False,
    ) -> None:
        self.main_failures = main_failures
        self.version_check_ok = version_check_ok
        self.install_ok = install_ok
        self.main_error = main_error
        self.version_check_exits_non_zero = version_check_exits_non_zero
        self.calls: List[Tuple[List[str], Optional[dict]]] = []

    def __call__(self, cmd, check=False, env=None, **kwargs):
        cmd = list(cmd)
        self.calls.append((cmd, env))
        kind = self.kind(cmd)

        if kind == "version_check" and not self.version_check_ok:
            if self.version_check_exits_non_zero:
                raise subprocess.CalledProcessError(127, cmd)
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if kind == "install" and not self.install_ok:
            raise subprocess.CalledProcessError(1, cmd)
        if kind == "main" and len(self.main_calls) <= self.main_failures:
            if self.main_error is not None:
                raise self.main_error
            raise subprocess.CalledProcessError(1, cmd)
        return subprocess.CompletedProcess(cmd, 0)

    @staticmethod
    def kind(cmd: List[str]) -> str:
        if cmd[0] == "npm":
            return "install"
        if cmd[1:] == ["--version"]:
            return "version_check"
        return "main"

    def of_kind(self, kind: str) -> List[Tuple[List[str], Optional[dict]]]:
        return [c for c in self.calls if self.kind(c[0]) == kind]

    @property
    def main_calls(self):
        return self.of_kind("main")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no RPC variables exported."""
    monkeypatch.chdir(tmp_path)
    for profile in NETWORKS.values():
        # setenv first so the later delenv is undone on teardown.
        monkeypatch.setenv(profile.rpc_env_var, "")
        monkeypatch.delenv(profile.rpc_env_var)
    return tmp_path


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs) -> FakeSubprocess:
        fake = FakeSubprocess(**kwargs)
        monkeypatch.setattr(runner.subprocess, "run", fake)
        return fake

    return install
