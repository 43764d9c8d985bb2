""" Shared fixtures: a fake curl and an isolated settings file. """

import subprocess

import pytest

CURL_8_16 = (
    "curl 8.16.0 (x86_64-pc-linux-gnu) libcurl/8.16.0 OpenSSL/3.0.13 zlib/1.3\n"
    "Release-Date: 2025-09-10\n"
    "Protocols: dict file ftp ftps http https\n"
)


class FakeCurl:
    """ Stands in for `subprocess.run`, answering `--version` and recording calls. """

    def __init__(self, version_output=CURL_8_16, returncode=0):
        self.version_output = version_output
        self.returncode = returncode
        self.calls = []

    def run(self, command, **kwargs):
        command = list(command)
        self.calls.append(command)
        if command[1:] == ["--version"]:
            return subprocess.CompletedProcess(
                command, 0, stdout=self.version_output, stderr=""
            )
        return subprocess.CompletedProcess(command, self.returncode)

    @property
    def transfers(self):
        return [call for call in self.calls if call[1:] != ["--version"]]


@pytest.fixture
def fake_curl(monkeypatch):
    fake = FakeCurl()
    monkeypatch.setattr(subprocess, "run", fake.run)
    return fake


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """ Keeps the user's own settings file out of every test. """
    path = tmp_path / "config.ini"
    monkeypatch.setenv("WCURL_CONFIG", str(path))
    return path
