"""Installation check tests — PATH points at a temporary directory."""
from __future__ import annotations

import os
import stat

import pytest

from ocr_service.core.errors import OCRNotInstalledError
from ocr_service.ocr.client import check_tesseract_installation


def _make_executable(directory, name: str = "tesseract") -> str:
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_installation_found_on_path(tmp_path, monkeypatch) -> None:
    expected = _make_executable(tmp_path)
    monkeypatch.setenv("PATH", str(tmp_path))
    assert check_tesseract_installation() == expected


def test_installation_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(OCRNotInstalledError, match="tesseract is not installed"):
        check_tesseract_installation()


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_installation_custom_binary_name(tmp_path, monkeypatch) -> None:
    _make_executable(tmp_path, "tesseract5")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert check_tesseract_installation("tesseract5").endswith("tesseract5")
    with pytest.raises(OCRNotInstalledError, match="tesseract is not installed"):
        check_tesseract_installation()


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_installation_ignores_client_state(tmp_path, monkeypatch, client) -> None:
    _make_executable(tmp_path)
    monkeypatch.setenv("PATH", str(tmp_path))
    client.close()
    assert check_tesseract_installation().endswith("tesseract")
