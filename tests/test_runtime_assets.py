"""Tests for locating the bundled piece SVGs."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chessgrid import runtime_assets
from chessgrid.runtime_assets import PIECES_DIR, missing_piece_svgs, piece_svg_path
from chessgrid.ui import bootstrap


def test_pieces_dir_lives_inside_the_package() -> None:
    package_dir = Path(runtime_assets.__file__).resolve().parent
    assert PIECES_DIR == package_dir / "assets" / "pieces"
    assert PIECES_DIR.is_dir()


def test_piece_svg_path_uses_resource_key() -> None:
    path = piece_svg_path("b_knight")
    assert path == PIECES_DIR / "b_knight.svg"
    assert path.is_file()


def test_missing_piece_svgs_reports_unknown_keys() -> None:
    assert missing_piece_svgs(["w_rook", "w_dragon", "b_king"]) == ["w_dragon"]


def test_all_piece_svgs_present() -> None:
    names = ("pawn", "knight", "bishop", "rook", "queen", "king")
    keys = [f"{c}_{name}" for c in "wb" for name in names]
    assert missing_piece_svgs(keys) == []


def test_startup_check_warns_about_missing_assets(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(runtime_assets, "PIECES_DIR", tmp_path)

    with caplog.at_level(logging.WARNING, logger="chessgrid.ui.bootstrap"):
        bootstrap._check_piece_assets()

    assert "w_pawn" in caplog.text
    assert "b_king" in caplog.text


def test_startup_check_quiet_when_assets_present(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="chessgrid.ui.bootstrap"):
        bootstrap._check_piece_assets()

    assert caplog.records == []
