"""Unit tests for fen_viewer/core/config.py"""

import pytest
from pydantic import ValidationError

from fen_viewer.core.config import DEFAULT_RGBA, DEFAULT_TILE_SIZE, RendererConfig


def test_defaults() -> None:
    config = RendererConfig()
    assert config.tile_size == DEFAULT_TILE_SIZE == 25
    assert config.rgba == DEFAULT_RGBA == (128, 64, 255, 255)
    assert config.board_size == 200


def test_light_color_halves_every_channel() -> None:
    config = RendererConfig(rgba=(128, 64, 255, 255))
    assert config.light_rgba == (64, 32, 127, 127)


@pytest.mark.parametrize("tile_size, marker_size", [(25, 6), (8, 2), (40, 10), (1, 1), (2, 1)])
def test_marker_size(tile_size: int, marker_size: int) -> None:
    assert RendererConfig(tile_size=tile_size).marker_size == marker_size


@pytest.mark.parametrize("tile_size", [0, -25])
def test_tile_size_must_be_positive(tile_size: int) -> None:
    with pytest.raises(ValidationError):
        RendererConfig(tile_size=tile_size)


@pytest.mark.parametrize("rgba", [(256, 0, 0, 255), (0, -1, 0, 255), (0, 0, 0)])
def test_invalid_colors(rgba: tuple) -> None:
    with pytest.raises(ValidationError):
        RendererConfig(rgba=rgba)


def test_config_is_frozen() -> None:
    """A different configuration needs a new renderer (and thus a new tile cache)"""
    config = RendererConfig()
    with pytest.raises(ValidationError):
        config.tile_size = 50


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEN_VIEWER_TILE_SIZE", "32")
    monkeypatch.setenv("FEN_VIEWER_RGBA", "10,20,30,40")
    config = RendererConfig.from_env()
    assert config.tile_size == 32
    assert config.rgba == (10, 20, 30, 40)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FEN_VIEWER_TILE_SIZE", raising=False)
    monkeypatch.delenv("FEN_VIEWER_RGBA", raising=False)
    assert RendererConfig.from_env() == RendererConfig()
