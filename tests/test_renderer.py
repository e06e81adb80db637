"""Cairo rendering of a growth frame."""

from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("cairo")

from config.render_config import GrowthRenderConfig  # noqa: E402
from growth import GrowthConfig, GrowthEngine  # noqa: E402
from rendering.exporters import collect_frame  # noqa: E402
from rendering.growth_renderer import GrowthRenderer  # noqa: E402


def _data() -> dict:
    engine = GrowthEngine(GrowthConfig())
    engine.begin_growth()
    return {
        "source_width": 1600,
        "source_height": 1200,
        "boundary": engine.current_boundary().tolist(),
        "frames": [collect_frame(engine)],
    }


def test_render_frame_fills_path_over_background() -> None:
    config = GrowthRenderConfig(output_width=160, output_height=120)
    frame = GrowthRenderer(config).render_frame(_data())

    assert frame.shape == (120, 160, 4)
    assert frame.dtype == np.uint8

    background = np.round(np.array(config.background_color) * 255)
    foreground = np.round(np.array(config.foreground_color) * 255)
    np.testing.assert_allclose(frame[2, 2], background, atol=2)
    np.testing.assert_allclose(frame[60, 80], foreground, atol=2)


def test_save_frame_writes_png(tmp_path) -> None:
    out = tmp_path / "frame.png"
    GrowthRenderer(GrowthRenderConfig(output_width=80, output_height=60)).save_frame(_data(), str(out))

    assert out.exists()
    assert out.stat().st_size > 0
