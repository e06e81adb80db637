"""GrowthConfig scaling and PipelineConfig JSON loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from config import PipelineConfig, load_config, save_config
from growth import GrowthConfig


def test_scaled_values_use_width_and_scale() -> None:
    params = GrowthConfig(width=1200, height=900, scale=12.0).scaled()

    assert params.max_distance == pytest.approx(1200 * 0.1 / 12)
    assert params.least_min_distance == pytest.approx(1200 * 0.03 / 12)
    assert params.repulsion_radius == pytest.approx(1200 * 0.125 / 12)
    assert params.brownian_motion_range == pytest.approx(1200 * 0.005 / 12)
    assert params.repulsion_force == pytest.approx(0.25)
    assert params.alignment_force == pytest.approx(0.175)
    assert (params.center_x, params.center_y) == (600.0, 450.0)
    assert params.bounds_radius == 300.0
    assert params.seed_radius == 100.0


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(str(tmp_path / "missing.json"))
    assert config == PipelineConfig()


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "pipeline.json"
    original = PipelineConfig(run_name="coral", bounds_side_count=7, max_nodes=5000, random_seed=9)

    save_config(original, str(path))

    assert load_config(str(path)) == original


def test_load_config_fills_defaults_and_warns_on_unknown_keys(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "pipeline.json"
    path.write_text(json.dumps({"run_name": "veins", "colour": "red"}))

    config = load_config(str(path))

    assert config.run_name == "veins"
    assert config.max_distance == PipelineConfig().max_distance
    assert "colour" in capsys.readouterr().out


def test_output_paths_derive_from_run_name() -> None:
    config = PipelineConfig(run_name="coral", output_base="out")

    assert config.growth_render_data_path == Path("out/growth/coral_render_data.json")
    assert config.render_animation_path == Path("out/rendering/coral_growth.gif")


def test_growth_config_from_pipeline() -> None:
    pipeline = PipelineConfig(bounds_side_count=8, max_distance=0.125, width=800, height=600,
                              max_iterations=10, random_seed=4)

    config = GrowthConfig.from_pipeline(pipeline)

    assert config.bounds_side_count == 8
    assert config.max_distance == 0.125
    assert (config.width, config.height) == (800, 600)
    assert config.max_iterations == 10
    assert config.random_seed == 4
    config.validate()


@pytest.mark.parametrize("frame_skip", [0, -2, 1.5])
def test_load_config_rejects_invalid_frame_skip(tmp_path: Path, frame_skip) -> None:
    path = tmp_path / "pipeline.json"
    path.write_text(json.dumps({"frame_skip": frame_skip}))

    with pytest.raises(ValueError):
        load_config(str(path))
