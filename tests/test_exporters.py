"""JSON export of recorded growth frames."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from growth import GrowthConfig, GrowthEngine
from rendering.exporters import collect_frame, export_growth_data, load_growth_data


def test_export_and_load_growth_data(tmp_path: Path) -> None:
    engine = GrowthEngine(GrowthConfig(random_seed=0))
    engine.begin_growth()
    frames = [collect_frame(engine)]
    engine.step_growth()
    frames.append(collect_frame(engine))

    out = tmp_path / "nested" / "data.json"
    export_growth_data(engine, frames, str(out))
    data = load_growth_data(str(out))

    assert data["source_width"] == 1600
    assert data["source_height"] == 1200
    assert len(data["boundary"]) == 5
    assert [f["iteration"] for f in data["frames"]] == [0, 1]
    assert len(data["frames"][0]["path"]) == 6
    assert data["frames"][1]["path"] == engine.current_path().tolist()


def test_load_growth_data_rejects_incomplete_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"source_width": 10, "frames": []}))

    with pytest.raises(ValueError):
        load_growth_data(str(path))
