import json

from sample_elevation.config import ConfigSchema
from sample_elevation.core.rng import make_rng
from sample_elevation.engine.runner import run


def _config(tmp_path, **grid):
    cfg = ConfigSchema(grid=grid or {})
    cfg.outputs.path = tmp_path / "sampleElevation.json"
    return cfg


def test_run_writes_default_shape(tmp_path):
    cfg = _config(tmp_path)
    assert run(cfg) is True
    doc = json.loads(cfg.outputs.path.read_text())
    assert doc["width"] == 50 and doc["height"] == 50
    assert len(doc["data"]) == 2500


def test_run_structure_is_stable_across_runs(tmp_path):
    cfg = _config(tmp_path)
    docs = []
    for _ in range(3):
        run(cfg)
        docs.append(json.loads(cfg.outputs.path.read_text()))
    assert all((d["width"], d["height"], len(d["data"])) == (50, 50, 2500) for d in docs)


def test_seeded_runs_are_reproducible(tmp_path):
    cfg = _config(tmp_path, width=6, height=4)
    cfg.seed = 42
    run(cfg)
    first = cfg.outputs.path.read_text()
    run(cfg)
    assert cfg.outputs.path.read_text() == first


def test_injected_rng_overrides_seed(tmp_path):
    cfg = _config(tmp_path, width=3, height=3)
    cfg.seed = 1
    run(cfg, rng=make_rng(2))
    injected = cfg.outputs.path.read_text()
    run(cfg)
    assert cfg.outputs.path.read_text() != injected


def test_run_reports_failure(tmp_path, capsys):
    cfg = _config(tmp_path)
    cfg.outputs.path = tmp_path / "no" / "such" / "dir" / "out.json"
    assert run(cfg) is False
    assert "Error writing sample data" in capsys.readouterr().err


def test_run_can_create_output_dir(tmp_path):
    cfg = _config(tmp_path, width=2, height=2)
    cfg.outputs.path = tmp_path / "data" / "sampleElevation.json"
    cfg.outputs.create_dirs = True
    assert run(cfg) is True
    assert len(json.loads(cfg.outputs.path.read_text())["data"]) == 4
