"""Tests for saving and loading runs as HDF5."""
from goldenratio.config import RunSettings
from goldenratio.estimator import RatioEstimator
from goldenratio.io import IOManager
from goldenratio.numeric import FloatWidth, IntegerWidth


def _save_and_load(tmp_path, settings):
    run = RatioEstimator(settings).run()
    path = str(tmp_path / "run.h5")
    IOManager.save_run(run, path)
    return run, IOManager.load_run(path)


def test_default_run_survives_saving(tmp_path):
    run, loaded = _save_and_load(tmp_path, RunSettings(show_truncated=True))

    assert loaded.settings == run.settings
    assert loaded.sequence.to_list() == run.sequence.to_list()
    assert loaded.sequence.overflow_index is None
    assert loaded.ratios == run.ratios
    assert loaded.truncated_ratios == run.truncated_ratios


def test_overflow_index_is_kept(tmp_path):
    _, loaded = _save_and_load(tmp_path, RunSettings(integer_width=IntegerWidth.INT32, float_width=FloatWidth.FLOAT32))

    assert loaded.sequence.overflow_index == 47
    assert loaded.sequence.storage.dtype.name == "int32"
    assert loaded.sequence.to_list()[47] < 0
    assert loaded.ratios[-1][1].dtype.name == "float32"


def test_arbitrary_precision_terms(tmp_path):
    settings = RunSettings(length=120, capacity=120, integer_width=IntegerWidth.ARBITRARY)
    run, loaded = _save_and_load(tmp_path, settings)

    assert loaded.sequence.to_list() == run.sequence.to_list()
    assert loaded.sequence.to_list()[119] > 2**63
    assert loaded.truncated_ratios == []
