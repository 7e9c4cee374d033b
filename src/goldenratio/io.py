"""
Input/Output Manager (HDF5)
Handles saving and loading finished estimation runs to .h5 files.
"""
import json
import logging
from importlib.metadata import version, PackageNotFoundError
from typing import List, Tuple

import h5py
import numpy as np

from goldenratio.config import RunSettings
from goldenratio.estimator import EstimationRun
from goldenratio.numeric import FloatWidth, IntegerWidth
from goldenratio.sequence import SequenceBuffer

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("goldenratio")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# h5py has no portable extended precision type
_STORED_FLOAT = {
    FloatWidth.FLOAT32: np.float32,
    FloatWidth.FLOAT64: np.float64,
    FloatWidth.LONGDOUBLE: np.float64,
}


class IOManager:

    @staticmethod
    def save_run(run: EstimationRun, filepath: str) -> None:
        logger.info(f"Saving run to: {filepath}")
        settings = run.settings
        sequence = run.sequence
        float_dtype = _STORED_FLOAT[settings.float_width]

        with h5py.File(filepath, "w") as f:
            f.attrs["version"] = APP_VERSION
            f.attrs["settings"] = json.dumps(settings.to_dict())
            f.attrs["capacity"] = sequence.capacity
            f.attrs["length"] = sequence.length
            # -1 marks an exact sequence
            f.attrs["overflow_index"] = -1 if sequence.overflow_index is None else sequence.overflow_index

            # --- 1. SAVE TERMS ---
            if sequence.width.is_fixed:
                f.create_dataset("terms", data=np.asarray(sequence.terms, dtype=np.int64))
            else:
                # Arbitrary precision terms may exceed every numpy integer type
                f.create_dataset(
                    "terms",
                    data=np.array([str(term) for term in sequence.to_list()], dtype=object),
                    dtype=h5py.string_dtype(),
                )

            # --- 2. SAVE RATIOS ---
            IOManager._save_ratios(f, "ratios", run.ratios, float_dtype)
            if run.truncated_ratios:
                IOManager._save_ratios(f, "truncated_ratios", run.truncated_ratios, float_dtype)

        logger.info(f"Run saved to: {filepath}")

    @staticmethod
    def load_run(filepath: str) -> EstimationRun:
        logger.info(f"Loading run from: {filepath}")

        with h5py.File(filepath, "r") as f:
            settings = RunSettings.from_dict(json.loads(f.attrs["settings"]))

            sequence = SequenceBuffer(capacity=int(f.attrs["capacity"]), width=settings.integer_width)
            length = int(f.attrs["length"])
            if settings.integer_width is IntegerWidth.ARBITRARY:
                terms = [int(term) for term in f["terms"].asstr()[()]]
            else:
                terms = f["terms"][()]
            sequence.storage[:length] = np.asarray(terms, dtype=sequence.width.dtype)
            sequence.length = length

            overflow_index = int(f.attrs["overflow_index"])
            sequence.overflow_index = None if overflow_index < 0 else overflow_index

            float_type = settings.float_width.dtype.type
            ratios = IOManager._load_ratios(f, "ratios", float_type)
            truncated = IOManager._load_ratios(f, "truncated_ratios", float_type) if "truncated_ratios" in f else []

        logger.debug(f"Loaded {length} terms and {len(ratios)} ratios.")
        return EstimationRun(settings=settings, sequence=sequence, ratios=ratios, truncated_ratios=truncated)

    @staticmethod
    def _save_ratios(f: h5py.File, name: str, pairs: List[Tuple[int, np.floating]], dtype) -> None:
        grp = f.create_group(name)
        grp.create_dataset("index", data=np.array([i for i, _ in pairs], dtype=np.int64))
        grp.create_dataset("value", data=np.array([value for _, value in pairs], dtype=dtype))

    @staticmethod
    def _load_ratios(f: h5py.File, name: str, float_type) -> List[Tuple[int, np.floating]]:
        grp = f[name]
        return [
            (int(i), float_type(value))
            for i, value in zip(grp["index"][()], grp["value"][()])
        ]
