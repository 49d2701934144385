"""
Zip bundles of a generated model: model.json + weights.bin, named after the
model.
"""

import io
import zipfile

import numpy as np

from .model import Architecture
from .serialize import (
    architecture_from_json,
    architecture_to_json,
    read_weights,
    weights_to_bytes,
)
from .weights import WeightBuffer

__all__ = [
    "build_archive",
    "read_archive",
]

MODEL_FILE = "model.json"
WEIGHTS_FILE = "weights.bin"
ARCHIVE_EXT = ".zip"


def build_archive(
    architecture: Architecture, weights: WeightBuffer, model_name: str
) -> tuple[bytes, str]:
    """
    Returns (zip_bytes, suggested_filename).
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(MODEL_FILE, architecture_to_json(architecture))
        zf.writestr(
            WEIGHTS_FILE,
            weights_to_bytes(model_name, architecture.total_parameters, weights),
        )
    return buf.getvalue(), f"{model_name}{ARCHIVE_EXT}"


def read_archive(data: bytes) -> tuple[Architecture, dict[str, str], np.ndarray]:
    try:
        with zipfile.ZipFile(io.BytesIO(data), "r") as zf:
            names = zf.namelist()
            missing = [n for n in (MODEL_FILE, WEIGHTS_FILE) if n not in names]
            if missing:
                raise ValueError(f"Archive is missing {', '.join(missing)}")
            architecture = architecture_from_json(zf.read(MODEL_FILE))
            header, weights = read_weights(zf.read(WEIGHTS_FILE))
    except zipfile.BadZipFile as e:
        raise ValueError("Not a valid ZIP archive") from e
    return architecture, header, weights
