"""RAND.AGI - The AI Slot Machine.
Generates random (but shape-consistent) neural network architectures and
matching weight files. No actual machine learning is involved.
"""

from .model import (
    Architecture,
    Layer,
)
from .generator import (
    generate_architecture,
    random_input_shape,
)
from .layers import (
    build_layer,
    build_output_layer,
)
from .weights import (
    WeightBuffer,
    generate_weights,
)
from .naming import (
    agi_probability,
    format_params,
    generate_model_name,
)
from .serialize import (
    architecture_from_json,
    architecture_to_json,
    read_weights,
    weights_header,
    weights_to_bytes,
)
from .package import build_archive, read_archive
from .config import FAMILIES, MAX_PARAMS

__all__ = [
    "Architecture",
    "Layer",
    "generate_architecture",
    "random_input_shape",
    "build_layer",
    "build_output_layer",
    "WeightBuffer",
    "generate_weights",
    "agi_probability",
    "format_params",
    "generate_model_name",
    "architecture_from_json",
    "architecture_to_json",
    "read_weights",
    "weights_header",
    "weights_to_bytes",
    "build_archive",
    "read_archive",
    "FAMILIES",
    "MAX_PARAMS",
]
