"""model.json / weights.bin encoders and their parsers.

weights.bin is a newline-terminated text header followed by raw
little-endian float32 values:

    RANDAGI_WEIGHTS_V1
    model: CHAOS-Quantum-3.5-1.2M
    total_params: 1234567
    actual_params: 1234567
    truncated: false
    dtype: float32
    ---
    <actual_params * 4 bytes>
"""

import json

import numpy as np

from .config import HEADER_SEPARATOR, WEIGHTS_DTYPE, WEIGHTS_MAGIC
from .model import Architecture
from .weights import WeightBuffer

__all__ = [
    "architecture_to_json",
    "architecture_from_json",
    "weights_header",
    "weights_to_bytes",
    "read_weights",
]


def architecture_to_json(architecture: Architecture) -> str:
    return json.dumps(architecture.to_dict(), indent=2)


def architecture_from_json(text: str | bytes) -> Architecture:
    try:
        return Architecture.from_dict(json.loads(text))
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed architecture document: {e!r}") from e


def weights_header(model_name: str, total_parameters: int, weights: WeightBuffer) -> bytes:
    """total_parameters is the architecture's count, not the materialized one."""
    lines = [
        WEIGHTS_MAGIC,
        f"model: {model_name}",
        f"total_params: {total_parameters}",
        f"actual_params: {weights.actual_params}",
        f"truncated: {str(weights.truncated).lower()}",
        f"dtype: {WEIGHTS_DTYPE}",
        HEADER_SEPARATOR,
    ]
    return "".join(line + "\n" for line in lines).encode("utf-8")


def weights_to_bytes(model_name: str, total_parameters: int, weights: WeightBuffer) -> bytes:
    return weights_header(model_name, total_parameters, weights) + weights.to_bytes()


def read_weights(blob: bytes) -> tuple[dict[str, str], np.ndarray]:
    """Split a weights.bin into its header fields and float32 payload.

    ex) header, data = read_weights(blob); header["actual_params"] -> "1000"
    """
    magic = (WEIGHTS_MAGIC + "\n").encode("utf-8")
    if not blob.startswith(magic):
        raise ValueError("Not a RAND.AGI weights file (missing format tag)")

    marker = ("\n" + HEADER_SEPARATOR + "\n").encode("utf-8")
    end = blob.find(marker)
    if end < 0:
        raise ValueError("Weights header is not terminated")

    header: dict[str, str] = {}
    for line in blob[len(magic):end].decode("utf-8").splitlines():
        key, sep, value = line.partition(": ")
        if not sep:
            raise ValueError(f"Malformed header line: {line!r}")
        header[key] = value

    payload = blob[end + len(marker):]
    expected = int(header.get("actual_params", -1))
    if len(payload) != expected * 4:
        raise ValueError(
            f"Payload holds {len(payload)} bytes, expected {expected * 4}"
        )
    return header, np.frombuffer(payload, dtype="<f4")
