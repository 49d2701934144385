"""Procedural architecture generation.

generate_architecture() draws a family, a layer count and an input shape,
then stacks layers from the family's palette so every layer consumes the
previous layer's output. A single softmax output layer terminates the stack.

    rng = np.random.default_rng(42)
    arch = generate_architecture(rng)
    arch.num_layers, arch.total_parameters
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import numpy as np

from .config import (
    ATTENTION_FAMILIES,
    FAMILIES,
    GENERATOR_TAG,
    IMAGE_CHANNELS,
    IMAGE_FAMILIES,
    IMAGE_SIZES,
    RNN_EMBED_DIMS,
    RNN_SEQ_LENS,
    SEQUENCE_FAMILIES,
    THEORY_TAG,
    TRANSFORMER_EMBED_DIMS,
    TRANSFORMER_SEQ_LENS,
    VECTOR_DIMS,
)
from .layers import build_layer, build_output_layer, is_valid_params
from .model import Architecture
from .naming import agi_probability
from .rng import pick, randint, resolve_rng
from .shapes import Shape, flatten_size

__all__ = [
    "generate_architecture",
    "random_input_shape",
]

logger = logging.getLogger(__name__)

FALLBACK_PARAMS_RANGE = (1000, 1_000_999)


def random_input_shape(family_key: str, rng) -> Shape:
    """ex) random_input_shape("CNN", rng) -> (224, 224, 3)
    ex) random_input_shape("MLP", rng) -> (784,)
    """
    if family_key in IMAGE_FAMILIES:
        size = pick(rng, IMAGE_SIZES)
        return (size, size, pick(rng, IMAGE_CHANNELS))
    if family_key in SEQUENCE_FAMILIES:
        return (pick(rng, RNN_SEQ_LENS), pick(rng, RNN_EMBED_DIMS))
    if family_key in ATTENTION_FAMILIES:
        return (pick(rng, TRANSFORMER_SEQ_LENS), pick(rng, TRANSFORMER_EMBED_DIMS))
    return (pick(rng, VECTOR_DIMS),)


def generate_architecture(
    rng: Optional[np.random.Generator] = None,
    *,
    generated_at: Optional[str] = None,
) -> Architecture:
    """Generate one random but shape-consistent architecture.

    rng: random source; a fresh ``np.random.default_rng()`` when omitted
    generated_at: timestamp to stamp on the result (defaults to now, UTC)

    Layers whose parameter count comes out invalid are dropped without
    advancing the shape, so ``num_layers`` is the realized count plus the
    output layer and can be lower than the drawn depth.
    """
    rng = resolve_rng(rng)

    family_key = pick(rng, tuple(FAMILIES))
    family = FAMILIES[family_key]
    requested = randint(rng, family.min_layers, family.max_layers)

    input_shape = random_input_shape(family_key, rng)
    current = input_shape
    layers = []

    for i in range(requested):
        kind = pick(rng, family.layer_kinds)
        layer = build_layer(kind, current, i, rng)
        if not is_valid_params(layer.params):
            # Permissive by contract: drop the layer, keep the current shape.
            logger.debug("skipping %s layer %d with params=%r", kind, i, layer.params)
            continue
        layers.append(layer)
        current = layer.output_shape

    # Flatten bridge into the output layer
    if len(current) > 1:
        current = (flatten_size(current),)

    output = build_output_layer(current, rng)
    layers.append(output)

    total = sum(layer.params for layer in layers)
    if not is_valid_params(total) or total <= 0:
        low, high = FALLBACK_PARAMS_RANGE
        total = randint(rng, low, high)
        logger.warning("invalid parameter total, substituting %d", total)

    logger.debug(
        "generated %s: %d/%d layers, %d params",
        family_key,
        len(layers) - 1,
        requested,
        total,
    )

    return Architecture(
        architecture=family_key,
        architecture_name=family.name,
        input_shape=input_shape,
        output_shape=output.output_shape,
        num_layers=len(layers),
        total_parameters=total,
        layers=tuple(layers),
        metadata={
            "generator": GENERATOR_TAG,
            "theory": THEORY_TAG,
            "probability_of_agi": agi_probability(total),
        },
        generated_at=generated_at or datetime.now(timezone.utc).isoformat(),
    )
