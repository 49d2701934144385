"""Shape and parameter-count rules for every layer kind.

Each rule receives the shape produced by the previous layer. Missing
dimensions fall back to fixed defaults so a rule never fails, e.g. a conv2d
fed a (seq, features) tensor treats it as a 3-channel image. The layer always
records the shape it actually received as ``input_shape``.
"""

from .config import ACTIVATIONS, ATTENTION_HEADS, NORM_KINDS, OUTPUT_INDEX, OUTPUT_SIZES
from .model import Layer
from .rng import coin_flip, pick, randint
from .shapes import Shape, dim_or_default, flatten_size, last_dimension

__all__ = [
    "build_layer",
    "build_output_layer",
    "is_valid_params",
]

CONV_KERNEL = (3, 3)
POOL_SIZE = (2, 2)
# Below this height/width a maxpool turns into an identity layer.
MIN_POOL_INPUT = 4
RNN_GATES = {"lstm": 4, "gru": 3}
FF_MULT = 4


def is_valid_params(params) -> bool:
    """ex) is_valid_params(0) -> True
    ex) is_valid_params(float("nan")) -> False
    """
    return isinstance(params, int) and not isinstance(params, bool) and params >= 0


def build_layer(kind: str, input_shape: Shape, index: int, rng) -> Layer:
    """Build one layer of ``kind`` on top of ``input_shape``.

    The activation is drawn first for every kind (normalization and pooling
    layers then discard it), followed by the kind's own draws.
    """
    activation = pick(rng, ACTIVATIONS)
    base = {"index": index, "kind": kind, "input_shape": input_shape}

    match kind:
        case "dense":
            units = 2 ** randint(rng, 4, 13)  # 16 .. 8192
            return Layer(
                **base,
                activation=activation,
                units=units,
                output_shape=(units,),
                params=flatten_size(input_shape) * units + units,
            )

        case "conv2d":
            h = dim_or_default(input_shape, 0, 32)
            w = dim_or_default(input_shape, 1, 32)
            c = dim_or_default(input_shape, 2, 3)
            filters = 2 ** randint(rng, 3, 8)  # 8 .. 256
            kh, kw = CONV_KERNEL
            return Layer(
                **base,
                activation=activation,
                filters=filters,
                kernel_size=CONV_KERNEL,
                stride=(1, 1),
                padding="same",
                output_shape=(h, w, filters),
                params=kh * kw * c * filters + filters,
            )

        case "maxpool":
            h = dim_or_default(input_shape, 0, 32)
            w = dim_or_default(input_shape, 1, 32)
            c = dim_or_default(input_shape, 2, 64)
            if h < MIN_POOL_INPUT or w < MIN_POOL_INPUT:
                return Layer(
                    **{**base, "kind": "identity"},
                    activation="none",
                    output_shape=input_shape,
                    params=0,
                )
            return Layer(
                **base,
                activation="none",
                pool_size=POOL_SIZE,
                output_shape=(h // 2, w // 2, c),
                params=0,
            )

        case "lstm" | "gru":
            seq_len = dim_or_default(input_shape, 0, 128)
            input_dim = last_dimension(input_shape)
            units = 2 ** randint(rng, 5, 11)  # 32 .. 2048
            return_sequences = coin_flip(rng)
            return Layer(
                **base,
                activation=activation,
                units=units,
                return_sequences=return_sequences,
                output_shape=(seq_len, units) if return_sequences else (units,),
                params=RNN_GATES[kind] * ((input_dim + units) * units + units),
            )

        case "attention":
            seq_len = dim_or_default(input_shape, 0, 512)
            embed_dim = last_dimension(input_shape)
            # Heads are cosmetic: embed_dim need not divide evenly.
            num_heads = pick(rng, ATTENTION_HEADS)
            return Layer(
                **base,
                activation=activation,
                num_heads=num_heads,
                head_dim=embed_dim // num_heads or 64,
                output_shape=(seq_len, embed_dim),
                # Q, K, V and output projections
                params=4 * embed_dim * embed_dim,
            )

        case "feedforward":
            seq_len = dim_or_default(input_shape, 0, 512)
            embed_dim = last_dimension(input_shape)
            ff_dim = FF_MULT * embed_dim
            return Layer(
                **base,
                activation=activation,
                ff_dim=ff_dim,
                output_shape=(seq_len, embed_dim),
                params=2 * embed_dim * ff_dim + ff_dim + embed_dim,
            )

        case _ if kind in NORM_KINDS:
            return Layer(
                **base,
                activation="none",
                output_shape=input_shape,
                # scale and shift
                params=2 * last_dimension(input_shape),
            )

        case _:
            return Layer(
                **base,
                activation=activation,
                output_shape=input_shape,
                params=0,
            )


def build_output_layer(input_shape: Shape, rng) -> Layer:
    """Terminal softmax layer over a flattened ``input_shape``."""
    size = pick(rng, OUTPUT_SIZES)
    return Layer(
        index=OUTPUT_INDEX,
        kind="output",
        activation="softmax",
        units=size,
        input_shape=input_shape,
        output_shape=(size,),
        params=flatten_size(input_shape) * size + size,
    )
