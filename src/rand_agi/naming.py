import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import numpy as np

from .rng import pick, resolve_rng

# Word lists for model names: PREFIX-Suffix-version-params
PREFIXES = (
    "RAND", "MONKE", "LUCKY", "CHAOS", "YOLO", "MAGIC", "DICE",
    "SLOT", "JACKPOT", "SPIN", "WILD", "GLITCH", "FUZZY",
)
SUFFIXES = (
    "Random", "Chaos", "Monkey", "Lucky", "Quantum", "Ultra",
    "Mega", "Hyper", "Neo", "Prime", "Zero", "Omega",
)
VERSIONS = ("0.1", "1.0", "2.0", "3.5", "4.0", "7", "13", "70", "405")

SCALE_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))
# Above this the exponent is shown in scientific notation.
GROUPED_EXPONENT_LIMIT = 1e15
BITS_PER_PARAM = 32


def format_params(params) -> str:
    """Human-scale parameter count with one decimal, rounded half up.

    ex) format_params(1_500) -> "1.5K"
    ex) format_params(7_000_000_000) -> "7.0B"
    ex) format_params(999) -> "999"
    ex) format_params(float("nan")) -> "???"
    ex) format_params(float("inf")) -> "???"
    """
    if params is None or isinstance(params, bool):
        return "???"
    if isinstance(params, np.integer):
        params = int(params)
    elif not isinstance(params, int):
        params = float(params)
        if not math.isfinite(params):
            return "???"
    for threshold, suffix in SCALE_SUFFIXES:
        if params >= threshold:
            scaled = Decimal(params / threshold)
            return f"{scaled.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}{suffix}"
    if isinstance(params, float) and params.is_integer():
        params = int(params)
    return str(params)


def agi_probability(total_parameters: int) -> str:
    """Odds of drawing a given float32 weight vector by chance.

    Every float32 has 2^32 values, so the odds are 1 in 2^(32 * params).

    ex) agi_probability(1000) -> "1 in 2^32,000"
    ex) agi_probability(10**15) -> "1 in 2^3.20e+16"
    """
    exponent = BITS_PER_PARAM * total_parameters
    if exponent > GROUPED_EXPONENT_LIMIT:
        return f"1 in 2^{exponent:.2e}"
    return f"1 in 2^{exponent:,}"


def generate_model_name(architecture, rng: Optional[np.random.Generator] = None) -> str:
    """ex) generate_model_name(arch) -> "CHAOS-Quantum-3.5-1.2M" """
    rng = resolve_rng(rng)
    prefix = pick(rng, PREFIXES)
    suffix = pick(rng, SUFFIXES)
    version = pick(rng, VERSIONS)
    return f"{prefix}-{suffix}-{version}-{format_params(architecture.total_parameters)}"
