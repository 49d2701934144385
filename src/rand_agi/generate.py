"""
Pull the lever: generate a random network and write <model-name>.zip.

python -m rand_agi.generate --help
python -m rand_agi.generate --seed 42 --out-dir dist
rand-agi --dry-run
"""

from pathlib import Path
from typing import Optional

import numpy as np

from .generator import generate_architecture
from .naming import format_params, generate_model_name
from .package import build_archive
from .weights import generate_weights

JACKPOT_PARAMS = 1e9
JACKPOT_FAMILY = "HYBRID"


def is_jackpot(architecture) -> bool:
    return (
        architecture.total_parameters > JACKPOT_PARAMS
        or architecture.architecture == JACKPOT_FAMILY
    )


def generate(
    seed: Optional[int] = None,
    out_dir: Path = Path("."),
    dry_run: bool = False,
) -> Optional[Path]:
    """Generate one model and save it as a zip of model.json + weights.bin.

    seed: Seed for a reproducible pull (random when omitted)
    out_dir: Directory that receives the archive
    dry_run: Print the ticket without writing anything
    """
    rng = np.random.default_rng(seed)

    print("Spinning the reels...")
    architecture = generate_architecture(rng)
    model_name = generate_model_name(architecture, rng)
    weights = generate_weights(architecture.total_parameters, rng)

    activations = list(
        dict.fromkeys(
            layer.activation
            for layer in architecture.layers
            if layer.activation != "none"
        )
    )

    print(f"\n{'=' * 50}\n{model_name}\n{'=' * 50}")
    print(f"   Architecture: {architecture.architecture_name}")
    print(f"   Layers:       {architecture.num_layers:,}")
    print(f"   Parameters:   {format_params(architecture.total_parameters)}")
    print(f"   Activations:  {', '.join(activations[:3])}")
    print(f"   P(AGI):       {architecture.metadata['probability_of_agi']}")
    if weights.truncated:
        print(
            f"   Weights:      {weights.actual_params:,} of "
            f"{weights.total_params:,} materialized (truncated)"
        )

    if is_jackpot(architecture):
        print("\n*** JACKPOT! ***")

    if dry_run:
        print("\nDry run, nothing written.")
        return None

    data, filename = build_archive(architecture, weights, model_name)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / filename
    path.write_bytes(data)
    print(f"\nSaved {len(data):,} bytes to {path}")
    return path


def main():
    import typer

    typer.run(generate)


if __name__ == "__main__":
    main()
