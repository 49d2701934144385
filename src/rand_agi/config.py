from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArchitectureFamily:
    # Human-readable label shown on the prize ticket.
    name: str
    # Candidate layer kinds; repeated entries weight the uniform draw.
    layer_kinds: tuple[str, ...]
    # Inclusive bounds for the requested layer count.
    min_layers: int
    max_layers: int


FAMILIES = {
    "MLP": ArchitectureFamily(
        name="Multi-Layer Perceptron",
        layer_kinds=("dense",),
        min_layers=1,
        max_layers=100,
    ),
    "CNN": ArchitectureFamily(
        name="Convolutional Neural Network",
        layer_kinds=("conv2d", "conv2d", "maxpool", "batchnorm"),
        min_layers=3,
        max_layers=50,
    ),
    "RNN": ArchitectureFamily(
        name="Recurrent Neural Network",
        layer_kinds=("lstm", "gru"),
        min_layers=1,
        max_layers=20,
    ),
    "TRANSFORMER": ArchitectureFamily(
        name="Transformer",
        layer_kinds=("attention", "feedforward", "layernorm"),
        min_layers=2,
        max_layers=96,
    ),
    "GAN": ArchitectureFamily(
        name="Generative Adversarial Network",
        layer_kinds=("dense", "dense", "batchnorm"),
        min_layers=4,
        max_layers=30,
    ),
    "VAE": ArchitectureFamily(
        name="Variational Autoencoder",
        layer_kinds=("dense", "dense"),
        min_layers=4,
        max_layers=20,
    ),
    "DIFFUSION": ArchitectureFamily(
        name="Diffusion Model",
        layer_kinds=("conv2d", "conv2d", "attention", "groupnorm"),
        min_layers=10,
        max_layers=60,
    ),
    "HYBRID": ArchitectureFamily(
        name="Mysterious Hybrid Architecture",
        layer_kinds=("dense", "dense", "attention"),
        min_layers=5,
        max_layers=50,
    ),
}

# Families whose input is drawn as an image / a token sequence; the rest get a
# flat feature vector.
IMAGE_FAMILIES = ("CNN", "DIFFUSION")
SEQUENCE_FAMILIES = ("RNN",)
ATTENTION_FAMILIES = ("TRANSFORMER",)

IMAGE_SIZES = (28, 32, 64, 128, 224, 256)
IMAGE_CHANNELS = (1, 3, 4)
RNN_SEQ_LENS = (32, 64, 128, 256, 512)
RNN_EMBED_DIMS = (64, 128, 256, 512, 768)
TRANSFORMER_SEQ_LENS = (128, 256, 512, 1024, 2048, 4096)
TRANSFORMER_EMBED_DIMS = (256, 512, 768, 1024, 2048, 4096)
VECTOR_DIMS = (64, 128, 256, 512, 784, 1024, 2048, 4096)

ACTIVATIONS = (
    "relu",
    "gelu",
    "silu",
    "tanh",
    "sigmoid",
    "leaky_relu",
    "elu",
    "swish",
    "mish",
)
NORM_KINDS = ("layernorm", "batchnorm", "groupnorm")
ATTENTION_HEADS = (1, 2, 4, 8, 12, 16, 32)
# Vocabulary-ish sizes: binary, MNIST, CIFAR-100, ImageNet, ..., GPT-2, Llama 3.
OUTPUT_SIZES = (2, 10, 100, 1000, 10000, 32000, 50257, 128256)
OUTPUT_INDEX = -1

# 10 MB of float32; anything bigger is truncated in the weights file.
MAX_PARAMS = 2_500_000
DEFAULT_WEIGHT_COUNT = 10_000

FORMAT_TAG = "rand_agi_v1"
FORMAT_VERSION = "1.0.0"
GENERATOR_TAG = "RAND.AGI Slot Machine"
THEORY_TAG = "Infinite Monkey Theorem"
WEIGHTS_MAGIC = "RANDAGI_WEIGHTS_V1"
WEIGHTS_DTYPE = "float32"
HEADER_SEPARATOR = "---"
