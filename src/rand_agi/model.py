from dataclasses import dataclass, field
from typing import Optional

from .config import FORMAT_TAG, FORMAT_VERSION
from .shapes import Shape, as_shape

__all__ = [
    "Layer",
    "Architecture",
]

# Kind-specific attributes, in the order they are written to model.json.
_OPTIONAL_FIELDS = (
    "units",
    "filters",
    "kernel_size",
    "stride",
    "padding",
    "pool_size",
    "return_sequences",
    "num_heads",
    "head_dim",
    "ff_dim",
)
_TUPLE_FIELDS = ("kernel_size", "stride", "pool_size")


@dataclass(frozen=True, slots=True)
class Layer:
    index: int
    kind: str
    activation: str
    input_shape: Shape
    output_shape: Shape
    params: int
    units: Optional[int] = None
    filters: Optional[int] = None
    kernel_size: Optional[tuple[int, int]] = None
    stride: Optional[tuple[int, int]] = None
    padding: Optional[str] = None
    pool_size: Optional[tuple[int, int]] = None
    return_sequences: Optional[bool] = None
    num_heads: Optional[int] = None
    head_dim: Optional[int] = None
    ff_dim: Optional[int] = None

    def to_dict(self) -> dict:
        """Unset kind-specific attributes are left out."""
        d = {
            "index": self.index,
            "type": self.kind,
            "activation": self.activation,
        }
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            d[name] = list(value) if name in _TUPLE_FIELDS else value
        d["input_shape"] = list(self.input_shape)
        d["output_shape"] = list(self.output_shape)
        d["params"] = self.params
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Layer":
        extras = {}
        for name in _OPTIONAL_FIELDS:
            if d.get(name) is None:
                continue
            extras[name] = tuple(d[name]) if name in _TUPLE_FIELDS else d[name]
        return cls(
            index=d["index"],
            kind=d["type"],
            activation=d["activation"],
            input_shape=as_shape(d["input_shape"]),
            output_shape=as_shape(d["output_shape"]),
            params=d["params"],
            **extras,
        )


@dataclass(frozen=True, slots=True)
class Architecture:
    """A generated network, exactly as it is written to model.json.

    ``num_layers`` counts the layers that survived generation plus the
    output layer; ``total_parameters`` is the sum over ``layers``.
    """

    architecture: str
    architecture_name: str
    input_shape: Shape
    output_shape: Shape
    num_layers: int
    total_parameters: int
    layers: tuple[Layer, ...]
    metadata: dict = field(default_factory=dict)
    generated_at: str = ""
    format: str = FORMAT_TAG
    version: str = FORMAT_VERSION

    @property
    def output_layer(self) -> Layer:
        return self.layers[-1]

    def to_dict(self) -> dict:
        return {
            "format": self.format,
            "version": self.version,
            "generated_at": self.generated_at,
            "architecture": self.architecture,
            "architecture_name": self.architecture_name,
            "input_shape": list(self.input_shape),
            "output_shape": list(self.output_shape),
            "num_layers": self.num_layers,
            "total_parameters": self.total_parameters,
            "layers": [layer.to_dict() for layer in self.layers],
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Architecture":
        return cls(
            architecture=d["architecture"],
            architecture_name=d["architecture_name"],
            input_shape=as_shape(d["input_shape"]),
            output_shape=as_shape(d["output_shape"]),
            num_layers=d["num_layers"],
            total_parameters=d["total_parameters"],
            layers=tuple(Layer.from_dict(layer) for layer in d["layers"]),
            metadata=dict(d.get("metadata", {})),
            generated_at=d.get("generated_at", ""),
            format=d.get("format", FORMAT_TAG),
            version=d.get("version", FORMAT_VERSION),
        )
