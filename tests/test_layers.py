"""Tests for per-kind shape and parameter rules."""

from rand_agi.layers import build_layer, build_output_layer, is_valid_params


class TestDense:
    def test_flattens_input(self, scripted):
        # activation relu, units 2**4
        rng = scripted(ints=[0, 4])
        layer = build_layer("dense", (4, 4, 8), 3, rng)
        assert layer.kind == "dense"
        assert layer.index == 3
        assert layer.activation == "relu"
        assert layer.units == 16
        assert layer.input_shape == (4, 4, 8)
        assert layer.output_shape == (16,)
        assert layer.params == 128 * 16 + 16
        assert rng.exhausted

    def test_largest_width(self, scripted):
        layer = build_layer("dense", (784,), 0, scripted(ints=[8, 13]))
        assert layer.activation == "mish"
        assert layer.units == 8192
        assert layer.params == 784 * 8192 + 8192


class TestConv2d:
    def test_image_input(self, scripted):
        layer = build_layer("conv2d", (64, 64, 3), 0, scripted(ints=[1, 5]))
        assert layer.filters == 32
        assert layer.kernel_size == (3, 3)
        assert layer.stride == (1, 1)
        assert layer.padding == "same"
        assert layer.output_shape == (64, 64, 32)
        assert layer.params == 3 * 3 * 3 * 32 + 32

    def test_missing_channel_defaults_to_three(self, scripted):
        layer = build_layer("conv2d", (32, 32), 0, scripted(ints=[0, 3]))
        assert layer.input_shape == (32, 32)
        assert layer.output_shape == (32, 32, 8)
        assert layer.params == 3 * 3 * 3 * 8 + 8
        assert is_valid_params(layer.params)

    def test_vector_input_uses_default_width(self, scripted):
        layer = build_layer("conv2d", (100,), 0, scripted(ints=[0, 3]))
        assert layer.output_shape == (100, 32, 8)


class TestMaxpool:
    def test_halves_spatial_dims(self, scripted):
        layer = build_layer("maxpool", (33, 32, 16), 2, scripted(ints=[0]))
        assert layer.kind == "maxpool"
        assert layer.activation == "none"
        assert layer.pool_size == (2, 2)
        assert layer.output_shape == (16, 16, 16)
        assert layer.params == 0

    def test_degrades_to_identity_when_too_small(self, scripted):
        layer = build_layer("maxpool", (3, 3, 64), 5, scripted(ints=[0]))
        assert layer.kind == "identity"
        assert layer.index == 5
        assert layer.input_shape == (3, 3, 64)
        assert layer.output_shape == (3, 3, 64)
        assert layer.params == 0
        assert layer.pool_size is None

    def test_narrow_width_alone_is_enough(self, scripted):
        layer = build_layer("maxpool", (64, 2, 8), 0, scripted(ints=[0]))
        assert layer.kind == "identity"


class TestRecurrent:
    def test_lstm_returning_sequences(self, scripted):
        rng = scripted(ints=[0, 5], floats=[0.9])
        layer = build_layer("lstm", (128, 64), 0, rng)
        assert layer.units == 32
        assert layer.return_sequences is True
        assert layer.output_shape == (128, 32)
        assert layer.params == 4 * ((64 + 32) * 32 + 32)

    def test_gru_last_state_only(self, scripted):
        rng = scripted(ints=[0, 5], floats=[0.1])
        layer = build_layer("gru", (128, 64), 0, rng)
        assert layer.return_sequences is False
        assert layer.output_shape == (32,)
        assert layer.params == 3 * ((64 + 32) * 32 + 32)

    def test_vector_input_reuses_width_as_sequence(self, scripted):
        rng = scripted(ints=[0, 5], floats=[0.9])
        layer = build_layer("lstm", (256,), 0, rng)
        assert layer.input_shape == (256,)
        assert layer.output_shape == (256, 32)
        assert layer.params == 4 * ((256 + 32) * 32 + 32)


class TestTransformerBlocks:
    def test_attention_keeps_shape(self, scripted):
        layer = build_layer("attention", (512, 768), 0, scripted(ints=[0, 6]))
        assert layer.num_heads == 32
        assert layer.head_dim == 24
        assert layer.output_shape == (512, 768)
        assert layer.params == 4 * 768 * 768

    def test_attention_head_dim_fallback(self, scripted):
        layer = build_layer("attention", (10, 16), 0, scripted(ints=[0, 6]))
        assert layer.head_dim == 64

    def test_attention_on_image_collapses_width(self, scripted):
        layer = build_layer("attention", (32, 32, 64), 0, scripted(ints=[0, 0]))
        assert layer.output_shape == (32, 64)
        assert layer.params == 4 * 64 * 64

    def test_feedforward(self, scripted):
        layer = build_layer("feedforward", (128, 256), 0, scripted(ints=[2]))
        assert layer.ff_dim == 1024
        assert layer.output_shape == (128, 256)
        assert layer.params == 2 * 256 * 1024 + 1024 + 256


class TestNormalization:
    def test_norms_scale_last_dim(self, scripted):
        for kind in ("layernorm", "batchnorm", "groupnorm"):
            layer = build_layer(kind, (16, 16, 32), 0, scripted(ints=[3]))
            assert layer.kind == kind
            assert layer.activation == "none"
            assert layer.output_shape == (16, 16, 32)
            assert layer.params == 64


def test_unknown_kind_passes_through(scripted):
    layer = build_layer("dropout", (10, 20), 4, scripted(ints=[1]))
    assert layer.kind == "dropout"
    assert layer.output_shape == (10, 20)
    assert layer.params == 0


def test_output_layer(scripted):
    layer = build_output_layer((16,), scripted(ints=[7]))
    assert layer.kind == "output"
    assert layer.index == -1
    assert layer.activation == "softmax"
    assert layer.units == 128256
    assert layer.output_shape == (128256,)
    assert layer.params == 16 * 128256 + 128256


def test_is_valid_params():
    assert is_valid_params(0)
    assert is_valid_params(10**20)
    assert not is_valid_params(-1)
    assert not is_valid_params(float("nan"))
    assert not is_valid_params(1.5)
    assert not is_valid_params(True)
