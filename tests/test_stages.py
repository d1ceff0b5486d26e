import numpy as np
import pytest

from iircascade.dsp import BiquadStage, ConfigurationError, IIRFilter, parse_stages


class TestFromMapping:
    def test_optional_state_defaults_to_zero(self):
        stage = BiquadStage.from_mapping({"k": 2, "a": [0.1, 0.2], "b": [1, 2, 3]})
        assert stage.z == [0.0, 0.0]
        assert stage.k == 2.0

    def test_state_is_copied(self):
        z = [0.5, 0.25]
        stage = BiquadStage.from_mapping({"k": 1, "a": [0, 0], "b": [1, 0, 0], "z": z})
        stage.reset()
        assert z == [0.5, 0.25]

    def test_numpy_coefficients(self):
        stage = BiquadStage(b=np.array([1.0, 2.0, 1.0]), a=np.array([-0.5, 0.1]), k=np.float64(0.25))
        assert stage.b == (1.0, 2.0, 1.0)
        assert isinstance(stage.k, float)

    def test_fresh_copy_keeps_coefficients(self):
        stage = BiquadStage(b=[1, 2, 3], a=[0.1, 0.2], k=3, z=[4, 5])
        copy = stage.fresh_copy()
        assert (copy.b, copy.a, copy.k, copy.z) == (stage.b, stage.a, stage.k, [0.0, 0.0])
        assert stage.z == [4.0, 5.0]


class TestValidation:
    @pytest.mark.parametrize(
        "descriptor, fragment",
        [
            ({"k": 1, "a": [0, 0], "b": [1, 0]}, "b needs exactly 3"),
            ({"k": 1, "a": [0, 0, 0], "b": [1, 0, 0]}, "a needs exactly 2"),
            ({"k": 1, "a": [0, 0], "b": [1, 0, 0], "z": [0]}, "z needs exactly 2"),
            ({"k": "1", "a": [0, 0], "b": [1, 0, 0]}, "k must be a real number"),
            ({"k": 1, "a": [0, None], "b": [1, 0, 0]}, "a[1] must be a real number"),
            ({"k": 1, "a": "ab", "b": [1, 0, 0]}, "a must be a sequence"),
            ({"k": 1, "a": [0, 0]}, "missing coefficient 'b'"),
            ({"a": [0, 0], "b": [1, 0, 0]}, "missing coefficient 'k'"),
        ],
    )
    def test_malformed_descriptor(self, descriptor, fragment):
        with pytest.raises(ConfigurationError) as excinfo:
            IIRFilter([{"k": 1, "a": [0, 0], "b": [1, 0, 0]}, descriptor])
        assert "stage 1" in str(excinfo.value)
        assert fragment in str(excinfo.value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_stages([{"k": 1, "a": [0], "b": [1, 0, 0]}])

    def test_unsupported_descriptor(self):
        with pytest.raises(ConfigurationError, match="stage 0: unsupported descriptor type int"):
            parse_stages([3])

    def test_order_is_kept(self):
        stages = parse_stages([{"k": i, "a": [0, 0], "b": [1, 0, 0]} for i in range(5)])
        assert [s.k for s in stages] == [0.0, 1.0, 2.0, 3.0, 4.0]
