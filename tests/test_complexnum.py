import math

import pytest

from iircascade.dsp import ComplexNumber


class TestComplexNumber:
    def test_arithmetic_matches_builtin_complex(self):
        x = ComplexNumber(1.5, -2.0)
        y = ComplexNumber(-0.25, 3.0)
        cx, cy = complex(x), complex(y)
        assert complex(x.add(y)) == pytest.approx(cx + cy)
        assert complex(x.mul(y)) == pytest.approx(cx * cy)
        assert complex(x.div(y)) == pytest.approx(cx / cy)
        assert complex(x + y) == complex(x.add(y))
        assert complex(x * y) == complex(x.mul(y))
        assert complex(x / y) == complex(x.div(y))

    def test_values_are_immutable(self):
        x = ComplexNumber(1.0, 2.0)
        x.add(ComplexNumber(1.0, 1.0))
        assert x == ComplexNumber(1.0, 2.0)
        with pytest.raises(AttributeError):
            x.re = 3.0

    def test_magnitude_and_phase(self):
        x = ComplexNumber(-3.0, 4.0)
        assert x.magnitude == 5.0
        assert abs(x) == 5.0
        assert x.phase == pytest.approx(math.atan2(4.0, -3.0))
        assert ComplexNumber(-1.0, 0.0).phase == pytest.approx(math.pi)

    def test_unit_circle(self):
        z = ComplexNumber.unit(-math.pi / 2)
        assert z.magnitude == pytest.approx(1.0)
        assert z.phase == pytest.approx(-math.pi / 2)

    def test_division_by_zero_is_non_finite(self):
        result = ComplexNumber(1.0, 1.0).div(ComplexNumber(0.0, 0.0))
        assert math.isinf(result.re) and math.isinf(result.im)
        assert math.isinf(result.magnitude)
        assert math.isnan(ComplexNumber(0.0, 0.0).div(ComplexNumber(0.0, 0.0)).re)
