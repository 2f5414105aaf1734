"""Tests for cubic Bézier evaluation."""

import numpy as np
import pytest

from polyimg.geometry.bezier import bezier, sample_bezier

CONTROLS = np.array([[10.0, 80.0], [40.0, 10.0], [65.0, 10.0], [95.0, 80.0]])


def test_endpoints_are_exact():
    assert tuple(bezier(CONTROLS, 0.0)) == (10.0, 80.0)
    assert tuple(bezier(CONTROLS, 1.0)) == (95.0, 80.0)


def test_midpoint():
    # (P0 + 3·P1 + 3·P2 + P3) / 8
    assert bezier(CONTROLS, 0.5) == pytest.approx([52.5, 27.5])


def test_sampling_excludes_start():
    samples = sample_bezier(CONTROLS, 4)
    assert samples.shape == (4, 2)
    assert tuple(samples[-1]) == (95.0, 80.0)
    assert not np.array_equal(samples[0], CONTROLS[0])


def test_sampling_needs_a_sample():
    with pytest.raises(ValueError):
        sample_bezier(CONTROLS, 0)
