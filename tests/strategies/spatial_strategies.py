"""Define strategies for generating 3D spatial data for property-based testing."""

import hypothesis.strategies as st

from state_representation import Quaternion


@st.composite
def positions(draw: st.DrawFn) -> list[float]:
    """Generate random (x,y,z) positions."""
    x = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    y = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    z = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    return [x, y, z]


@st.composite
def quaternions(draw: st.DrawFn) -> Quaternion:
    """Generate random unit quaternions."""
    x = draw(st.floats(min_value=-10e6, max_value=10e6, allow_infinity=False, allow_nan=False))
    y = draw(st.floats(min_value=-10e6, max_value=10e6, allow_infinity=False, allow_nan=False))
    z = draw(st.floats(min_value=-10e6, max_value=10e6, allow_infinity=False, allow_nan=False))
    return Quaternion(x, y, z, w=1.0)


@st.composite
def rotation_vectors(draw: st.DrawFn) -> list[float]:
    """Generate random rotation vectors with angles strictly below pi radians."""
    direction = draw(st.lists(st.floats(min_value=-1.0, max_value=1.0), min_size=3, max_size=3))
    angle_rad = draw(st.floats(min_value=0.0, max_value=3.0))
    norm = sum(d * d for d in direction) ** 0.5
    if norm < 1e-3:
        return [0.0, 0.0, 0.0]
    return [d / norm * angle_rad for d in direction]
