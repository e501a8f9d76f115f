# Tests for core types

import pytest
import numpy as np
from carsim.core.types import VehicleState, ControlInput, VehicleParams, NUM_STATES


class TestVehicleState:

    def test_default_is_zero(self):
        """Default state should be at rest at the origin."""
        state = VehicleState()
        assert np.all(state.to_array() == 0)

    def test_to_array_order(self):
        """to_array should be [px, py, pz, v, psi, theta]."""
        state = VehicleState(position=np.array([1.0, 2.0, 3.0]), v=4.0, psi=5.0, theta=6.0)
        arr = state.to_array()
        assert arr.shape == (NUM_STATES,)
        assert np.allclose(arr, [1, 2, 3, 4, 5, 6])

    def test_from_array(self):
        """from_array should split position and scalars."""
        state = VehicleState.from_array([1.0, 2.0, 0.0, 3.0, 0.5, -0.1])
        assert state.north == 1.0
        assert state.east == 2.0
        assert state.v == 3.0
        assert state.psi == 0.5
        assert state.theta == -0.1

    def test_from_array_invalid_shape(self):
        """from_array should reject wrong shape."""
        with pytest.raises(AssertionError):
            VehicleState.from_array(np.zeros(4))

    def test_add_is_componentwise(self):
        """Adding a delta should sum every component."""
        state = VehicleState.from_array([1.0, 1.0, 0.0, 2.0, 0.1, 0.2])
        result = state + np.array([0.5, -0.5, 0.0, 1.0, 0.2, -0.1])
        assert np.allclose(result.to_array(), [1.5, 0.5, 0.0, 3.0, 0.3, 0.1])

    def test_add_does_not_normalize(self):
        """Addition should not wrap heading or bound steering."""
        state = VehicleState(psi=3.0, theta=1.0)
        result = state + np.array([0, 0, 0, 0, 1.0, 2.0])
        assert result.psi == pytest.approx(4.0)
        assert result.theta == pytest.approx(3.0)

    def test_add_returns_new_state(self):
        """Addition should leave the original untouched."""
        state = VehicleState.from_array([1.0, 2.0, 0.0, 3.0, 0.0, 0.0])
        _ = state + np.ones(NUM_STATES)
        assert np.allclose(state.to_array(), [1, 2, 0, 3, 0, 0])

    def test_copy_is_independent(self):
        """copy should not share the position array."""
        state = VehicleState.from_array([1.0, 2.0, 0.0, 0.0, 0.0, 0.0])
        clone = state.copy()
        clone.position[0] = 10.0
        assert state.north == 1.0


class TestControlInput:

    def test_to_array(self):
        u = ControlInput(force=2.0, torque=-1.0)
        assert np.allclose(u.to_array(), [2.0, -1.0])

    def test_zero(self):
        """zero should reset both components."""
        u = ControlInput(force=2.0, torque=-1.0)
        u.zero()
        assert u.force == 0.0
        assert u.torque == 0.0


class TestVehicleParams:

    def test_immutable(self):
        """VehicleParams should be immutable."""
        params = VehicleParams()
        with pytest.raises(Exception):  # frozen dataclass
            params.mass = 200.0

    def test_initial_state(self):
        """initial_state should come from x0."""
        params = VehicleParams(x0=(1.0, 2.0, 0.0, 3.0, 0.5, 0.1))
        state = params.initial_state
        assert state.north == 1.0
        assert state.v == 3.0
        assert state.theta == 0.1

    def test_default_steering_bound_below_right_angle(self):
        assert VehicleParams().max_steering_angle < np.pi / 2

    def test_rejects_right_angle_steering_bound(self):
        """tan(theta) diverges at pi/2, so the bound must stay below it."""
        with pytest.raises(AssertionError):
            VehicleParams(max_steering_angle=np.pi / 2)
        with pytest.raises(AssertionError):
            VehicleParams(max_steering_angle=0.0)

    def test_rejects_non_positive_physical_constants(self):
        for name in ["mass", "inertia", "length"]:
            with pytest.raises(AssertionError):
                VehicleParams(**{name: 0.0})

    def test_rejects_short_x0(self):
        with pytest.raises(AssertionError):
            VehicleParams(x0=(0.0, 0.0, 0.0))
