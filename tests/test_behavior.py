import numpy as np
import pytest

from boids import Boid, Enclosure, FlockState, Mode, NeighborRecord, Steering, SteeringWeights


@pytest.fixture
def steering():
    return Steering(SteeringWeights())


@pytest.fixture
def enclosure():
    return Enclosure(radius=10.0, height=10.0, floor_y=-1.0, trigger_distance=2.0)


def test_steer_returns_unit_heading(steering):
    direction = np.array([0.0, 0.0, 1.0])
    result = steering.steer(direction, np.array([1.0, 0.0, 0.0]), 0.5)
    assert np.linalg.norm(result) == pytest.approx(1.0)
    assert result[0] > 0.0


def test_steer_keeps_heading_when_blend_cancels(steering, capsys):
    direction = np.array([1.0, 0.0, 0.0])
    result = steering.steer(direction, np.array([-1.0, 0.0, 0.0]), 1.0)
    assert np.array_equal(result, direction)
    assert steering.degenerate_count == 1
    assert "[Boids]" in capsys.readouterr().out


def test_choose_mode(steering, enclosure):
    assert steering.choose_mode(Boid(np.array([0.0, 4.5, 0.0])), enclosure) is Mode.FLOCK
    assert steering.choose_mode(Boid(np.array([9.0, 4.5, 0.0])), enclosure) is Mode.ENVIRONMENT


def test_wall_turns_boid_inward(steering, enclosure):
    boid = Boid(np.array([9.5, 4.5, 0.0]), np.array([0.0, 0.0, 1.0]))
    turned = steering.handle_environment(boid, enclosure)
    assert np.linalg.norm(turned.direction) == pytest.approx(1.0)
    assert turned.direction[0] < 0.0
    assert np.array_equal(turned.position, boid.position)


def test_floor_turns_boid_upward(steering, enclosure):
    boid = Boid(np.array([0.0, -0.5, 0.0]), np.array([1.0, 0.0, 0.0]))
    turned = steering.handle_environment(boid, enclosure)
    assert turned.direction[1] > 0.0


def test_ceiling_turns_boid_downward(steering, enclosure):
    boid = Boid(np.array([0.0, 9.5, 0.0]), np.array([1.0, 0.0, 0.0]))
    turned = steering.handle_environment(boid, enclosure)
    assert turned.direction[1] < 0.0


def test_alignment_target_vanishes_when_already_aligned(steering):
    previous = FlockState(
        np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]),
        np.tile([0.0, 0.0, 1.0], (3, 1)),
    )
    boid = previous.boid(0)
    neighbors = [NeighborRecord(1.0, 1), NeighborRecord(1.0, 2)]
    assert np.array_equal(steering.alignment_target(boid, neighbors, previous), np.zeros(3))


def test_alignment_target_points_toward_mean_heading(steering):
    previous = FlockState(
        np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]),
        np.array([[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [1.0, 0.0, 0.0]]),
    )
    boid = previous.boid(0)
    neighbors = [NeighborRecord(1.0, 1), NeighborRecord(1.0, 2)]
    target = steering.alignment_target(boid, neighbors, previous)
    assert np.allclose(target, np.array([1.0, 0.0, -1.0]) / np.sqrt(2.0))


def test_separation_only_inside_trigger(steering):
    previous = FlockState(
        np.array([[0.0, 0.0, 0.0], [0.5, 0.0, 0.0], [3.0, 0.0, 0.0]]),
        np.tile([0.0, 0.0, 1.0], (3, 1)),
    )
    boid = previous.boid(0)

    push = steering.separation_push(boid, NeighborRecord(0.5, 1), previous)
    assert push[0] < 0.0
    assert np.linalg.norm(push) == pytest.approx(0.005 / (0.25 + 1e-6))

    assert steering.separation_push(boid, NeighborRecord(3.0, 2), previous) is None


def test_cohesion_prefers_closer_neighbors(steering):
    previous = FlockState(
        np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, -4.0]]),
        np.tile([0.0, 0.0, 1.0], (3, 1)),
    )
    boid = previous.boid(0)
    neighbors = [NeighborRecord(1.0, 1), NeighborRecord(4.0, 2)]
    target = steering.cohesion_target(boid, neighbors, previous)
    assert np.linalg.norm(target) == pytest.approx(1.0)
    # Weighted 16:1 toward the neighbor at distance 1
    assert target[0] > abs(target[2])


def test_handle_neighbors_is_deterministic(steering):
    rng = np.random.default_rng(11)
    directions = rng.random((6, 3))
    directions /= np.linalg.norm(directions, axis=1)[:, None]
    previous = FlockState(rng.uniform(-2, 2, size=(6, 3)), directions)
    boid = previous.boid(0)
    neighbors = [NeighborRecord(float(np.linalg.norm(previous.positions[i] - boid.position)), i)
                 for i in range(1, 6)]
    neighbors.sort()

    first = steering.handle_neighbors(boid, neighbors, previous)
    second = steering.handle_neighbors(boid, neighbors, previous)
    assert np.array_equal(first.direction, second.direction)
    assert np.array_equal(boid.direction, previous.directions[0])


def test_environment_target_subtracts_current_heading(steering, enclosure):
    boid = Boid(np.array([9.5, 4.5, 0.0]), np.array([0.0, 0.0, 1.0]))
    push = 0.1 / (0.5 * 0.5 + 1e-6)
    expected = np.array([-9.5 * push, 0.0, -1.0])
    expected /= np.linalg.norm(expected)
    target = steering.environment_target(boid, enclosure)
    assert np.allclose(target, expected)


def test_cohesion_target_is_center_minus_position(steering):
    previous = FlockState(
        np.array([[1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [1.0, 0.0, 2.0]]),
        np.tile([0.0, 0.0, 1.0], (3, 1)),
    )
    boid = previous.boid(0)
    neighbors = [NeighborRecord(1.0, 1), NeighborRecord(2.0, 2)]
    w1 = 1.0 / (1.0 + 1e-6)
    w2 = 1.0 / (4.0 + 1e-6)
    center = (previous.positions[1] * w1 + previous.positions[2] * w2) / (w1 + w2)
    expected = center - boid.position
    expected /= np.linalg.norm(expected)
    target = steering.cohesion_target(boid, neighbors, previous)
    assert np.allclose(target, expected)
    # The boid's own x must be subtracted, not just the center taken
    assert target[0] == pytest.approx(0.0)


def test_cohesion_target_finite_with_zero_strength():
    steering = Steering(SteeringWeights(cohesion_strength=0.0))
    previous = FlockState(
        np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 2.0, 0.0]]),
        np.tile([0.0, 0.0, 1.0], (3, 1)),
    )
    boid = previous.boid(0)
    neighbors = [NeighborRecord(1.0, 1), NeighborRecord(2.0, 2)]
    target = steering.cohesion_target(boid, neighbors, previous)
    assert np.all(np.isfinite(target))
    turned = steering.handle_neighbors(boid, neighbors, previous)
    assert np.all(np.isfinite(turned.direction))
    assert np.linalg.norm(turned.direction) == pytest.approx(1.0)


@pytest.mark.parametrize("kwargs", [
    {"cohesion_strength": -0.1},
    {"alignment_strength": float("nan")},
    {"separation_strength": float("inf")},
    {"separation_trigger": -1.0},
    {"epsilon": 0.0},
])
def test_invalid_weights_raise(kwargs):
    with pytest.raises(ValueError):
        SteeringWeights(**kwargs)
