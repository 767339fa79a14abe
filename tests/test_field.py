import numpy as np
import pytest
from charge_sim.core.field import field_contribution, grid_points, sample_field, sample_field_grid
from charge_sim.types import Particle

K = 800.0
MIN_D = 8.0


def test_single_charge_radial_field():
    """E = k q / r² pointing away from a positive charge: 800 / 50² = 0.32."""
    p = Particle(position=(100.0, 100.0), charge=1)

    e = sample_field(150.0, 100.0, [p], K, MIN_D)

    assert np.allclose(e, [0.32, 0.0])


def test_negative_charge_points_inward():
    p = Particle(position=(100.0, 100.0), charge=-1)

    e = sample_field(100.0, 60.0, [p], K, MIN_D)

    assert e[0] == pytest.approx(0.0)
    assert e[1] == pytest.approx(K / 40.0**2)  # towards the charge (+y)


def test_superposition():
    particles = [
        Particle(position=(120.0, 80.0), charge=1),
        Particle(position=(300.0, 410.0), charge=-1),
        Particle(position=(640.0, 200.0), charge=2.0),
        Particle(position=(205.0, 210.0), charge=-1),
    ]
    x, y = 211.0, 207.5  # inside the skip radius of the last particle

    total = sample_field(x, y, particles, K, MIN_D)
    parts = sum(field_contribution(x, y, p, K, MIN_D) for p in particles)

    assert np.allclose(total, parts, rtol=1e-12, atol=1e-15)
    assert np.array_equal(field_contribution(x, y, particles[-1], K, MIN_D), [0.0, 0.0])


def test_sources_inside_min_distance_are_skipped():
    """Skipped, not clamped: a query atop a charge sees only the others."""
    near = Particle(position=(500.0, 300.0), charge=1)
    far = Particle(position=(600.0, 300.0), charge=1)

    e_both = sample_field(503.0, 300.0, [near, far], K, MIN_D)
    e_far = sample_field(503.0, 300.0, [far], K, MIN_D)

    assert np.array_equal(e_both, e_far)


def test_field_at_charge_location_is_finite():
    a = Particle(position=(500.0, 300.0), charge=1)
    b = Particle(position=(500.0, 300.0), charge=-1)

    e = sample_field(500.0, 300.0, [a, b], K, MIN_D)

    assert np.all(np.isfinite(e))
    assert np.array_equal(e, [0.0, 0.0])


def test_empty_system():
    assert np.array_equal(sample_field(1.0, 2.0, [], K, MIN_D), [0.0, 0.0])


def test_sampling_does_not_mutate_particles():
    p = Particle(position=(10.0, 20.0), charge=1, velocity=(1.0, 2.0))
    before = (p.position.copy(), p.velocity.copy(), p.acceleration.copy())

    for x in range(0, 100, 7):
        sample_field(float(x), 50.0, [p], K, MIN_D)

    assert np.array_equal(p.position, before[0])
    assert np.array_equal(p.velocity, before[1])
    assert np.array_equal(p.acceleration, before[2])


def test_grid_points_layout():
    """Centres at spacing/2 + n*spacing strictly inside the canvas."""
    pts = grid_points(100.0, 60.0, 30.0)

    assert pts.shape == (3 * 2, 2)
    assert sorted(set(pts[:, 0])) == [15.0, 45.0, 75.0]
    assert sorted(set(pts[:, 1])) == [15.0, 45.0]


def test_default_grid_size():
    """1000 x 600 canvas at spacing 30: 33 columns, 20 rows."""
    pts = grid_points(1000.0, 600.0, 30.0)
    assert pts.shape == (33 * 20, 2)


def test_sample_field_grid_matches_point_queries():
    particles = [
        Particle(position=(40.0, 40.0), charge=1),
        Particle(position=(80.0, 20.0), charge=-1),
    ]

    points, fields = sample_field_grid(particles, K, MIN_D, 100.0, 60.0, 30.0)

    assert points.shape == fields.shape
    for (x, y), e in zip(points, fields):
        assert np.array_equal(e, sample_field(x, y, particles, K, MIN_D))


def test_two_charge_field_matches_coulomb_law():
    """
    +1 at (0, 0) and -2 at (100, 0), query at (50, 0):
      E = 800/50² + 2*800/50² = 0.32 + 0.64 = 0.96 along +x.
    """
    particles = [
        Particle(position=(0.0, 0.0), charge=1),
        Particle(position=(100.0, 0.0), charge=-2),
    ]

    e = sample_field(50.0, 0.0, particles, K, MIN_D)

    assert e[0] == pytest.approx(0.96)
    assert e[1] == pytest.approx(0.0)
