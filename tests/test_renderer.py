import io

from charge_sim import SimConfig, Simulation
from charge_sim.renderer import (
    BufferedRenderer,
    DebugRenderer,
    NullRenderer,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
)


def dipole_sim(**config):
    sim = Simulation(config=SimConfig(**config))
    sim.create_particle(100, 100, +1)
    sim.create_particle(200, 100, -1)
    return sim


def test_buffered_renderer_records_particles_and_ticks():
    sim = dipole_sim()
    renderer = BufferedRenderer()

    for _ in range(3):
        renderer.render_simulation(sim)

    assert sim.frame == 3
    assert [f["frame"] for f in renderer.frames] == [0, 1, 2]
    last = renderer.frames[-1]
    assert [p["id"] for p in last["particles"]] == [1, 2]
    assert last["particles"][0]["color"] == POSITIVE_COLOR
    assert last["particles"][1]["color"] == NEGATIVE_COLOR
    # Visualization layers are off by default
    assert last["field_vectors"] == [] and last["field_lines"] == []


def test_field_layers_follow_toggles():
    sim = dipole_sim(num_lines_per_charge=8, show_field=True, show_field_lines=True)
    renderer = BufferedRenderer()

    renderer.render_simulation(sim, advance=False)

    frame = renderer.frames[0]
    assert sim.frame == 0
    assert len(frame["field_vectors"]) == 33 * 20
    assert len(frame["field_lines"]) == 8

    point, vector = frame["field_vectors"][0]
    e = sim.sample_field(*point)
    assert vector == [e[0] * sim.config.field_arrow_scale, e[1] * sim.config.field_arrow_scale]


def test_particles_drawn_after_tick():
    sim = dipole_sim(friction=0.0)
    renderer = BufferedRenderer()

    renderer.render_simulation(sim)

    drawn = renderer.frames[0]["particles"][0]["position"]
    assert drawn == sim.particles[0].position.tolist()
    assert drawn[0] > 100.0


def test_debug_renderer_output():
    sim = dipole_sim(num_lines_per_charge=4, show_field_lines=True)
    out = io.StringIO()

    DebugRenderer(output=out).render_simulation(sim)

    text = out.getvalue()
    assert "=== Frame 0 ===" in text
    assert "[1] +1 @" in text
    assert "[2] -1 @" in text
    assert "4 lines" in text


def test_null_renderer_still_advances():
    sim = dipole_sim()
    NullRenderer().render_simulation(sim)
    assert sim.frame == 1


def test_clear_buffer():
    sim = dipole_sim()
    renderer = BufferedRenderer()
    renderer.render_simulation(sim)
    renderer.clear()
    assert renderer.frames == []
