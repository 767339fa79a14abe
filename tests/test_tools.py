import numpy as np
import pytest
from charge_sim import SimConfig, Simulation, Tool, ToolController
from charge_sim.tools import tool_label


def make_controller(**config):
    return ToolController(Simulation(config=SimConfig(**config)))


def test_add_tools_place_charges():
    ctl = make_controller()
    assert not ctl.has_placed_particle

    ctl.select_tool(Tool.ADD_PLUS)
    ctl.mouse_pressed(100, 100)
    ctl.select_tool(Tool.ADD_MINUS)
    ctl.mouse_pressed(200, 100)

    assert [p.charge for p in ctl.sim.particles] == [1.0, -1.0]
    assert ctl.has_placed_particle


def test_add_random_uses_simulation_generator():
    ctl = make_controller(seed=5)
    reference = Simulation(config=SimConfig(seed=5))
    expected = [reference.random_charge() for _ in range(10)]

    ctl.select_tool(Tool.ADD_RANDOM)
    for i in range(10):
        ctl.mouse_pressed(50 + 20 * i, 100)

    assert [p.charge for p in ctl.sim.particles] == expected


def test_no_tool_does_nothing():
    ctl = make_controller()
    ctl.mouse_pressed(100, 100)
    assert ctl.sim.particles == []
    assert not ctl.has_placed_particle


def test_press_outside_canvas_ignored():
    ctl = make_controller()
    ctl.select_tool(Tool.ADD_PLUS)

    ctl.mouse_pressed(-1, 100)
    ctl.mouse_pressed(100, 601)

    assert ctl.sim.particles == []


def test_erase_removes_newest_overlap():
    ctl = make_controller()
    ctl.select_tool(Tool.ADD_PLUS)
    ctl.mouse_pressed(100, 100)
    ctl.select_tool(Tool.ADD_MINUS)
    ctl.mouse_pressed(102, 100)

    ctl.select_tool(Tool.ERASE)
    ctl.mouse_pressed(101, 100)

    assert [p.charge for p in ctl.sim.particles] == [1.0]


def test_select_and_drag():
    ctl = make_controller()
    p = ctl.sim.create_particle(100, 100, +1)
    p.velocity[:] = (0.5, 0.5)

    ctl.select_tool("select")
    ctl.mouse_pressed(103, 101)
    assert ctl.dragging and ctl.selected is p

    ctl.mouse_dragged(300, 250)
    assert np.array_equal(p.position, [300.0, 250.0])
    assert np.array_equal(p.velocity, [0.5, 0.5])

    ctl.mouse_released()
    assert not ctl.dragging and ctl.selected is None

    ctl.mouse_dragged(10, 10)
    assert np.array_equal(p.position, [300.0, 250.0])


def test_select_on_empty_space():
    ctl = make_controller()
    ctl.sim.create_particle(100, 100, +1)

    ctl.select_tool(Tool.SELECT)
    ctl.mouse_pressed(400, 400)

    assert not ctl.dragging
    assert ctl.selected is None


def test_drag_only_with_select_tool():
    ctl = make_controller()
    p = ctl.sim.create_particle(100, 100, +1)
    ctl.select_tool(Tool.SELECT)
    ctl.mouse_pressed(100, 100)

    ctl.select_tool(Tool.ERASE)
    ctl.mouse_dragged(300, 300)

    assert np.array_equal(p.position, [100.0, 100.0])


def test_labels():
    assert tool_label(None) == "None"
    assert tool_label(Tool.ADD_PLUS) == "Add + Charge"
    assert Tool("erase").label == "Erase"
    with pytest.raises(ValueError):
        Tool("lasso")
