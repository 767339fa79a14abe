"""
Scripted pointer session: place charges with the tools, drag one, erase
another, and record the frames.

Run:
  python examples/tool_session.py
"""
from charge_sim import Simulation, SimConfig, Tool, ToolController
from charge_sim.renderer import BufferedRenderer
from charge_sim.tools import tool_label

sim = Simulation(config=SimConfig(seed=2024, show_field=True))
ctl = ToolController(sim)
renderer = BufferedRenderer()

ctl.select_tool(Tool.ADD_PLUS)
ctl.mouse_pressed(300, 300)
ctl.select_tool(Tool.ADD_RANDOM)
for x in (450, 550, 650):
    ctl.mouse_pressed(x, 300)

ctl.select_tool(Tool.SELECT)
ctl.mouse_pressed(300, 300)
for step in range(20):
    ctl.mouse_dragged(300, 300 - 5 * step)
    renderer.render_simulation(sim)
ctl.mouse_released()

ctl.select_tool(Tool.ERASE)
x, y = sim.particles[-1].position
ctl.mouse_pressed(float(x), float(y))

for _ in range(40):
    renderer.render_simulation(sim)

print("active tool:", tool_label(ctl.active_tool))
print("frames recorded:", len(renderer.frames))
print("counts:", sim.counts())
