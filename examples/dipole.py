"""
A dipole released from rest: the charges attract, pass through each
other's floor region, and settle under friction. Prints a text frame every
second of simulated time and a field-line summary at the end.

Run:
  python examples/dipole.py
"""
import logging

from charge_sim import Simulation, SimConfig
from charge_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")

sim = Simulation(config=SimConfig(show_field_lines=True))
sim.create_particle(400, 300, +1)
sim.create_particle(600, 300, -1)

renderer = DebugRenderer()
for frame in range(300):
    if frame % 60 == 0:
        renderer.render_simulation(sim)
    else:
        sim.tick()

lines = sim.field_lines()
print("field lines:", len(lines), "points:", sum(len(line) for line in lines))
print("counts:", sim.counts())
