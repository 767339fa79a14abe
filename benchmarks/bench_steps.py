"""
Microbenchmark: time per tick and per field pass vs number of charges.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from charge_sim import Simulation, SimConfig
from charge_sim.profiler import Profiler

def run(n: int, ticks: int = 300):
    prof = Profiler()
    sim = Simulation(config=SimConfig(seed=12345), profiler=prof)

    rng = np.random.default_rng(12345)  # determinism
    for _ in range(n):
        x = float(rng.uniform(0, sim.config.width))
        y = float(rng.uniform(0, sim.config.height))
        sim.create_particle(x, y, sim.random_charge())

    # warmup
    for _ in range(30):
        sim.tick()

    t0 = time.perf_counter()
    for _ in range(ticks):
        sim.tick()
    t1 = time.perf_counter()

    sim.field_lines()
    sim.field_grid()

    per_tick = (t1 - t0) / ticks
    return per_tick, prof.stats.summary()

if __name__ == "__main__":
    for n in [5, 10, 25, 50, 100]:
        per_tick, summary = run(n)
        print(f"N={n:4d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["forces", "integrate", "field"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
