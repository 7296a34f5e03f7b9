from physics_lab import setup_logging
from physics_lab.models import WaveModel

setup_logging()

model = WaveModel(surface="halfsine")
model.restart()
for _ in range(50):
    model.step()

x, z = model.grid.row(0)
print(f"t = {model.time:.2f}")
for xi, zi in zip(x[::5], z[::5]):
    print(f"  x={xi:7.4f}  z={zi:+.5f}")
