from physics_lab import make_model, setup_logging
from physics_lab.models.invariants import double_pendulum_energy

setup_logging()

model = make_model("double_pendulum")
params = model.get_parameters()
params.set("dtime", 0.01)
params.set("theta2_0", 90.0)
model.set_parameters(params)
model.restart()

e0 = double_pendulum_energy(model.state, model.mass, model.length)
for _ in range(1000):
    model.step()

print("t =", model.elapsed_time(), "angles:", model.theta1, model.theta2,
      "energy drift:", double_pendulum_energy(model.state, model.mass, model.length) - e0)
