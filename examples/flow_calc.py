from physics_lab import setup_logging
from physics_lab.flow import FlowFunction, flow_table, invert

setup_logging()

lam = 0.8
for fid, value in flow_table(lam).items():
    print(f"{fid.value:>4}({lam}) = {value:.6f}")

# q and φ give a subsonic and a supersonic solution
for fid, value in [(FlowFunction.Q, 0.8), (FlowFunction.PHI, 1.5), (FlowFunction.Y, 2.0)]:
    result = invert(fid, value)
    print(f"{fid.value}(λ) = {value}: λ =", ", ".join(f"{v:.6f}" for v in result.values()))
