import numpy as np
from physics_lab import setup_logging
from physics_lab.special import y0_comparison_table

setup_logging()

print(f"{'x':>6} {'Y0 integral':>14} {'Y0 series':>14} {'|diff|':>10}")
for x, y_int, y_ser, delta in y0_comparison_table(np.linspace(0.5, 10.0, 20)):
    print(f"{x:6.3f} {y_int:14.9f} {y_ser:14.9f} {delta:10.2e}")
