"""orbcross Quickstart: two crossing orbits and the next predicted collision."""

import math

from orbcross import OrbitalElements, find_intersections, orbital_period, predict_collision

sat1 = OrbitalElements(semi_major_axis_m=7000e3, inclination_rad=0.5)
sat2 = OrbitalElements(semi_major_axis_m=7000e3, inclination_rad=0.8, mean_anomaly_rad=0.02)

print(f"Period:     {orbital_period(sat1) / 60:.1f} min")

points = find_intersections(sat1, sat2)
print(f"Crossings:  {len(points)}")
for p in points:
    print(f"  ({p[0] / 1e3:9.1f}, {p[1] / 1e3:9.1f}, {p[2] / 1e3:9.1f}) km")

prediction = predict_collision(sat1, sat2, current_time_s=0.0)
if prediction is None:
    print("No collision predicted in the next 48 h")
else:
    t = prediction.time_to_collision_s
    print(f"Collision at T+ {math.floor(t / 3600)}h {math.floor(t % 3600 / 60)}m {t % 60:.0f}s")
