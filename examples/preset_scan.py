"""orbcross Preset Scan: run every built-in scenario for a simulated day.

Drives the scenario the way an animation loop would: 30 frames per real
second at 100x speed, with collision prediction once per real second.
"""

import logging

from orbcross import ORBITAL_PRESETS, Scenario

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

FRAME_S = 1 / 30

for key, preset in ORBITAL_PRESETS.items():
    scenario = Scenario.from_preset(key)
    scenario.state.set_speed(1000.0)

    print(f"{preset.name}: {len(scenario.intersections)} crossing region(s)")

    alerts = set()
    while scenario.state.time_s < 86400.0:
        prediction = scenario.tick(FRAME_S)
        if prediction is not None:
            alerts.add(round(prediction.time_to_collision_s))

    for t in sorted(alerts)[:5]:
        print(f"  predicted collision at t={t} s")
