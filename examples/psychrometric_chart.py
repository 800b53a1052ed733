#!/usr/bin/env python
"""
Draw a psychrometric chart and overlay a cooling-coil process.

Constant relative humidity and enthalpy lines are computed with psychro
and plotted with matplotlib; the summer comfort band is shaded.
"""

import numpy as np
import matplotlib.pyplot as plt

from psychro import (
    COMFORT_ZONES,
    Season,
    calculate_properties,
    cooling_dehumidification,
)
from psychro.physics.properties import enthalpy, saturation_humidity_ratio
from psychro.core.constants import GRAINS_PER_LB, STANDARD_PRESSURE_PSIA


def humidity_ratio_at_rh(temp_f, rh_pct):
    state = calculate_properties({"dry_bulb_f": temp_f, "relative_humidity_pct": rh_pct})
    return state.humidity_ratio


def main():
    temps = np.linspace(30, 110, 81)  # °F
    max_grains = 200

    fig, ax = plt.subplots(figsize=(12, 8))

    # Relative humidity lines (100% is the saturation curve)
    for rh in (10, 20, 30, 40, 50, 60, 70, 80, 90, 100):
        grains = np.array([humidity_ratio_at_rh(t, rh) for t in temps]) * GRAINS_PER_LB
        mask = grains <= max_grains
        ax.plot(
            temps[mask],
            grains[mask],
            color="tab:blue" if rh == 100 else "tab:gray",
            linewidth=2 if rh == 100 else 0.7,
        )
        ax.annotate(f"{rh}%", (temps[mask][-1], grains[mask][-1]), fontsize=8)

    # Enthalpy lines, drawn from dry air up to saturation
    for h in range(10, 60, 5):
        line_t, line_w = [], []
        for t in temps:
            w = (h - enthalpy(t, 0.0)) / (enthalpy(t, 1.0) - enthalpy(t, 0.0))
            if 0 <= w <= saturation_humidity_ratio(t, STANDARD_PRESSURE_PSIA):
                line_t.append(t)
                line_w.append(w * GRAINS_PER_LB)
        if line_t:
            ax.plot(line_t, line_w, color="tab:green", linestyle="--", linewidth=0.6)
            ax.annotate(f"{h} BTU/lb", (line_t[0], line_w[0]), fontsize=7, color="tab:green")

    # Summer comfort band
    band = COMFORT_ZONES[Season.SUMMER]
    band_t = np.linspace(band.min_temp_f, band.max_temp_f, 20)
    low = [humidity_ratio_at_rh(t, band.min_rh_pct) * GRAINS_PER_LB for t in band_t]
    high = [humidity_ratio_at_rh(t, band.max_rh_pct) * GRAINS_PER_LB for t in band_t]
    ax.fill_between(band_t, low, high, color="tab:orange", alpha=0.3, label="Summer comfort")

    # Cooling coil process
    room = calculate_properties({"dry_bulb_f": 80.0, "relative_humidity_pct": 60.0})
    coil = cooling_dehumidification(room, coil_temp_f=50.0)
    ax.plot(
        [coil.inlet.dry_bulb_f, coil.outlet.dry_bulb_f],
        [coil.inlet.grains, coil.outlet.grains],
        "o-",
        color="tab:red",
        label=coil.name,
    )

    ax.set_xlim(temps[0], temps[-1])
    ax.set_ylim(0, max_grains)
    ax.set_xlabel("Dry-bulb temperature (°F)")
    ax.set_ylabel("Humidity ratio (grains/lb dry air)")
    ax.yaxis.tick_right()
    ax.yaxis.set_label_position("right")
    ax.set_title(f"Psychrometric chart at {STANDARD_PRESSURE_PSIA} psia")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig("psychrometric_chart.png")
    print("Chart saved to psychrometric_chart.png")
    print(f"Coil: {coil.inlet}")
    print(f"   -> {coil.outlet}")


if __name__ == "__main__":
    main()
