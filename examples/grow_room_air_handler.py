#!/usr/bin/env python
"""
Grow room air handler: outdoor air economizer mix, cooling coil and loads.

Mixes 20% outdoor air with 80% return air, passes the mix through a
chilled-water coil and reports the coil and room cooling loads over a
day of outdoor conditions.
"""

import numpy as np
import matplotlib.pyplot as plt

from psychro import PsychrometricEngine, is_in_comfort_zone

SUPPLY_CFM = 4000
OUTDOOR_AIR_FRACTION = 0.2
COIL_TEMP_F = 50.0
LIGHTING_LOAD_BTU_HR = 60000  # 1000 W fixtures × ~17.6
TRANSPIRATION_BTU_HR = 25000


def main():
    engine = PsychrometricEngine()
    room = engine.resolve(78.0, relative_humidity_pct=55.0)
    print(f"Room:    {room}")

    hours = np.arange(24)
    outdoor_temps = 80 + 15 * np.sin(np.pi * (hours - 9) / 12)  # peaks at 3 PM
    outdoor_rh = 70 - 20 * np.sin(np.pi * (hours - 9) / 12)

    coil_tons, supply_temps, room_tons = [], [], []
    for t_out, rh_out in zip(outdoor_temps, outdoor_rh):
        outdoor = engine.resolve(float(t_out), relative_humidity_pct=float(rh_out))
        mixed = engine.mix_fractions(
            outdoor, OUTDOOR_AIR_FRACTION, room, 1 - OUTDOOR_AIR_FRACTION
        )
        coil = engine.cooling_dehumidification(mixed, COIL_TEMP_F)
        coil_load = coil.at_airflow(SUPPLY_CFM)

        load = engine.cooling_load(
            room,
            outdoor,
            SUPPLY_CFM * OUTDOOR_AIR_FRACTION,
            sensible_gain_btu_hr=LIGHTING_LOAD_BTU_HR,
            latent_gain_btu_hr=TRANSPIRATION_BTU_HR,
        )

        coil_tons.append(-coil_load.total_heat / 12000)
        supply_temps.append(coil.outlet.dry_bulb_f)
        room_tons.append(load.tons)

    peak = int(np.argmax(coil_tons))
    print(f"Peak coil load: {coil_tons[peak]:.1f} tons at hour {peak}")
    print(f"Supply air: {min(supply_temps):.1f}-{max(supply_temps):.1f}°F")
    print(f"Room in summer comfort zone: {is_in_comfort_zone(room)}")

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    ax1.plot(hours, coil_tons, label="Coil load")
    ax1.plot(hours, room_tons, label="Ventilation + internal load")
    ax1.set_ylabel("Cooling (tons)")
    ax1.legend()
    ax1.grid(True)

    ax2.plot(hours, outdoor_temps, label="Outdoor dry bulb")
    ax2.plot(hours, supply_temps, label="Supply dry bulb")
    ax2.set_xlabel("Hour of day")
    ax2.set_ylabel("Temperature (°F)")
    ax2.legend()
    ax2.grid(True)

    plt.tight_layout()
    plt.savefig("grow_room_air_handler.png")
    print("Results saved to grow_room_air_handler.png")


if __name__ == "__main__":
    main()
