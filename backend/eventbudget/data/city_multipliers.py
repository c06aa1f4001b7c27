"""City cost multipliers for location-based price adjustment.

Multipliers are relative to the baseline city (Hyderabad = 1.00).
"""

from __future__ import annotations

from eventbudget.models.enums import City

# Maps city code -> multiplier applied to every base cost.
CITY_MULTIPLIERS: dict[City, float] = {
    # Tier-1 metros
    City.MUMBAI: 1.4,
    City.DELHI: 1.3,
    City.BANGALORE: 1.2,
    City.CHENNAI: 1.1,
    City.PUNE: 1.1,
    City.HYDERABAD: 1.0,
    # Gujarat
    City.AHMEDABAD: 0.9,
    City.GANDHINAGAR: 0.9,
    City.VADODARA: 0.85,
    City.SURAT: 0.8,
    City.RAJKOT: 0.75,
    # Other
    City.JAIPUR: 0.9,
    City.KOLKATA: 0.8,
    City.LUCKNOW: 0.7,
}

# Multiplier used when the city is not in the table
DEFAULT_CITY_MULTIPLIER: float = 1.0
