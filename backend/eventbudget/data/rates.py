"""Base rates for venues, catering and add-on services.

All amounts are in rupees before the city multiplier is applied.
"""

from __future__ import annotations

from eventbudget.models.enums import CateringType, ServiceCode, VenueType

# Venue rental per 4-hour block
VENUE_COSTS: dict[VenueType, float] = {
    VenueType.HOTEL_BALLROOM: 2000,
    VenueType.CONFERENCE_CENTER: 1500,
    VenueType.RESTAURANT: 1200,
    VenueType.OUTDOOR_VENUE: 800,
    VenueType.COMMUNITY_CENTER: 500,
    VenueType.UNIVERSITY_HALL: 600,
    VenueType.BANQUET_HALL: 1000,
    VenueType.ROOFTOP_VENUE: 1800,
}

# Per guest
CATERING_COSTS: dict[CateringType, float] = {
    CateringType.FULL_SERVICE: 85,
    CateringType.BUFFET: 45,
    CateringType.COCKTAIL: 35,
    CateringType.PLATED_DINNER: 75,
    CateringType.BOX_LUNCH: 25,
    CateringType.COFFEE_BREAK: 15,
    CateringType.NO_CATERING: 0,
}

# Flat per event
SERVICE_COSTS: dict[ServiceCode, float] = {
    ServiceCode.AV_EQUIPMENT: 800,
    ServiceCode.PHOTOGRAPHY: 1200,
    ServiceCode.MUSIC: 600,
    ServiceCode.FLOWERS: 400,
    ServiceCode.SECURITY: 300,
    ServiceCode.PARKING: 200,
    ServiceCode.REGISTRATION: 150,
    ServiceCode.TRANSPORTATION: 500,
}

DEFAULT_VENUE_COST: float = 1000
DEFAULT_CATERING_COST: float = 0
DEFAULT_SERVICE_COST: float = 0
