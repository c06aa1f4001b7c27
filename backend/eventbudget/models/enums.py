"""Enums for the eventbudget domain models.

Values are the hyphenated codes the planning forms submit, so a member
compares and hashes equal to the raw string a caller sends.
"""

from enum import StrEnum


class City(StrEnum):
    """Supported event cities."""

    MUMBAI = "mumbai"
    DELHI = "delhi"
    BANGALORE = "bangalore"
    HYDERABAD = "hyderabad"
    AHMEDABAD = "ahmedabad"
    SURAT = "surat"
    VADODARA = "vadodara"
    RAJKOT = "rajkot"
    GANDHINAGAR = "gandhinagar"
    CHENNAI = "chennai"
    KOLKATA = "kolkata"
    PUNE = "pune"
    JAIPUR = "jaipur"
    LUCKNOW = "lucknow"


class EventType(StrEnum):
    """Event types offered by the budget calculator form."""

    CORPORATE = "corporate"
    WEDDING = "wedding"
    BIRTHDAY = "birthday"
    ACADEMIC = "academic"
    FUNDRAISER = "fundraiser"
    PRODUCT_LAUNCH = "product-launch"
    NETWORKING = "networking"
    WORKSHOP = "workshop"


class VenueType(StrEnum):
    """Venue categories, each with a base rental cost per 4-hour block."""

    HOTEL_BALLROOM = "hotel-ballroom"
    CONFERENCE_CENTER = "conference-center"
    RESTAURANT = "restaurant"
    OUTDOOR_VENUE = "outdoor-venue"
    COMMUNITY_CENTER = "community-center"
    UNIVERSITY_HALL = "university-hall"
    BANQUET_HALL = "banquet-hall"
    ROOFTOP_VENUE = "rooftop-venue"


class CateringType(StrEnum):
    """Catering styles, each priced per guest."""

    FULL_SERVICE = "full-service"
    BUFFET = "buffet"
    COCKTAIL = "cocktail"
    PLATED_DINNER = "plated-dinner"
    BOX_LUNCH = "box-lunch"
    COFFEE_BREAK = "coffee-break"
    NO_CATERING = "no-catering"


class ServiceCode(StrEnum):
    """Optional add-on services."""

    AV_EQUIPMENT = "av-equipment"
    PHOTOGRAPHY = "photography"
    MUSIC = "music"
    FLOWERS = "flowers"
    SECURITY = "security"
    PARKING = "parking"
    REGISTRATION = "registration"
    TRANSPORTATION = "transportation"


class ExpenseCategory(StrEnum):
    """Budget categories a line item can belong to."""

    VENUE = "venue"
    CATERING = "catering"
    SERVICES = "services"
    MISCELLANEOUS = "miscellaneous"
