"""Preset event templates for quickly filling the budget form."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from eventbudget.exceptions import UnknownTemplateError
from eventbudget.models.enums import CateringType, City, EventType, ServiceCode, VenueType

if TYPE_CHECKING:
    from eventbudget.models.params import EventParameters


class EventTemplate(BaseModel):
    """A named set of event parameters applied on top of the current form."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    data: dict[str, Any]


EVENT_TEMPLATES: list[EventTemplate] = [
    EventTemplate(
        id="corporate-meeting",
        name="Corporate Meeting",
        icon="Building2",
        data={
            "city": City.MUMBAI.value,
            "audience_size": 50,
            "event_type": EventType.CORPORATE.value,
            "venue_type": VenueType.CONFERENCE_CENTER.value,
            "catering_type": CateringType.COFFEE_BREAK.value,
            "duration": 4,
            "additional_services": (ServiceCode.AV_EQUIPMENT.value, ServiceCode.PARKING.value),
        },
    ),
    EventTemplate(
        id="wedding-reception",
        name="Wedding Reception",
        icon="Heart",
        data={
            "city": City.DELHI.value,
            "audience_size": 150,
            "event_type": EventType.WEDDING.value,
            "venue_type": VenueType.HOTEL_BALLROOM.value,
            "catering_type": CateringType.PLATED_DINNER.value,
            "duration": 8,
            "additional_services": (
                ServiceCode.PHOTOGRAPHY.value,
                ServiceCode.MUSIC.value,
                ServiceCode.FLOWERS.value,
            ),
        },
    ),
    EventTemplate(
        id="academic-conference",
        name="Academic Conference",
        icon="GraduationCap",
        data={
            "city": City.BANGALORE.value,
            "audience_size": 200,
            "event_type": EventType.ACADEMIC.value,
            "venue_type": VenueType.UNIVERSITY_HALL.value,
            "catering_type": CateringType.BUFFET.value,
            "duration": 6,
            "additional_services": (
                ServiceCode.AV_EQUIPMENT.value,
                ServiceCode.REGISTRATION.value,
            ),
        },
    ),
    EventTemplate(
        id="product-launch",
        name="Product Launch",
        icon="Rocket",
        data={
            "city": City.PUNE.value,
            "audience_size": 100,
            "event_type": EventType.PRODUCT_LAUNCH.value,
            "venue_type": VenueType.ROOFTOP_VENUE.value,
            "catering_type": CateringType.COCKTAIL.value,
            "duration": 4,
            "additional_services": (
                ServiceCode.AV_EQUIPMENT.value,
                ServiceCode.PHOTOGRAPHY.value,
                ServiceCode.SECURITY.value,
            ),
        },
    ),
]


def get_template(template_id: str) -> EventTemplate:
    for template in EVENT_TEMPLATES:
        if template.id == template_id:
            return template
    msg = f"Unknown event template '{template_id}'"
    raise UnknownTemplateError(msg)


def apply_template(params: EventParameters, template_id: str) -> EventParameters:
    """Overlay a template's fields onto ``params``.

    Fields the template does not set (setup and cleanup time) keep their
    current values.
    """
    template = get_template(template_id)
    return params.model_copy(update=template.data)
