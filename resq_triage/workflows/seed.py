"""Demo fixtures: fill the store with realistic incidents around a city."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from ..models import Category, ClassificationResult, Incident, Location
from ..services.storage import IncidentStore

logger = logging.getLogger(__name__)

# Central coordinates (Mumbai)
DEFAULT_CENTER = Location(lat=19.0760, lng=72.8777)

SCENARIOS: List[dict] = [
    {
        "category": Category.MEDICAL,
        "summary": "Medical Emergency - Chest Pain",
        "description": (
            "Elderly person experiencing severe chest pain and difficulty breathing. "
            "Immediate medical attention required."
        ),
        "urgency": 9,
    },
    {
        # Floods fall outside the closed category set.
        "category": Category.OTHER,
        "summary": "Flood - Water Rising",
        "description": (
            "Heavy rainfall has caused severe flooding. Water level rising rapidly in "
            "residential area. Multiple families trapped on upper floors."
        ),
        "urgency": 8,
    },
    {
        "category": Category.FOOD,
        "summary": "Food Assistance Needed",
        "description": (
            "Family of 6 without food for 2 days due to flood situation. Unable to "
            "access local markets. Require immediate food supplies."
        ),
        "urgency": 5,
    },
    {
        "category": Category.RESCUE,
        "summary": "Rescue - Building Collapse",
        "description": (
            "Partial building collapse reported. 3-4 people possibly trapped under "
            "debris. Urgent rescue operation needed."
        ),
        "urgency": 10,
    },
    {
        "category": Category.MEDICAL,
        "summary": "Medical Emergency - Accident",
        "description": (
            "Road accident with multiple injuries. Victims need immediate medical "
            "assistance and ambulance service."
        ),
        "urgency": 7,
    },
]


def seed_incidents(
    store: IncidentStore,
    count: int = 20,
    center: Location = DEFAULT_CENTER,
    max_offset: float = 0.05,
    rng: Optional[random.Random] = None,
) -> List[Incident]:
    """Replace the store contents with *count* random scenario incidents."""
    rng = rng or random.Random()
    store.delete_all()

    created: List[Incident] = []
    for _ in range(count):
        scenario = rng.choice(SCENARIOS)
        location = Location(
            lat=center.lat + rng.uniform(-max_offset, max_offset),
            lng=center.lng + rng.uniform(-max_offset, max_offset),
        )
        result = ClassificationResult(
            category=scenario["category"],
            urgency=scenario["urgency"],
            summary=scenario["summary"],
        )
        created.append(store.create(scenario["description"], location, result))

    logger.info("Seeded %d incidents around (%.4f, %.4f)", len(created), center.lat, center.lng)
    return created

__all__ = ["DEFAULT_CENTER", "SCENARIOS", "seed_incidents"]
