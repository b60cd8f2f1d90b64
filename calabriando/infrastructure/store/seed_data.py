"""Sample rows for the in-memory backend used in dev/local runs."""

from __future__ import annotations

from typing import Any

SEED_TABLES: dict[str, list[dict[str, Any]]] = {
    "content": [
        {
            "id": "c1",
            "section": "hero-1",
            "title": "Scopri la Calabria",
            "description": "Mare, montagna e tradizioni",
            "image_url": "https://images.example.com/hero-1.jpg",
            "display_order": 1,
            "translations": {
                "it": {"title": "Scopri la Calabria", "description": "Mare, montagna e tradizioni"},
                "en": {"title": "Discover Calabria", "description": "Sea, mountains and traditions"},
            },
        },
        {
            "id": "c2",
            "section": "experience-food",
            "title": "Gastronomia calabrese",
            "description": "Nduja, peperoncino e cipolla di Tropea",
            "image_url": "https://images.example.com/food.jpg",
            "display_order": 2,
            "translations": {
                "it": {"title": "Gastronomia calabrese", "description": "Nduja, peperoncino e cipolla di Tropea"},
                "en": {"title": "Calabrian food", "description": "Nduja, chili pepper and Tropea onion"},
            },
        },
    ],
    "tours": [
        {
            "id": "tour-tropea",
            "title": "Tropea e Capo Vaticano",
            "description": "Un giorno tra le spiagge della Costa degli Dei",
            "price": 45,
            "max_participants": 12,
            "duration": "8h",
            "location": "Tropea",
            "category": "region",
            "created_at": "2024-03-01T10:00:00Z",
            "available_dates": [
                {"date": "2025-07-12", "time": ["09:00", "17:00"]},
                {"date": "2025-07-19", "time": ["09:00", "17:00"]},
            ],
            "translations": {
                "it": {"title": "Tropea e Capo Vaticano", "description": "Un giorno tra le spiagge della Costa degli Dei"},
                "en": {"title": "Tropea and Capo Vaticano", "description": "A day on the beaches of the Coast of the Gods"},
            },
        }
    ],
    "adventures": [
        {
            "id": "adv-rafting",
            "title": "Rafting sul Lao",
            "description": "Discesa in gommone nelle gole del fiume Lao",
            "price": 60,
            "max_participants": 8,
            "duration": "3h",
            "location": "Laino Borgo",
            "adventure_type": "rafting",
            "created_at": "2024-04-01T10:00:00Z",
            "available_dates": [{"date": "2025-08-02", "time": ["10:00", "13:00"]}],
            "translations": {
                "it": {"title": "Rafting sul Lao", "description": "Discesa in gommone nelle gole del fiume Lao"},
                "en": {"title": "Rafting on the Lao", "description": "Rafting through the Lao river gorges"},
            },
        }
    ],
    "special_events": [
        {
            "id": "evt-peperoncino",
            "location": "Diamante",
            "date": "2025-09-06",
            "time": "18:00 - 23:00",
            "max_participants": 40,
            "created_at": "2024-05-01T10:00:00Z",
            "translations": {
                "it": {"title": "Festival del Peperoncino", "description": "Degustazioni e musica"},
                "en": {"title": "Chili Pepper Festival", "description": "Tastings and music"},
            },
        }
    ],
    "cultural_sites": [
        {"id": "site-1", "name": "Bronzi di Riace", "description": "Museo Archeologico di Reggio Calabria", "type": "museum"}
    ],
    "restaurants": [{"id": "rest-1", "name": "Trattoria del Porto", "description": "Pesce fresco a Pizzo"}],
    "bb": [{"id": "bb-1", "name": "B&B Il Borgo", "description": "Nel centro storico di Gerace"}],
}
