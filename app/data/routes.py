# Known demo routes. Step distances are display strings, as shown to the customer.
DEMO_ROUTES = {
    "dakar-airport": {
        "distance": 15,
        "duration": "35 minutes",
        "duration_minutes": 35,
        "traffic_multiplier": 1.4,
        "steps": [
            {
                "instruction": "Sortir de Dakar centre par l'Avenue Léopold Sédar Senghor",
                "distance": "3.2 km",
                "duration": "8 min",
            },
            {
                "instruction": "Continuer sur la Route de l'Aéroport (N1)",
                "distance": "8.5 km",
                "duration": "18 min",
            },
            {
                "instruction": "Prendre la sortie vers l'Aéroport International",
                "distance": "2.8 km",
                "duration": "6 min",
            },
            {
                "instruction": "Arriver à l'Aéroport Léopold Sédar Senghor",
                "distance": "0.5 km",
                "duration": "3 min",
            },
        ],
    },
    "dakar-thies": {
        "distance": 70,
        "duration": "1h 45min",
        "duration_minutes": 105,
        "traffic_multiplier": 1.2,
        "steps": [
            {
                "instruction": "Sortir de Dakar par la Route Nationale N2",
                "distance": "12 km",
                "duration": "25 min",
            },
            {
                "instruction": "Continuer sur l'autoroute à péage A1 vers Thiès",
                "distance": "50 km",
                "duration": "65 min",
            },
            {
                "instruction": "Prendre la sortie Thiès Centre",
                "distance": "6 km",
                "duration": "12 min",
            },
            {
                "instruction": "Arriver au centre-ville de Thiès",
                "distance": "2 km",
                "duration": "8 min",
            },
        ],
    },
    "default": {
        "distance": 25,
        "duration": "50 minutes",
        "duration_minutes": 50,
        "traffic_multiplier": 1.3,
        "steps": [
            {
                "instruction": "Départ du point d'origine",
                "distance": "2 km",
                "duration": "8 min",
            },
            {
                "instruction": "Suivre la route principale",
                "distance": "18 km",
                "duration": "32 min",
            },
            {
                "instruction": "Prendre la sortie vers la destination",
                "distance": "4 km",
                "duration": "8 min",
            },
            {
                "instruction": "Arriver à destination",
                "distance": "1 km",
                "duration": "2 min",
            },
        ],
    },
}

# Combined departure + destination length above which an unknown trip is treated as long distance
LONG_TRIP_NAME_LENGTH = 50
