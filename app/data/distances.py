"""Road distances between Senegalese cities, as driven by Mbaye.

Durations are in minutes, costs in FCFA. Seasonal factors multiply the
dry-season duration; each pair is stored once and looked up in both
directions.
"""

SENEGAL_DISTANCES = [
    # Dakar region to the rest of the country
    {
        "from_city": "Dakar",
        "to_city": "Thiès",
        "distance": 70,
        "duration": 90,
        "road_quality": "excellent",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.1},
        "toll_cost": 2000,
        "fuel_cost": 8000,
        "rest_stops": [
            {
                "name": "Station Elton Rufisque",
                "km": 25,
                "type": "fuel",
                "duration": 10,
                "optional": True,
                "description": "Dernière grande station avant Thiès",
            },
        ],
        "warnings": ["Trafic dense sortie Dakar heures de pointe"],
        "driver_notes": "Route excellent état, autoroute à péage. Éviter 7h-9h et 17h-19h pour trafic Dakar.",
    },
    {
        "from_city": "Dakar",
        "to_city": "Saint-Louis",
        "distance": 270,
        "duration": 240,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.3},
        "fuel_cost": 30000,
        "rest_stops": [
            {
                "name": "Thiès - Pause déjeuner",
                "km": 70,
                "type": "food",
                "duration": 45,
                "optional": False,
                "description": "Excellent thieboudjen chez Awa",
            },
            {
                "name": "Louga - Station Total",
                "km": 180,
                "type": "fuel",
                "duration": 15,
                "optional": True,
                "description": "Dernière grande station avant Saint-Louis",
            },
        ],
        "warnings": [
            "Route dégradée après Louga en saison des pluies",
            "Animaux sur route secteur Kebemer",
        ],
        "driver_notes": (
            "Magnifique route, paysages changeants. Prévoir pause repas Thiès obligatoire. "
            "En saison pluies, attention nids de poule après Louga."
        ),
    },
    {
        "from_city": "Dakar",
        "to_city": "Lac Rose",
        "distance": 35,
        "duration": 60,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.2},
        "fuel_cost": 4000,
        "rest_stops": [
            {
                "name": "Village artisanal Ngor",
                "km": 15,
                "type": "cultural",
                "duration": 20,
                "optional": True,
                "description": "Potiers et sculpteurs traditionnels",
            },
        ],
        "warnings": ["Derniers 3km sur piste sablonneuse"],
        "driver_notes": (
            "Route goudronnée jusqu'au village, puis piste. SUV recommandé pour accès direct au lac. "
            "Couleur rose optimale 16h-18h."
        ),
    },
    {
        "from_city": "Dakar",
        "to_city": "Mbour",
        "distance": 80,
        "duration": 90,
        "road_quality": "excellent",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.1},
        "fuel_cost": 9000,
        "rest_stops": [
            {
                "name": "Diamniadio - Nouveau pôle urbain",
                "km": 35,
                "type": "fuel",
                "duration": 10,
                "optional": True,
                "description": "Grande station moderne",
            },
        ],
        "warnings": ["Trafic dense weekend vers plages"],
        "driver_notes": (
            "Route côtière magnifique, autoroute en excellent état. Très fréquentée le weekend, "
            "partir tôt. Saly à 5km de Mbour."
        ),
    },
    {
        "from_city": "Dakar",
        "to_city": "Joal-Fadiouth",
        "distance": 114,
        "duration": 135,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.2},
        "fuel_cost": 13000,
        "rest_stops": [
            {
                "name": "Mbour - Pause plage",
                "km": 80,
                "type": "scenic",
                "duration": 20,
                "optional": True,
                "description": "Vue sur océan, restaurants de poisson",
            },
        ],
        "warnings": ["Route étroite après Mbour"],
        "driver_notes": (
            "Route vers l'île aux coquillages ! Magnifique côte sérère. Joal, village natal de Senghor. "
            "Fadiouth, île unique au monde."
        ),
    },
    {
        "from_city": "Dakar",
        "to_city": "Lompoul",
        "distance": 208,
        "duration": 180,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.3},
        "fuel_cost": 25000,
        "rest_stops": [
            {
                "name": "Thiès - Pause technique",
                "km": 70,
                "type": "fuel",
                "duration": 15,
                "optional": False,
                "description": "Plein obligatoire avant le désert",
            },
            {
                "name": "Kebemer - Carrefour routes",
                "km": 160,
                "type": "fuel",
                "duration": 10,
                "optional": True,
                "description": "Dernière station avant Lompoul",
            },
        ],
        "warnings": ["Derniers 15km sur piste sablonneuse vers campement"],
        "driver_notes": (
            "Route vers le petit Sahara sénégalais ! Dunes magnifiques. Prévoir 4x4 pour accès direct "
            "au campement. Coucher de soleil inoubliable."
        ),
    },
    # Petite-Côte
    {
        "from_city": "Mbour",
        "to_city": "Joal-Fadiouth",
        "distance": 34,
        "duration": 50,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.1},
        "fuel_cost": 4000,
        "rest_stops": [],
        "warnings": ["Route côtière étroite"],
        "driver_notes": (
            "Belle route côtière directe. Paysages sérères authentiques. "
            "Parfait complément après plages de Saly."
        ),
    },
    # Lompoul to the north
    {
        "from_city": "Lompoul",
        "to_city": "Saint-Louis",
        "distance": 88,
        "duration": 78,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.2},
        "fuel_cost": 11000,
        "rest_stops": [
            {
                "name": "Louga - Croisement routes",
                "km": 45,
                "type": "fuel",
                "duration": 10,
                "optional": True,
                "description": "Station et petite restauration",
            },
        ],
        "warnings": ["Animaux sur route secteur rural"],
        "driver_notes": (
            "Route directe du désert vers la ville historique. Contraste saisissant entre dunes "
            "et architecture coloniale. Belle transition."
        ),
    },
    # Thiès
    {
        "from_city": "Thiès",
        "to_city": "Saint-Louis",
        "distance": 200,
        "duration": 135,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.2},
        "fuel_cost": 24000,
        "rest_stops": [
            {
                "name": "Louga - Carrefour du Nord",
                "km": 110,
                "type": "fuel",
                "duration": 15,
                "optional": True,
                "description": "Grande station et restaurants",
            },
        ],
        "warnings": ["Animaux sur route secteur Kebemer"],
        "driver_notes": (
            "Route directe vers Saint-Louis, plus rapide que par Dakar. "
            "Belle traversée du Cayor et du Walo."
        ),
    },
    {
        "from_city": "Thiès",
        "to_city": "Kaolack",
        "distance": 150,
        "duration": 120,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.4},
        "fuel_cost": 18000,
        "rest_stops": [
            {
                "name": "Diourbel - Marché central",
                "km": 75,
                "type": "cultural",
                "duration": 30,
                "optional": True,
                "description": "Grand marché authentique, capitale du Mouridisme",
            },
        ],
        "warnings": ["Route très dégradée Diourbel-Kaolack en hivernage"],
        "driver_notes": (
            "Traversée du Baol, région arachidière. Route correcte mais attention en saison pluies. "
            "Diourbel mérite arrêt culturel."
        ),
    },
    # Saint-Louis
    {
        "from_city": "Saint-Louis",
        "to_city": "Podor",
        "distance": 180,
        "duration": 150,
        "road_quality": "fair",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.8},
        "fuel_cost": 22000,
        "rest_stops": [
            {
                "name": "Richard Toll - Complexe sucrier",
                "km": 60,
                "type": "cultural",
                "duration": 25,
                "optional": True,
                "description": "Visite usine sucrière et château du Baron Roger",
            },
        ],
        "warnings": ["Route très difficile en hivernage", "Traversées de marigots"],
        "driver_notes": (
            "Route du fleuve, paysages magnifiques mais état difficile. À éviter absolument de juillet "
            "à octobre. Véhicule 4x4 obligatoire en saison pluies."
        ),
    },
    {
        "from_city": "Saint-Louis",
        "to_city": "Parc Djoudj",
        "distance": 60,
        "duration": 90,
        "road_quality": "challenging",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 2.0},
        "fuel_cost": 8000,
        "rest_stops": [],
        "warnings": ["Piste difficile derniers 20km", "Impraticable en saison pluies"],
        "driver_notes": (
            "Magnifique mais difficile d'accès. SUV obligatoire. Meilleure période novembre-mars pour "
            "oiseaux et routes. Départ très matinal recommandé."
        ),
    },
    # Kaolack to the south
    {
        "from_city": "Kaolack",
        "to_city": "Tambacounda",
        "distance": 220,
        "duration": 180,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.3},
        "fuel_cost": 26000,
        "rest_stops": [
            {
                "name": "Kaffrine - Nouveau chef-lieu",
                "km": 110,
                "type": "fuel",
                "duration": 20,
                "optional": False,
                "description": "Ravitaillement obligatoire, nouvelle région",
            },
        ],
        "warnings": ["Peu de stations après Kaffrine"],
        "driver_notes": (
            "Route correcte, passage par nouvelle région Kaffrine. Plein obligatoire à Kaffrine car peu "
            "de stations ensuite. Paysages de savane."
        ),
    },
    {
        "from_city": "Kaolack",
        "to_city": "Ziguinchor",
        "distance": 280,
        "duration": 240,
        "road_quality": "fair",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.6},
        "fuel_cost": 35000,
        "rest_stops": [
            {
                "name": "Foundiougne - Pont sur Saloum",
                "km": 90,
                "type": "scenic",
                "duration": 15,
                "optional": True,
                "description": "Vue magnifique sur les bolongs",
            },
            {
                "name": "Bignona - Dernière grande ville",
                "km": 220,
                "type": "fuel",
                "duration": 25,
                "optional": False,
                "description": "Plein obligatoire et pause repas",
            },
        ],
        "warnings": ["Route dégradée après Foundiougne", "Contrôles fréquents"],
        "driver_notes": (
            "Route longue et fatigante. Pause obligatoire Bignona. Belle traversée Sine-Saloum mais "
            "route difficile. Prévoir journée complète."
        ),
    },
    # Casamance
    {
        "from_city": "Ziguinchor",
        "to_city": "Cap Skirring",
        "distance": 70,
        "duration": 90,
        "road_quality": "good",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.4},
        "fuel_cost": 9000,
        "rest_stops": [
            {
                "name": "Oussouye - Capitale Diola",
                "km": 35,
                "type": "cultural",
                "duration": 30,
                "optional": True,
                "description": "Centre culturel diola authentique",
            },
        ],
        "warnings": ["Pluies rendent pistes secondaires impraticables"],
        "driver_notes": (
            "Belle route vers les plages. Oussouye incontournable pour culture diola. "
            "Meilleures plages du Sénégal au Cap Skirring."
        ),
    },
    # Eastern Senegal
    {
        "from_city": "Tambacounda",
        "to_city": "Kédougou",
        "distance": 180,
        "duration": 150,
        "road_quality": "fair",
        "seasonal_impact": {"dry_season": 1.0, "rainy_season": 1.7},
        "fuel_cost": 22000,
        "rest_stops": [
            {
                "name": "Salémata - Village carrefour",
                "km": 120,
                "type": "food",
                "duration": 30,
                "optional": False,
                "description": "Dernière étape avant région aurifère",
            },
        ],
        "warnings": [
            "Route très dégradée certains tronçons",
            "Orpaillage artisanal, circulation modifiée",
        ],
        "driver_notes": (
            "Route vers l'or ! Magnifiques paysages montagneux mais route difficile. "
            "4x4 recommandé en saison pluies. Région exceptionnelle pour nature."
        ),
    },
]

# Autocomplete list
SENEGAL_CITIES = [
    "Dakar", "Thiès", "Saint-Louis", "Kaolack", "Tambacounda",
    "Ziguinchor", "Kédougou", "Kolda", "Louga", "Fatick",
    "Diourbel", "Podor", "Kaffrine", "Cap Skirring", "Lac Rose",
    "Parc Djoudj", "Richard Toll", "Foundiougne", "Bignona",
    "Mbour", "Saly", "Joal-Fadiouth", "Lompoul",
]

# Cities recognised in free-text chat messages
PROMPT_CITIES = [
    "Dakar", "Saint-Louis", "Thiès", "Saly", "Kaolack", "Tambacounda",
    "Ziguinchor", "Cap Skirring", "Touba", "Lac Rose", "Richard Toll",
    "Podor", "Joal-Fadiouth", "Diourbel", "Fatick", "Kaffrine",
    "Niokolo-Koba", "Kédougou", "Oussouye", "Bignona", "Matam",
    "Mbour", "Lompoul", "Parc Djoudj",
]
