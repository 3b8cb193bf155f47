# Destinations Mbaye offers as day trips or stops on a circuit
DESTINATIONS = [
    {
        "id": "goree-island",
        "name": "Île de Gorée",
        "region": "Dakar",
        "type": "unesco-heritage",
        "description": (
            "Site historique majeur de la traite atlantique, inscrit au patrimoine mondial de l'UNESCO. "
            "Un lieu de mémoire incontournable pour comprendre l'histoire du Sénégal et de l'Afrique."
        ),
        "experiences": [
            {
                "id": "goree-memory-tour",
                "name": "Visite guidée de la Maison des Esclaves",
                "category": "historical-tour",
                "duration": "2-3 heures",
                "mbaye_notes": (
                    "Je recommande fortement cette visite le matin pour éviter la foule. "
                    "Les guides locaux connaissent des histoires que les livres ne racontent pas."
                ),
            },
        ],
        "best_time_to_visit": ["dry-season"],
        "access_by_road": "Ferry depuis le port de Dakar (20 minutes)",
        "estimated_duration": {
            "minimum": 4,
            "recommended": 6,
            "maximum": 8,
            "notes": "Inclut transport, ferry et visite complète",
        },
        "difficulty": "moderate",
        "cost": {
            "min": 30000,
            "max": 60000,
            "currency": "XOF",
            "includes": ["Transport", "Ferry", "Guide de base"],
            "excludes": ["Repas", "Souvenirs", "Guide spécialisé"],
        },
        "tags": ["UNESCO", "Histoire", "Mémoire", "Incontournable", "Émotion", "Culture"],
        "mbaye_recommendation": (
            "C'est LE site à voir absolument au Sénégal. J'y emmène tous mes clients, et chaque fois "
            "c'est un moment fort. Prévoyez du temps, ne vous précipitez pas."
        ),
    },
    {
        "id": "lac-rose",
        "name": "Lac Rose (Lac Retba)",
        "region": "Dakar",
        "type": "natural-park",
        "description": (
            "Lac salé aux eaux roses spectaculaires, ancien point d'arrivée du rallye Paris-Dakar. "
            "Phénomène naturel unique dû aux micro-algues et à la forte salinité."
        ),
        "experiences": [
            {
                "id": "lac-rose-salt-harvest",
                "name": "Récolte traditionnelle du sel avec les sauniers",
                "category": "cultural-immersion",
                "duration": "2-3 heures",
                "mbaye_notes": (
                    "Les sauniers sont très accueillants mais c'est leur gagne-pain. Un petit pourboire "
                    "est toujours apprécié. La couleur rose est plus intense en fin d'après-midi."
                ),
            },
        ],
        "best_time_to_visit": ["dry-season"],
        "access_by_road": "30 km de Dakar par route goudronnée, puis 2 km de piste",
        "estimated_duration": {
            "minimum": 3,
            "recommended": 4,
            "maximum": 6,
            "notes": "Inclut transport et activités sur site",
        },
        "difficulty": "easy",
        "cost": {
            "min": 25000,
            "max": 50000,
            "currency": "XOF",
            "includes": ["Transport", "Entrée", "Guide local"],
            "excludes": ["Activités spécialisées", "Repas", "Achats"],
        },
        "tags": ["Nature", "Unique", "Photo", "Sel", "Tradition", "Insolite"],
        "mbaye_recommendation": (
            "Magnifique mais attention à bien choisir l'heure ! En milieu de journée avec le soleil "
            "blanc, on ne voit pas le rose. Fin d'après-midi, c'est magique."
        ),
    },
    {
        "id": "saint-louis",
        "name": "Saint-Louis du Sénégal",
        "region": "Saint-Louis",
        "type": "unesco-heritage",
        "description": (
            "Ancienne capitale de l'AOF, ville coloniale inscrite au patrimoine UNESCO. Architecture "
            "créole unique, jazz, et porte d'entrée vers le parc du Djoudj."
        ),
        "experiences": [
            {
                "id": "saint-louis-architecture-walk",
                "name": "Balade architecturale dans la vieille ville",
                "category": "cultural-immersion",
                "duration": "2-3 heures",
                "mbaye_notes": (
                    "Saint-Louis a une âme particulière. Les anciens racontent des histoires "
                    "passionnantes. N'hésitez pas à vous arrêter prendre un thé à la menthe."
                ),
            },
            {
                "id": "djoudj-bird-park",
                "name": "Parc ornithologique du Djoudj",
                "category": "nature-wildlife",
                "duration": "4-6 heures",
                "mbaye_notes": (
                    "Lever très tôt pour cette excursion ! Les oiseaux sont plus actifs au petit matin. "
                    "C'est un spectacle que même moi, après 20 ans, je trouve toujours magique."
                ),
            },
        ],
        "best_time_to_visit": ["dry-season"],
        "access_by_road": "270 km de Dakar par route excellente (3h30)",
        "estimated_duration": {
            "minimum": 8,
            "recommended": 12,
            "maximum": 24,
            "notes": "Une journée minimum, idéalement avec nuit sur place",
        },
        "difficulty": "easy",
        "cost": {
            "min": 80000,
            "max": 150000,
            "currency": "XOF",
            "includes": ["Transport", "Visites de base", "Guide"],
            "excludes": ["Hébergement", "Tous les repas", "Parc du Djoudj"],
        },
        "tags": ["UNESCO", "Architecture", "Histoire", "Nature", "Oiseaux", "Jazz", "Fleuve"],
        "mbaye_recommendation": (
            "Ma ville coup de cœur ! Plus calme que Dakar, avec une vraie authenticité. Si vous aimez "
            "l'histoire et la nature, c'est parfait. Dormez une nuit là-bas si possible."
        ),
    },
]

# Experiences that fit into any circuit
UNIVERSAL_EXPERIENCES = [
    {
        "id": "teranga-family-meal",
        "name": "Repas en famille sénégalaise (Teranga)",
        "category": "teranga-experience",
        "duration": "3-4 heures",
        "mbaye_notes": (
            "C'est l'expérience que je recommande le plus ! Ma propre famille adore recevoir les "
            "visiteurs. Vous repartirez avec des amis sénégalais pour la vie."
        ),
    },
    {
        "id": "artisan-workshop-visit",
        "name": "Visite d'atelier d'artisan traditionnel",
        "category": "traditional-craft",
        "duration": "2-3 heures",
        "mbaye_notes": (
            "J'ai mes artisans de confiance dans chaque région. Des vrais maîtres qui perpétuent les "
            "traditions. Les prix sont justes et la qualité exceptionnelle."
        ),
    },
]
