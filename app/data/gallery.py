_VISITES = [
    ("Visite guidée avec Mbaye - Découverte culturelle", "Découverte culturelle",
     "Une expérience authentique de la culture sénégalaise"),
    ("Excursion touristique - Sites historiques", "Sites historiques",
     "Exploration des sites historiques emblématiques"),
    ("Visite guidée - Patrimoine local", "Patrimoine local",
     "Découverte du riche patrimoine sénégalais"),
    ("Excursion culturelle - Traditions", "Traditions sénégalaises",
     "Immersion dans les traditions locales"),
    ("Visite guidée - Architecture locale", "Architecture locale",
     "Architecture traditionnelle et moderne"),
    ("Découverte touristique - Marchés locaux", "Marchés locaux",
     "Exploration des marchés authentiques"),
    ("Excursion guidée - Artisanat local", "Artisanat local",
     "Rencontre avec les artisans locaux"),
    ("Visite culturelle - Rencontres locales", "Rencontres locales",
     "Échanges authentiques avec les habitants"),
    ("Excursion touristique - Lieux emblématiques", "Lieux emblématiques",
     "Visite des lieux incontournables"),
    ("Découverte guidée - Paysages urbains", "Paysages urbains",
     "Découverte des villes sénégalaises"),
    ("Visite touristique - Expérience complète", "Expérience complète",
     "Une journée complète de découvertes"),
]

_DESTINATIONS = [
    ("Paysage sénégalais - Destination naturelle", "Beauté naturelle",
     "Les merveilles naturelles du Sénégal"),
    ("Destination touristique - Sites remarquables", "Sites remarquables",
     "Lieux d'exception à découvrir"),
    ("Paysage sénégalais - Diversité géographique", "Diversité géographique",
     "La richesse des paysages sénégalais"),
    ("Destination nature - Écosystèmes variés", "Écosystèmes variés",
     "Biodiversité exceptionnelle"),
    ("Lieu touristique - Panoramas spectaculaires", "Panoramas spectaculaires",
     "Vues imprenables sur le territoire"),
    ("Destination sénégalaise - Côtes atlantiques", "Côtes atlantiques",
     "Littoral sénégalais magnifique"),
    ("Paysage naturel - Savane sénégalaise", "Savane sénégalaise",
     "L'authenticité de la savane"),
    ("Destination culturelle - Villages traditionnels", "Villages traditionnels",
     "Authenticité des villages ruraux"),
    ("Site touristique - Merveilles cachées", "Merveilles cachées",
     "Trésors méconnus à explorer"),
    ("Destination unique - Caractère sénégalais", "Caractère sénégalais",
     "L'âme du Sénégal authentique"),
    ("Paysage emblématique - Identité sénégalaise", "Identité sénégalaise",
     "Symboles du pays de la Teranga"),
    ("Destination privilégiée - Expériences uniques", "Expériences uniques",
     "Moments inoubliables garantis"),
    ("Site exceptionnel - Magie sénégalaise", "Magie sénégalaise",
     "La beauté envoûtante du Sénégal"),
]

IMAGE_ROOT = "/images/gallerie-photos"

# Visits come first, destinations after
GALLERY_IMAGES = [
    {
        "id": f"visite-{i}",
        "src": f"{IMAGE_ROOT}/visite-{i}.jpeg",
        "alt": alt,
        "title": title,
        "category": "visite",
        "description": description,
        "featured": i == 1,
    }
    for i, (alt, title, description) in enumerate(_VISITES, start=1)
] + [
    {
        "id": f"dest-{i}",
        "src": f"{IMAGE_ROOT}/{i}.jpeg",
        "alt": alt,
        "title": title,
        "category": "destination",
        "description": description,
        "featured": False,
    }
    for i, (alt, title, description) in enumerate(_DESTINATIONS, start=1)
]
