VEHICLE_CATALOG = {
    "standard": {
        "type": "standard",
        "name": "Hyundai Accent / Toyota Vitz",
        "capacity": 4,
        "features": ["Climatisation", "Radio", "Ceintures de sécurité"],
        "price_per_km": 500,
    },
    "premium": {
        "type": "premium",
        "name": "Toyota Camry / Honda Accord",
        "capacity": 4,
        "features": ["Climatisation", "Sièges cuir", "GPS", "WiFi"],
        "price_per_km": 750,
    },
    "suv": {
        "type": "suv",
        "name": "Toyota RAV4 / Honda Pilot",
        "capacity": 7,
        "features": ["Climatisation", "Espace bagages XL", "GPS", "7 places"],
        "price_per_km": 900,
    },
}
