BLOOD_TYPES = ["O-", "O+", "A-", "A+", "B-", "B+", "AB-", "AB+"]

UNKNOWN_BLOOD_GROUP = "Unknown"

CONFIDENCE_MIN = 0.0
CONFIDENCE_MAX = 100.0

# Naegele's rule
GESTATION_DAYS = 280
MAX_DISPLAY_WEEKS = 42
SECOND_TRIMESTER_WEEK = 13
THIRD_TRIMESTER_WEEK = 27

MEDICINES = [
    {
        "id": "paracetamol_syrup",
        "name": "Paracetamol (Syrup)",
        "default_concentration_mg": 120,
        "default_volume_ml": 5,
        "per_kg_min": 10,
        "per_kg_max": 15,
        "max_daily_dose_mg": 4000,
        "frequency_hours": 4,
        "description": "Pain reliever and fever reducer.",
        "citation": "NHS / Medscape",
        "link": "https://www.nhs.uk/medicines/paracetamol-for-children/",
    },
    {
        "id": "ibuprofen_syrup",
        "name": "Ibuprofen (Syrup)",
        "default_concentration_mg": 100,
        "default_volume_ml": 5,
        "per_kg_min": 5,
        "per_kg_max": 10,
        "max_daily_dose_mg": 2400,
        "frequency_hours": 6,
        "description": "Anti-inflammatory for pain and fever.",
        "citation": "NHS / BNF",
        "link": "https://www.nhs.uk/medicines/ibuprofen-for-children/",
    },
]

COMPATIBILITY_MATRIX = {
    "O-": {"donate_to": ["O-", "O+", "A-", "A+", "B-", "B+", "AB-", "AB+"], "receive_from": ["O-"]},
    "O+": {"donate_to": ["O+", "A+", "B+", "AB+"], "receive_from": ["O+", "O-"]},
    "A-": {"donate_to": ["A-", "A+", "AB-", "AB+"], "receive_from": ["A-", "O-"]},
    "A+": {"donate_to": ["A+", "AB+"], "receive_from": ["A+", "A-", "O+", "O-"]},
    "B-": {"donate_to": ["B-", "B+", "AB-", "AB+"], "receive_from": ["B-", "O-"]},
    "B+": {"donate_to": ["B+", "AB+"], "receive_from": ["B+", "B-", "O+", "O-"]},
    "AB-": {"donate_to": ["AB-", "AB+"], "receive_from": ["AB-", "A-", "B-", "O-"]},
    "AB+": {"donate_to": ["AB+"], "receive_from": ["O-", "O+", "A-", "A+", "B-", "B+", "AB-", "AB+"]},
}

EMERGENCY_CONTACTS = {
    "emergency": [
        {"name": "Police", "number": "100"},
        {"name": "Ambulance", "number": "102"},
    ],
    "poison_information": [
        {"name": "Teaching Hospital (TUTH)", "number": "01-4412303"},
        {"name": "Patan Hospital", "number": "01-5522295"},
    ],
}

TRANSPORT_VEHICLES = [
    {
        "id": "basic",
        "name": "Basic Ambulance",
        "price": "Rs. 1,500",
        "eta": "5-8 min",
        "features": "Stretcher, First Aid",
        "icon": "🚑",
    },
    {
        "id": "oxygen",
        "name": "Oxygen Support",
        "price": "Rs. 2,500",
        "eta": "10-12 min",
        "features": "Oxygen Cylinder, Nurse",
        "icon": "🌬️",
    },
    {
        "id": "icu",
        "name": "ICU / Ventilator",
        "price": "Rs. 5,000+",
        "eta": "15-20 min",
        "features": "Ventilator, Doctor, ICU",
        "icon": "🏥",
    },
]

DISCLAIMER_TEXT = (
    "⚠️ Medical Disclaimer: This tool is for educational and informational purposes only. "
    "It does not constitute medical advice, diagnosis, or treatment. Always verify dosages with a "
    "qualified healthcare professional and check the medicine packaging. In emergencies, contact "
    "local emergency services immediately."
)
