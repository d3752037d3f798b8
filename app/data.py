# app/data.py

# Half-hour chairs, same grid for every treatment
CLINIC_SLOTS = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "01.00 PM - 01.30 PM",
    "01.30 PM - 02.00 PM",
]

TREATMENTS = [
    {"name": "Teeth Orthodontics", "price": 99, "slots": CLINIC_SLOTS},
    {"name": "Cosmetic Dentistry", "price": 89, "slots": CLINIC_SLOTS},
    {"name": "Teeth Cleaning", "price": 49, "slots": CLINIC_SLOTS},
    {"name": "Cavity Protection", "price": 59, "slots": CLINIC_SLOTS},
    {"name": "Pediatric Dental", "price": 69, "slots": CLINIC_SLOTS},
    {"name": "Oral Surgery", "price": 149, "slots": CLINIC_SLOTS},
]
