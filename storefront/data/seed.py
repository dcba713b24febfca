# storefront/data/seed.py
# Catalog documents shaped like the CMS "course" type, served when CATALOG_SOURCE=static.

SEED_COURSES = [
    {
        "_id": "course-stealth-101",
        "_type": "course",
        "title": "Stealth 101",
        "description": "Silent paws and soft landings. Sneak past any sleeping dog.",
        "price": 29.0,
        "stockQuantity": 12,
        "image": {"_type": "image", "asset": {"_ref": "image-a1b2c3d4e5f6-1200x1200-jpg", "_type": "reference"}},
    },
    {
        "_id": "course-wall-running",
        "_type": "course",
        "title": "Wall Running",
        "description": "Use curtains, bookshelves and gravity to reach the top of the fridge.",
        "price": 49.0,
        "stockQuantity": 5,
        "image": {"_type": "image", "asset": {"_ref": "image-0f9e8d7c6b5a-1600x1200-png", "_type": "reference"}},
    },
    {
        "_id": "course-shadow-pounce",
        "_type": "course",
        "title": "Shadow Pounce",
        "description": "Advanced ambush tactics for ankles, laser dots and unsuspecting socks.",
        "price": 79.0,
        "stockQuantity": 0,
        "image": {"_type": "image", "asset": {"_ref": "image-1234abcd5678-800x800-webp", "_type": "reference"}},
    },
    {
        "_id": "course-zen-nap",
        "_type": "course",
        "title": "Zen Nap Mastery",
        "description": "Recover like a master. Sixteen hours a day, in the sunniest spot.",
        "price": 15.0,
        "stockQuantity": 1,
        "image": {"_type": "image", "asset": {"_ref": "image-feedbeef0001-1000x1000-jpg", "_type": "reference"}},
    },
]
