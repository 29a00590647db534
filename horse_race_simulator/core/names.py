HORSE_ADJECTIVES: tuple[str, ...] = (
    "Swift",
    "Brave",
    "Mighty",
    "Noble",
    "Fierce",
    "Gentle",
    "Royal",
    "Golden",
    "Silver",
    "Crimson",
    "Dark",
    "Bright",
    "Wild",
    "Free",
    "Bold",
    "Proud",
    "Strong",
    "Fast",
    "Majestic",
    "Elegant",
    "Graceful",
    "Powerful",
    "Mystical",
    "Ancient",
)

HORSE_NOUNS: tuple[str, ...] = (
    "Thunder",
    "Lightning",
    "Shadow",
    "Blaze",
    "Storm",
    "Comet",
    "Spirit",
    "Wind",
    "Fire",
    "Star",
    "Moon",
    "Sun",
    "Warrior",
    "Knight",
    "Arrow",
    "Flame",
    "Diamond",
    "Phoenix",
    "Ranger",
    "Hunter",
    "Champion",
    "Legend",
    "Hero",
    "Dream",
)
