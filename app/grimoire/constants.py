"""
Static catalogue data for Mage: the Ascension (20th anniversary rules).
"""
from __future__ import annotations

TRADITIONS = (
    "Akashic Brotherhood",
    "Celestial Chorus",
    "Cult of Ecstasy",
    "Dreamspeakers",
    "Euthanatos",
    "Order of Hermes",
    "Sons of Ether",
    "Verbena",
    "Virtual Adepts",
    "Hollow Ones",
    "Orphans",
)

TECHNOCRACY_CONVENTIONS = (
    "Iteration X",
    "New World Order",
    "Progenitors",
    "Syndicate",
    "Void Engineers",
)

ALL_FACTIONS = TRADITIONS + TECHNOCRACY_CONVENTIONS

SPHERES = (
    "Correspondence",
    "Entropy",
    "Forces",
    "Life",
    "Matter",
    "Mind",
    "Prime",
    "Spirit",
    "Time",
)

TECHNOCRACY_SPHERES = ("Data", "Dimensional Science", "Primal Utility")

ALL_SPHERES = SPHERES + TECHNOCRACY_SPHERES

# Technocratic names for the same Spheres, both directions.
SPHERE_ALIASES = {
    "Data": "Correspondence",
    "Correspondence": "Data",
    "Primal Utility": "Prime",
    "Prime": "Primal Utility",
    "Dimensional Science": "Spirit",
    "Spirit": "Dimensional Science",
}

SPHERE_LEVELS = (0, 1, 2, 3, 4, 5)

TRADITION_CATEGORIES = {
    "traditions": {
        "label": "Nine Traditions",
        "groups": (
            "Akashic Brotherhood",
            "Celestial Chorus",
            "Cult of Ecstasy",
            "Dreamspeakers",
            "Euthanatos",
            "Order of Hermes",
            "Sons of Ether",
            "Verbena",
            "Virtual Adepts",
            "Hollow Ones",
        ),
    },
    "technocracy": {
        "label": "Technocracy Conventions",
        "groups": TECHNOCRACY_CONVENTIONS + ("Technocracy",),
    },
    "crafts": {
        "label": "Crafts & Organizations",
        "groups": (
            "Ahl-i-Batin",
            "Bata'a",
            "Children of Knowledge",
            "Fencer",
            "Hem-Ka Sobk",
            "High Guild",
            "Knights Templar",
            "Kopa Loei",
            "Shamans",
            "Sisters of Hippolyta",
            "Solificati",
            "Taftani",
            "Wu-Keng",
            "Wu Lung",
        ),
    },
    "cultural": {
        "label": "Cultural/Traditional",
        "groups": (
            "Aboriginal",
            "African",
            "Aztec",
            "Babylonian",
            "Celtic",
            "Egyptian",
            "Etruscan",
            "Finnish",
            "Greek",
            "Inuit",
            "Mayan",
            "Mesoamerican",
            "Norse",
            "Polynesian",
            "Roman",
            "Tantric",
        ),
    },
    "other": {
        "label": "Other Factions",
        "groups": ("Artisan", "Infernalist", "Marauder", "Nephandi", "Order of Reason", "Reality Hackers"),
    },
    "universal": {
        "label": "Universal",
        "groups": ("Universal",),
    },
}

ALL_TRADITIONS = tuple(sorted(g for cat in TRADITION_CATEGORIES.values() for g in cat["groups"]))

_TRADITION_SYMBOLS = {
    "Akashic Brotherhood": "☸",
    "Celestial Chorus": "✡",
    "Cult of Ecstasy": "☄",
    "Dreamspeakers": "☾",
    "Euthanatos": "☠",
    "Order of Hermes": "♁",
    "Sons of Ether": "⚛",
    "Verbena": "⚘",
    "Virtual Adepts": "⌘",
    "Hollow Ones": "☆",
    "Orphans": "✴",
    "Iteration X": "⚙",
    "New World Order": "⌂",
    "Progenitors": "⚕",
    "Syndicate": "⚖",
    "Void Engineers": "☉",
}
DEFAULT_SYMBOL = "✦"


def linked_spheres(sphere: str) -> list[str]:
    alias = SPHERE_ALIASES.get(sphere)
    return [sphere, alias] if alias else [sphere]


def is_technocracy_sphere(sphere: str) -> bool:
    return sphere in TECHNOCRACY_SPHERES


def tradition_category(tradition: str) -> str:
    for category in TRADITION_CATEGORIES.values():
        if tradition in category["groups"]:
            return category["label"]
    return "Other"


def tradition_symbol(tradition: str) -> str:
    return _TRADITION_SYMBOLS.get(tradition, DEFAULT_SYMBOL)


def sphere_dots(level: int) -> str:
    return " ".join("●" for _ in range(max(0, level)))


SAMPLE_ROTES = (
    {
        "name": "The Flickering Ward",
        "tradition": "Order of Hermes",
        "description": (
            "Tracing Enochian sigils in the air and speaking words of binding, the mage raises a "
            "barrier that turns aside incoming Forces effects. It glows a faint gold to Awakened sight."
        ),
        "spheres": {"Forces": 3, "Prime": 2},
        "level": "Disciple",
        "page_ref": "Book of Shadows, p.142",
    },
    {
        "name": "Ancestor's Whisper",
        "tradition": "Dreamspeakers",
        "description": (
            "A steady drum rhythm thins the Gauntlet and draws the spirits of the dead. The most "
            "knowledgeable are coaxed into sharing fragments of lost lore."
        ),
        "spheres": {"Spirit": 3, "Mind": 2, "Entropy": 1},
        "level": "Disciple",
        "page_ref": "Spirit Ways, p.87",
    },
    {
        "name": "Temporal Echo",
        "tradition": "Cult of Ecstasy",
        "description": (
            "Through rhythmic movement and controlled altered states the Ecstatic perceives the "
            "after-images that significant events leave in time."
        ),
        "spheres": {"Time": 3, "Correspondence": 2},
        "level": "Disciple",
        "page_ref": "The Book of Madness, p.201",
    },
    {
        "name": "Living Cipher",
        "tradition": "Virtual Adepts",
        "description": (
            "The Adept encodes their consciousness as executable data and projects it into the "
            "Digital Web while the body lies catatonic."
        ),
        "spheres": {"Correspondence": 4, "Mind": 3},
        "level": "Adept",
        "page_ref": "Digital Web 2.0, p.156",
    },
    {
        "name": "Blood of the Earth",
        "tradition": "Verbena",
        "description": (
            "The witch channels the primal life force of living things into healing. The rite needs "
            "blood freely given and words spoken in the Old Tongue."
        ),
        "spheres": {"Life": 3, "Prime": 2},
        "level": "Disciple",
        "page_ref": "The Book of Crafts, p.63",
    },
    {
        "name": "Resonance Cascade",
        "tradition": "Sons of Ether",
        "description": (
            "A modified Tesla apparatus sets off a cascade of etheric resonance that breaks the "
            "molecular bonds of inanimate matter. Spectacular, imprecise and usually scorching."
        ),
        "spheres": {"Matter": 4, "Forces": 3, "Prime": 2},
        "level": "Adept",
        "page_ref": "Sons of Ether Tradition Book, p.98",
    },
    {
        "name": "The Wheel of Fate",
        "tradition": "Euthanatos",
        "description": (
            "Reading the threads of destiny in the Tapestry, the mage glimpses the likeliest path of "
            "entropy for a target, seen as a vision of its eventual dissolution."
        ),
        "spheres": {"Entropy": 4, "Time": 2},
        "level": "Adept",
        "page_ref": "Euthanatos Tradition Book, p.112",
    },
    {
        "name": "Hymn of the Celestial Sphere",
        "tradition": "Celestial Chorus",
        "description": (
            "A sacred song channels the harmony of the One, cleansing an area of corrupted Resonance "
            "and bolstering the faith of all who hear it."
        ),
        "spheres": {"Prime": 3, "Mind": 2, "Spirit": 1},
        "level": "Disciple",
        "page_ref": "Celestial Chorus Tradition Book, p.77",
    },
    {
        "name": "Iron Body Meditation",
        "tradition": "Akashic Brotherhood",
        "description": (
            "Perfect control of chi flow strengthens the body beyond mortal limits. The skin takes "
            "on a faint metallic sheen and shrugs off harm."
        ),
        "spheres": {"Life": 3, "Mind": 2, "Prime": 1},
        "level": "Disciple",
        "page_ref": "Akashic Brotherhood Tradition Book, p.91",
    },
    {
        "name": "The Gossamer Veil",
        "tradition": "Hollow Ones",
        "description": (
            "An illusion of shadow and mist hides the mage from mundane perception, leaving only a "
            "half-seen ghost at the edge of vision."
        ),
        "spheres": {"Mind": 3, "Forces": 2, "Entropy": 1},
        "level": "Disciple",
        "page_ref": "The Orphans Survival Guide, p.45",
    },
    {
        "name": "Quintessential Forge",
        "tradition": "Order of Hermes",
        "description": (
            "Within an inscribed circle the Hermetic channels raw Quintessence into a prepared "
            "vessel and binds it into a permanent enchantment."
        ),
        "spheres": {"Prime": 5, "Matter": 3, "Forces": 2},
        "level": "Master",
        "page_ref": "Order of Hermes Tradition Book, p.188",
    },
    {
        "name": "Dream Walk",
        "tradition": "Dreamspeakers",
        "description": (
            "The shaman walks the Dreaming between sleeping minds to gather secrets, deliver "
            "messages or confront nightmares given form."
        ),
        "spheres": {"Mind": 4, "Spirit": 3, "Correspondence": 2},
        "level": "Adept",
        "page_ref": "Spirit Ways, p.134",
    },
)


def reference_payload() -> dict:
    return {
        "traditions": list(TRADITIONS),
        "technocracyConventions": list(TECHNOCRACY_CONVENTIONS),
        "allFactions": list(ALL_FACTIONS),
        "spheres": list(SPHERES),
        "technocracySpheres": list(TECHNOCRACY_SPHERES),
        "sphereAliases": dict(SPHERE_ALIASES),
        "sphereLevels": list(SPHERE_LEVELS),
        "traditionCategories": {
            key: {"label": cat["label"], "groups": list(cat["groups"])} for key, cat in TRADITION_CATEGORIES.items()
        },
        "allTraditions": list(ALL_TRADITIONS),
        "traditionSymbols": {name: tradition_symbol(name) for name in ALL_FACTIONS},
    }
