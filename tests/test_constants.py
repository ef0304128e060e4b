from app.grimoire.constants import (
    ALL_FACTIONS,
    SAMPLE_ROTES,
    SPHERE_ALIASES,
    linked_spheres,
    is_technocracy_sphere,
    sphere_dots,
    tradition_category,
    tradition_symbol,
)
from app.grimoire.modules.rotes.service import validate_rote_payload


def test_sphere_aliases_are_symmetric():
    for sphere, alias in SPHERE_ALIASES.items():
        assert SPHERE_ALIASES[alias] == sphere


def test_linked_spheres():
    assert linked_spheres("Data") == ["Data", "Correspondence"]
    assert linked_spheres("Prime") == ["Prime", "Primal Utility"]
    assert linked_spheres("Forces") == ["Forces"]


def test_is_technocracy_sphere():
    assert is_technocracy_sphere("Dimensional Science")
    assert not is_technocracy_sphere("Spirit")


def test_tradition_category():
    assert tradition_category("Verbena") == "Nine Traditions"
    assert tradition_category("Syndicate") == "Technocracy Conventions"
    assert tradition_category("Norse") == "Cultural/Traditional"
    assert tradition_category("Something Homebrew") == "Other"


def test_tradition_symbol_has_default():
    assert tradition_symbol("Order of Hermes") == "♁"
    assert tradition_symbol("Something Homebrew") == "✦"
    assert all(tradition_symbol(f) for f in ALL_FACTIONS)


def test_sphere_dots():
    assert sphere_dots(3) == "● ● ●"
    assert sphere_dots(0) == ""


def test_sample_rotes_are_valid():
    for sample in SAMPLE_ROTES:
        payload = dict(sample, pageRef=sample["page_ref"])
        assert validate_rote_payload(payload) == [], sample["name"]
