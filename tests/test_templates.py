"""
Tests for the map template registry
"""
from paintmap.services.templates import MAP_TEMPLATES, lookup, known_types


def test_lookup_known_type():
    """Known types return their own template"""
    assert lookup("pref").fill_layer == "data/prefecture.json"
    assert lookup("world").type == "world"


def test_lookup_unknown_type_falls_back_to_city():
    """Unknown types get the city template"""
    assert lookup("atlantis") is MAP_TEMPLATES["city"]


def test_all_map_types_registered():
    assert set(known_types()) == {"city", "ward", "pref", "1920", "gun", "world"}


def test_rendering_fields_wire_names():
    """Rendering fields use camelCase names and omit type"""
    fields = lookup("city").rendering_fields()
    assert "type" not in fields
    assert fields["fillLayer"] == "data/city.json"
    assert fields["outlineLayer"] == "data/prefecture.json"
    assert fields["minZoom"] == 5
    assert fields["maxZoom"] == 12
    assert fields["position"] == {"lat": 38.5, "lng": 138, "zoom": 6}


def test_rendering_fields_omit_absent_optionals():
    """pref has no outline layer; only world jumps copies"""
    pref = lookup("pref").rendering_fields()
    assert "outlineLayer" not in pref
    assert "worldCopyJump" not in pref
    assert lookup("world").rendering_fields()["worldCopyJump"] == 1
