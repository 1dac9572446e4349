"""
Map template registry - static rendering metadata per map type
"""
from typing import Dict

from paintmap.models import MapTemplate, Position


FALLBACK_TYPE = "city"

_JAPAN = Position(lat=38.5, lng=138, zoom=6)
_KSJ_SOURCE = (
    '<a href="https://nlftp.mlit.go.jp/ksj/gml/datalist/KsjTmplt-N03-v3_1.html" '
    'target="_blank">国土数値情報 [国交省]</a> を加工'
)

MAP_TEMPLATES: Dict[str, MapTemplate] = {
    "city": MapTemplate(
        type="city",
        position=_JAPAN,
        source=_KSJ_SOURCE,
        fill_layer="data/city.json",
        outline_layer="data/prefecture.json",
        min_zoom=5,
        max_zoom=12,
    ),
    "ward": MapTemplate(
        type="ward",
        position=_JAPAN,
        source=_KSJ_SOURCE,
        fill_layer="data/ward.json",
        outline_layer="data/prefecture.json",
        min_zoom=5,
        max_zoom=12,
    ),
    "pref": MapTemplate(
        type="pref",
        position=_JAPAN,
        source=_KSJ_SOURCE,
        fill_layer="data/prefecture.json",
        min_zoom=5,
        max_zoom=12,
    ),
    "1920": MapTemplate(
        type="1920",
        position=_JAPAN,
        source=_KSJ_SOURCE,
        fill_layer="data/1920-city.json",
        outline_layer="data/1920-pref.json",
        min_zoom=5,
        max_zoom=12,
    ),
    "gun": MapTemplate(
        type="gun",
        position=_JAPAN,
        source='<a href="https://gunmap.booth.pm/items/3053727" target="_blank">郡地図 Ver 1.1</a>を加工',
        fill_layer="data/gun.json",
        outline_layer="data/kuni.json",
        min_zoom=5,
        max_zoom=12,
    ),
    "world": MapTemplate(
        type="world",
        position=Position(lat=37, lng=208, zoom=2),
        source='<a href="https://www.naturalearthdata.com/" target="_blank">Natural Earth</a>を加工',
        fill_layer="data/world.json",
        min_zoom=2,
        max_zoom=5,
        world_copy_jump=1,
    ),
}


def lookup(map_type: str, fallback: str = FALLBACK_TYPE) -> MapTemplate:
    """
    Template for a map type

    Args:
        map_type: Type tag stored on the map
        fallback: Type used when `map_type` is unknown

    Returns:
        The registered template, or the fallback's template (never fails)
    """
    template = MAP_TEMPLATES.get(map_type)
    if template is None:
        template = MAP_TEMPLATES.get(fallback, MAP_TEMPLATES[FALLBACK_TYPE])
    return template


def known_types():
    return list(MAP_TEMPLATES)
