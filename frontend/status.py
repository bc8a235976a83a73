#file: frontend/status.py

from types import MappingProxyType
from typing import NamedTuple


class IndexStatus(NamedTuple):
    color: str
    label: str


# Atmo index -> badge colour and label, 0 is the fallback for anything unknown
INDEX_STATUS = MappingProxyType({
    0 : IndexStatus("#9CA3AF", "Indisponible"),
    1 : IndexStatus("#06D6A0", "Bon"),
    2 : IndexStatus("#1DD1A1", "Moyen"),
    3 : IndexStatus("#FFC048", "Dégradé"),
    4 : IndexStatus("#FF6B6B", "Mauvais"),
    5 : IndexStatus("#8B5CF6", "Très mauvais"),
    6 : IndexStatus("#6F46C5", "Extrêmement mauvais"),
})

EVENT_STATUS = IndexStatus(INDEX_STATUS[0].color, "Événement")

LEGEND_ENTRIES = (*INDEX_STATUS.values(), EVENT_STATUS)


def get_status_from_index(index) -> IndexStatus :
    """Return colour and label for an Atmo index, falling back to 'Indisponible'."""
    if isinstance(index, bool) :
        return INDEX_STATUS[0]
    try :
        return INDEX_STATUS.get(index, INDEX_STATUS[0])
    except TypeError :
        # unhashable values
        return INDEX_STATUS[0]
