"""
Map store - one map per account id, full replacement on save
"""
import json
import logging
import threading
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from paintmap.errors import MapNotExist, MapNotFound, Mismatch, NotShared, ParseError
from paintmap.models import MapData
from paintmap.services import templates


logger = logging.getLogger(__name__)


def render(map_data: MapData, fallback_type: str = templates.FALLBACK_TYPE) -> Dict:
    """
    Merge a map with its template's rendering fields

    Template supplies position, layers and zoom bounds; the map supplies
    content, including its own `type` tag.
    """
    template = templates.lookup(map_data.type, fallback_type)
    view = template.rendering_fields()
    view.update(map_data.model_dump(exclude_none=True))
    return view


class MapStore:
    """In-memory map records keyed by account id"""

    def __init__(self, clock: Callable[[], int], default_type: str = templates.FALLBACK_TYPE):
        self._clock = clock
        self._maps: Dict[str, MapData] = {}
        self._lock = threading.RLock()
        self.default_type = default_type

    def __len__(self) -> int:
        return len(self._maps)

    def new_map(self, map_type: Optional[str] = None, share_level: int = 0) -> MapData:
        """Default map record, freshly stamped, not stored"""
        return MapData(
            type=map_type or self.default_type,
            share_level=share_level,
            last_update=self._clock(),
        )

    def create(self, account_id: str, map_type: Optional[str] = None, share_level: int = 0) -> MapData:
        map_data = self.new_map(map_type, share_level)
        with self._lock:
            self._maps[account_id] = map_data
        return map_data

    def delete(self, account_id: str) -> None:
        with self._lock:
            self._maps.pop(account_id, None)

    def get_by_account(self, account_id: str) -> Dict:
        map_data = self._maps.get(account_id)
        if map_data is None:
            raise MapNotFound()
        view = render(map_data, self.default_type)
        view["id"] = account_id
        return view

    def get_empty(self, map_type: Optional[str] = None, share_level: int = 0) -> Dict:
        """Default map merged with its template; nothing is stored"""
        return render(self.new_map(map_type, share_level), self.default_type)

    def save(self, account_id: str, payload: str) -> MapData:
        """
        Replace the account's map with the submitted one

        Args:
            account_id: Authenticated account
            payload: JSON object; must carry `id` equal to `account_id`

        Returns:
            The stored record

        Raises:
            ParseError: payload is not a JSON object or has invalid fields
            Mismatch: payload `id` is missing or belongs to another account
            MapNotFound: no map is stored for `account_id` (account deleted)
        """
        incoming = parse_payload(payload)

        if "id" not in incoming or str(incoming["id"]) != account_id:
            logger.warning(f"⚠️ Map id mismatch for account {account_id}: {incoming.get('id')!r}")
            raise Mismatch()

        # Absent (or null) fields take defaults, never the previous record's values
        fields = {
            key: incoming[key]
            for key in MapData.model_fields
            if incoming.get(key) is not None
        }
        fields.pop("last_update", None)
        if not fields.get("non_zero_legend"):
            fields.pop("non_zero_legend", None)
        fields.setdefault("type", self.default_type)

        try:
            map_data = MapData(**fields, last_update=self._clock())
        except ValidationError as e:
            raise ParseError(f"{e.error_count()} invalid field(s)") from e

        with self._lock:
            # Only replace: a deleted account must not get its map back
            if account_id not in self._maps:
                raise MapNotFound()
            self._maps[account_id] = map_data

        logger.info(f"💾 Map saved for account {account_id} (type={map_data.type}, regions={len(map_data.data)})")
        return map_data

    def get_shared(self, map_id: str) -> Dict:
        """
        Public read of a map by raw id

        Raises:
            MapNotExist: no map under this id (reported with succeed=True)
            NotShared: map exists but share_level is 0
        """
        map_data = self._maps.get(map_id)
        if map_data is None:
            raise MapNotExist(map_id)
        if map_data.share_level == 0:
            raise NotShared(map_id)
        view = render(map_data, self.default_type)
        view["id"] = map_id
        return view


def parse_payload(payload: str) -> Dict:
    try:
        incoming = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise ParseError("not valid JSON") from e
    if not isinstance(incoming, dict):
        raise ParseError("expected a JSON object")
    return incoming
