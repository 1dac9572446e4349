"""
Application state
Stores shared by every request, built once per application
"""
from dataclasses import dataclass, field

from paintmap.core.clock import IdGenerator, MicroClock
from paintmap.models import ServerConfig
from paintmap.services.accounts import AccountStore
from paintmap.services.images import NullImageStore
from paintmap.services.maps import MapStore


@dataclass
class AppState:
    config: ServerConfig
    accounts: AccountStore
    maps: MapStore
    images: NullImageStore = field(default_factory=NullImageStore)


def build_state(config: ServerConfig = None, clock: MicroClock = None) -> AppState:
    """Fresh, empty stores sharing one clock for ids and timestamps"""
    config = config or ServerConfig()
    clock = clock or MicroClock()
    maps = MapStore(clock.now, default_type=config.default_map_type)
    accounts = AccountStore(maps, IdGenerator(clock))
    return AppState(config=config, accounts=accounts, maps=maps)
