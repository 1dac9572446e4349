"""
Account store - registration, credential checks and the account/map cascade
"""
import logging
import threading
from typing import Callable, Dict, Optional

from paintmap.errors import AuthFailure, Conflict
from paintmap.models import Account, AuthResult, MapData
from paintmap.services.maps import MapStore


logger = logging.getLogger(__name__)


class AccountStore:
    """
    In-memory accounts indexed by id, with a unique user name index

    Creating an account also creates its default map; deleting one removes
    the map. The account lock is always taken before the map store's.
    """

    def __init__(self, maps: MapStore, generate_id: Callable[[], str]):
        self.maps = maps
        self._generate_id = generate_id
        self._accounts: Dict[str, Account] = {}
        self._ids_by_name: Dict[str, str] = {}
        self._lock = threading.RLock()

    def count(self) -> int:
        return len(self._accounts)

    def _find(self, user_name: str) -> Optional[Account]:
        account_id = self._ids_by_name.get(user_name)
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    def create(self, user_name: str, password: str, map_type: str = None, share_level: int = 0) -> str:
        """
        Register an account and its default map

        Returns:
            The new account id

        Raises:
            Conflict: user name already registered
        """
        with self._lock:
            if user_name in self._ids_by_name:
                raise Conflict(user_name)

            account_id = self._generate_id()
            while account_id in self._accounts:
                account_id = self._generate_id()

            self._accounts[account_id] = Account(id=account_id, user_name=user_name, password=password)
            self._ids_by_name[user_name] = account_id
            self.maps.create(account_id, map_type, share_level)

        logger.info(f"✅ Account created: {user_name} ({account_id})")
        return account_id

    def authenticate(self, user_name: str, password: str) -> AuthResult:
        account = self._find(user_name)
        if account is None:
            return AuthResult(exists=False, matches=False)
        if account.password != password:
            return AuthResult(exists=True, matches=False)
        return AuthResult(exists=True, matches=True, account_id=account.id)

    def resolve(self, user_name: str, password: str) -> Account:
        """
        Account for a user name / password pair

        Raises:
            AuthFailure: unknown user or wrong password
        """
        account = self._find(user_name)
        if account is None or account.password != password:
            logger.warning(f"⚠️ Authentication failed for {user_name}")
            raise AuthFailure()
        return account

    def change_password(self, user_name: str, password: str, password_new: str) -> None:
        with self._lock:
            account = self.resolve(user_name, password)
            account.password = password_new
        logger.info(f"🔑 Password changed: {user_name}")

    def delete(self, user_name: str, password: str) -> None:
        with self._lock:
            account = self.resolve(user_name, password)
            del self._accounts[account.id]
            del self._ids_by_name[user_name]
            self.maps.delete(account.id)
        logger.info(f"🗑️ Account deleted: {user_name} ({account.id})")

    def save_map(self, user_name: str, password: str, payload: str) -> MapData:
        """
        Check credentials and replace the account's map in one step

        Holding the account lock keeps a concurrent delete from running
        between the check and the write.
        """
        with self._lock:
            account = self.resolve(user_name, password)
            return self.maps.save(account.id, payload)
