"""
Authentication context.

Tokens are passed to each request explicitly through an AuthContext instead
of being read from global storage inside the HTTP layer. A FileTokenStore
persists them between CLI runs, in the same shapes the web clients keep in
local storage:

    storefront: "taiga-auth-storage" -> {"state": {"token": "..."}}
    POS:        "pos_token"          -> "..."
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..common.constants import STOREFRONT_AUTH_KEY, STOREFRONT_LOGIN_ROUTE

logger = logging.getLogger(__name__)


class FileTokenStore:
    """
    JSON file backed key/value store.

    Usage:
        store = FileTokenStore("~/.taigamart/auth.json")
        store.set("pos_token", "abc")
        store.get("pos_token")
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error reading auth storage %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class AuthContext:
    """
    Bearer token plus what to do when the server rejects it.

    Args:
        token: Bearer token (None for anonymous requests)
        store: Optional store the token was loaded from; cleared on expiry
        storage_key: Key of the token in the store
        login_route: Route the user is sent to after a 401
        nested: Token is kept as {"state": {"token": ...}} rather than a plain string
    """

    def __init__(
        self,
        token: Optional[str] = None,
        store: Optional[FileTokenStore] = None,
        storage_key: str = STOREFRONT_AUTH_KEY,
        login_route: str = STOREFRONT_LOGIN_ROUTE,
        nested: bool = True,
    ):
        self.token = token
        self.store = store
        self.storage_key = storage_key
        self.login_route = login_route
        self.nested = nested

    @classmethod
    def from_store(
        cls,
        store: FileTokenStore,
        storage_key: str = STOREFRONT_AUTH_KEY,
        login_route: str = STOREFRONT_LOGIN_ROUTE,
        nested: bool = True,
    ) -> "AuthContext":
        """Load the token persisted under storage_key (unparseable entries are ignored)."""
        raw = store.get(storage_key)
        token = None

        if nested:
            if isinstance(raw, str):
                try:
                    raw = json.loads(raw)
                except json.JSONDecodeError as e:
                    logger.error("Error parsing auth token: %s", e)
                    raw = None
            state = raw.get('state') if isinstance(raw, dict) else None
            if isinstance(state, dict) and state.get('token'):
                token = str(state['token'])
        elif raw:
            token = str(raw)

        return cls(token=token, store=store, storage_key=storage_key,
                   login_route=login_route, nested=nested)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def headers(self) -> Dict[str, str]:
        """Authorization header for this context (empty when anonymous)."""
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def login(self, token: str) -> None:
        """Adopt a new token and persist it."""
        self.token = token
        if self.store is not None:
            value = {"state": {"token": token}} if self.nested else token
            self.store.set(self.storage_key, value)

    def expire(self) -> None:
        """Forget the token and its stored copy."""
        self.token = None
        if self.store is not None:
            self.store.remove(self.storage_key)
