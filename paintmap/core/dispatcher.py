"""
Request dispatcher for the single API endpoint

Every request is a flat set of string arguments plus a `function` name.
COMMANDS maps each function name to the arguments it requires and the
handler that serves it. Handlers for commands marked `authenticated`
receive the account resolved from `user_name`/`password`.

Responses always carry `succeed`:
- success: {"succeed": true, ...payload}
- failure: {"succeed": false, "error": "<message>"}
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple

from paintmap.errors import InvalidArguments, PaintMapError, UndefinedFunction
from paintmap.models import Account
from paintmap.state import AppState


logger = logging.getLogger(__name__)

CREDENTIALS = ("user_name", "password")


def parse_int(value: Optional[str], default: int = 0) -> int:
    """Integer query argument; `default` when absent or not a number"""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ==================== HANDLERS ====================

def account_count(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    return {"count": state.accounts.count()}


def account_auth(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    result = state.accounts.authenticate(args["user_name"], args["password"])
    if not result.login:
        return {"login": False}
    return {"login": True, "id": result.account_id}


def account_create(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    account_id = state.accounts.create(
        args["user_name"],
        args["password"],
        map_type=args.get("type") or state.config.default_map_type,
        share_level=parse_int(args.get("share_level")),
    )
    return {"id": account_id}


def account_password_change(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    state.accounts.change_password(args["user_name"], args["password"], args["password_new"])
    return {}


def account_delete(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    state.accounts.delete(args["user_name"], args["password"])
    return {}


def account_map_get(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    return state.maps.get_by_account(account.id)


def map_get_empty(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    return state.maps.get_empty(
        args.get("type") or state.config.default_map_type,
        parse_int(args.get("share_level")),
    )


def map_save(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    state.accounts.save_map(args["user_name"], args["password"], args["map"])
    return {}


def map_image_upload(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    state.images.save(account.id, args["image"])
    return {}


def shared_map_get(state: AppState, args: Mapping[str, str], account: Account = None) -> Dict:
    map_id = parse_int(args.get("id"))
    if not map_id:
        raise InvalidArguments()
    return state.maps.get_shared(str(map_id))


# ==================== COMMAND TABLE ====================

@dataclass(frozen=True)
class Command:
    handler: Callable[..., Dict]
    required: Tuple[str, ...] = ()
    authenticated: bool = False


COMMANDS: Dict[str, Command] = {
    "account_count": Command(account_count),
    "account_auth": Command(account_auth, CREDENTIALS),
    "account_create": Command(account_create, CREDENTIALS),
    "account_password_change": Command(account_password_change, CREDENTIALS + ("password_new",)),
    "account_delete": Command(account_delete, CREDENTIALS),
    "account_map_get": Command(account_map_get, CREDENTIALS, authenticated=True),
    "map_get_empty": Command(map_get_empty),
    "map_save": Command(map_save, CREDENTIALS + ("map",)),
    "map_image_upload": Command(map_image_upload, CREDENTIALS + ("image",), authenticated=True),
    "shared_map_get": Command(shared_map_get, ("id",)),
}


def missing_arguments(command: Command, args: Mapping[str, str]) -> Tuple[str, ...]:
    """Required arguments that are absent or empty"""
    return tuple(name for name in command.required if not args.get(name))


def dispatch(state: AppState, args: Mapping[str, str]) -> Dict:
    """
    Run one request

    Args:
        state: Application stores
        args: Query arguments, including `function`

    Returns:
        Response envelope; never raises
    """
    function = args.get("function")
    try:
        command = COMMANDS.get(function)
        if command is None:
            raise UndefinedFunction()

        missing = missing_arguments(command, args)
        if missing:
            logger.info(f"{function}: missing {', '.join(missing)}")
            raise InvalidArguments()

        account = None
        if command.authenticated:
            account = state.accounts.resolve(args["user_name"], args["password"])

        payload = command.handler(state, args, account)
        return {"succeed": True, **payload}

    except PaintMapError as e:
        return {"succeed": e.succeed, "error": e.message}
    except Exception as e:
        logger.error(
            f"❌ ERROR in {function}\n"
            f"Error: {str(e)}\n"
            f"Error Type: {type(e).__name__}",
            exc_info=True
        )
        return {"succeed": False, "error": str(e)}
