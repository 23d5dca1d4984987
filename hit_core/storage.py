import json
import logging
import os
from pathlib import Path
from hit_core.config import BASE_DIR, STORE_FILENAME, USER_STORE_DIR, STORAGE_KEY
from hit_core.models import Store, coerce_store, default_store

logger = logging.getLogger(__name__)


def resolve_store_path() -> Path:
    """
    Search order (read):
    1) HIT_STORE env var (if set)
    2) Project-local file in the project root
    3) Per-user file (~/.hit_tracker/hit_storage.json)

    Write default:
    - If env var set -> write there
    - Else -> project-local file
    """
    env = os.getenv("HIT_STORE")
    if env:
        return Path(env).expanduser().resolve()

    project_local = BASE_DIR / STORE_FILENAME
    if project_local.exists():
        return project_local

    user_store = USER_STORE_DIR / STORE_FILENAME
    if user_store.exists():
        return user_store

    # default new writes go project-local (discoverable for users)
    return project_local


def load_json(p: Path) -> dict:
    """ Loads json if it's not valid it opens as empty dict """
    if not p.exists():
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        logger.warning(f"⚠️ Could not parse {p}. Using empty defaults.")
        return {}
    return data if isinstance(data, dict) else {}


def save_json(p: Path, data: dict):
    """Safely save dict to JSON using atomic write and folder creation."""
    p.parent.mkdir(parents=True, exist_ok=True)

    # Step 1: write to a temporary file
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    # Step 2: atomically replace the old file
    tmp.replace(p)


class KeyValueStore:
    """ String key -> string value file, the local storage of this app """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else resolve_store_path()

    def get_item(self, key: str) -> str | None:
        value = load_json(self.path).get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = load_json(self.path)
        data[key] = value
        save_json(self.path, data)

    def remove_item(self, key: str) -> None:
        data = load_json(self.path)
        if data.pop(key, None) is not None:
            save_json(self.path, data)


def load(kv: KeyValueStore) -> Store:
    """ Reads the store under the fixed key, default store on missing or bad data. Never raises. """
    raw = kv.get_item(STORAGE_KEY)
    if not raw:
        return default_store()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("⚠️ Stored workout data is malformed. Starting with an empty store.")
        return default_store()
    if not isinstance(data, dict):
        logger.warning("⚠️ Stored workout data is not an object. Starting with an empty store.")
        return default_store()
    return coerce_store(data)


def save(store: Store, kv: KeyValueStore) -> None:
    """ Serializes the whole store and replaces what was under the key """
    kv.set_item(STORAGE_KEY, json.dumps(store, ensure_ascii=False))
    logger.debug("Saved %d workouts to %s", len(store.get("workouts", [])), kv.path)
