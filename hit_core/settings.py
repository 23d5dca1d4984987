import json
import logging
import mimetypes
from datetime import date
from pathlib import Path
from hit_core.config import BACKUP_MEDIA_TYPE, BACKUP_PREFIX, UNITS
from hit_core.date_utilities import today_iso
from hit_core.models import Store, Unit, coerce_store, default_store
from hit_core.units import normalize_unit, other_unit

logger = logging.getLogger(__name__)


class InvalidBackupError(ValueError):
    """ Backup text that can't be restored. Nothing was changed when this is raised. """


def get_unit(store: Store) -> Unit:
    return normalize_unit((store.get("settings") or {}).get("unit"))


def set_unit(store: Store, unit: str) -> Store:
    """ New store with the unit preference replaced, other settings kept """
    if unit not in UNITS:
        raise ValueError(f"Unsupported unit: {unit!r}. Use one of {', '.join(UNITS)}.")
    return {**store, "settings": {**(store.get("settings") or {}), "unit": unit}}


def toggle_unit(store: Store) -> Store:
    return set_unit(store, other_unit(get_unit(store)))


def export_backup(store: Store) -> str:
    """ The whole store, pretty printed """
    return json.dumps(store, indent=2, ensure_ascii=False)


def backup_filename(today: date | str | None = None) -> str:
    """ hit_joost_backup_<YYYY-MM-DD>.json """
    if today is None:
        stamp = today_iso()
    elif isinstance(today, date):
        stamp = today.isoformat()
    else:
        stamp = today
    return f"{BACKUP_PREFIX}{stamp}.json"


def write_backup(store: Store, out_dir: Path | str, today: date | str | None = None) -> Path:
    """ Writes the export into out_dir and returns the file path """
    out_dir = Path(out_dir).expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / backup_filename(today)
    path.write_text(export_backup(store) + "\n", encoding="utf-8")
    logger.info(f"💾 Backup written to {path}")
    return path


def looks_like_backup(path: Path | str) -> bool:
    """ Only files of the backup media type are offered for import """
    media_type, _ = mimetypes.guess_type(str(path))
    return media_type == BACKUP_MEDIA_TYPE


def import_backup(raw_text: str) -> Store:
    """ Parse backup text into a store. Raises InvalidBackupError, the caller's store stays as it was. """
    try:
        data = json.loads(raw_text)
    except (json.JSONDecodeError, TypeError) as e:
        raise InvalidBackupError(f"Invalid backup file: {e}") from e
    if not isinstance(data, dict):
        raise InvalidBackupError("Invalid backup file: expected a JSON object at the top level")
    return coerce_store(data)


def read_backup(path: Path | str) -> Store:
    """ import_backup for a file on disk """
    p = Path(path).expanduser()
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidBackupError(f"Could not read backup file {p}: {e}") from e
    return import_backup(raw)


def clear_all(store: Store) -> Store:
    """ Empty workout list, unit preference kept """
    return default_store(get_unit(store))
