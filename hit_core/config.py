from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent  # goes from hit_core/ up to project root
STORE_FILENAME = "hit_storage.json"
USER_STORE_DIR = Path.home() / ".hit_tracker"
PLOTS_DIR = BASE_DIR / "plots"
EXPORTS_DIR = BASE_DIR / "exports"

# Local storage key kept identical so old backups stay recognisable
STORAGE_KEY = "high_intensity_training_by_joost_v1"

UNITS = ("kg", "lbs")
DEFAULT_UNIT = "kg"

BACKUP_PREFIX = "hit_joost_backup_"
BACKUP_MEDIA_TYPE = "application/json"

APP_TITLE = "High Intensity Training by Joost"
