from pathlib import Path

from mealweek.utilities.config import DATA_DIR, STORE_FILE_NAME

# Centralized paths for data files (single source of truth)
STORE_FILE: Path = DATA_DIR / STORE_FILE_NAME

__all__ = ['DATA_DIR', 'STORE_FILE']
