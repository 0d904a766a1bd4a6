"""Backup the timesheet storage file.

Note: the backup is a plain copy of the JSON slot file; restore it by copying
it back over STORAGE_PATH.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    source = Path(settings.STORAGE_PATH)
    if not source.exists():
        raise SystemExit(f"Storage file not found: {source}. Run scripts/init_storage.py first.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timesheet_{ts}.json"

    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
