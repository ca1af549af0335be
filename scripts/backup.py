"""Write a JSON backup of the configured store to backups/.

Note: The file has the same shape as the in-app download, so it can be
restored through the app's restore endpoint.
"""

from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from attendance_points.backup.service import backup_filename
from attendance_points.common.datetime_utils import today_local
from attendance_points.common.logging_config import setup_logging
from attendance_points.config import get_settings_module
from attendance_points.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if not getattr(settings, "DATA_FILE", None):
        raise SystemExit("DATA_FILE is not set: nothing to back up from an in-memory store.")

    container = build_container(settings)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / backup_filename(today_local())

    out_file.write_text(container.backup_service.export_json(), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
