from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the workout tracker backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent

        self.data_root: Path = Path(
            os.environ.get("WORKOUT_DATA_ROOT") or (repo_root / "data")
        ).expanduser()
        # "file" persists JSON documents under data_root; "memory" is for demos and tests.
        self.store_backend: str = (os.environ.get("WORKOUT_STORE") or "file").strip().lower()
        self.public_dir: Path = Path(
            os.environ.get("WORKOUT_PUBLIC_DIR") or (repo_root / "public")
        ).expanduser()

        users = os.environ.get("WORKOUT_DEFAULT_USERS", "WAKASA,TEZUKA")
        self.default_users: List[str] = [
            name.strip().upper() for name in users.split(",") if name.strip()
        ]
        current = os.environ.get("WORKOUT_DEFAULT_CURRENT") or ""
        self.default_current: str = current.strip().upper() or (
            self.default_users[0] if self.default_users else ""
        )
        self.anonymous_author: str = os.environ.get("WORKOUT_ANONYMOUS_AUTHOR") or "anonymous"

        self.log_level: str = (os.environ.get("WORKOUT_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("WORKOUT_HOST") or os.environ.get("HOST") or "0.0.0.0"
        port_raw = os.environ.get("WORKOUT_PORT") or os.environ.get("PORT") or "3000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 3000

        cors = os.environ.get("WORKOUT_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
