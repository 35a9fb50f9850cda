"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Both services
share one settings object; each application factory also accepts an
explicit instance so that tests can run against custom values.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Service settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "REST Lab Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.  With a
    # positive ``log_max_bytes`` the file is rotated, keeping
    # ``log_backup_count`` old files.
    log_file: str = os.getenv("LOG_FILE", "")
    log_max_bytes: int = int(os.getenv("LOG_MAX_BYTES", "0"))
    log_backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "3"))

    # Network settings used by ``run.py``.  Each service listens on its
    # own port because the two services are independent processes.
    host: str = os.getenv("HOST", "0.0.0.0")
    parolee_port: int = int(os.getenv("PAROLEE_PORT", "10000"))
    rabbit_port: int = int(os.getenv("RABBIT_PORT", "10001"))

    # Mount points.  ``services_root`` is prepended to ``/parolees`` and
    # to every ``Location`` header issued by the parolee service.
    services_root: str = os.getenv("SERVICES_ROOT", "")
    rabbit_path: str = os.getenv("RABBIT_PATH", "/rabbit")

    # Largest Fibonacci position the rabbit counter will compute.  Bounds
    # the time spent in one request and the size of each cached value.
    max_position: int = int(os.getenv("MAX_POSITION", "10000"))

    @property
    def parolees_path(self) -> str:
        return f"{self.services_root.rstrip('/')}/parolees"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
