# serie_a_api/config.py
from __future__ import annotations

import os
from dotenv import load_dotenv

from serie_a_api.policy import POLICY_PRESETS

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


# -------------------------
# Season documents (local folder or http base URL)
# -------------------------
DATA_ROOT: str = _get_env("SERIE_A_DATA_ROOT", "data")

# Seasons index page data
SEASONS_INDEX_TEMPLATE: str = _get_env("SEASONS_INDEX_TEMPLATE", "{data_root}/JS/seasons-data.json")

# Per-season calendar + teams, and per-season table zones
SEASON_DATA_TEMPLATE: str = _get_env("SEASON_DATA_TEMPLATE", "{data_root}/{season}/JSON/data.json")
SEASON_CONFIG_TEMPLATE: str = _get_env("SEASON_CONFIG_TEMPLATE", "{data_root}/{season}/JSON/config.json")

HTTP_TIMEOUT_SECONDS: int = _get_env_int("HTTP_TIMEOUT_SECONDS", 15)

# Cache TTL (loaded documents only)
SEASON_CACHE_TTL_SECONDS: int = _get_env_int("SEASON_CACHE_TTL_SECONDS", 300)

# -------------------------
# Standings
# -------------------------
# One of POLICY_PRESETS: classic / season-page / pairwise / strict
STANDINGS_POLICY: str = _get_env("STANDINGS_POLICY", "classic").lower()

LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    if "{data_root}" not in SEASONS_INDEX_TEMPLATE:
        raise RuntimeError("SEASONS_INDEX_TEMPLATE must contain the {data_root} placeholder.")

    for name, template in (
        ("SEASON_DATA_TEMPLATE", SEASON_DATA_TEMPLATE),
        ("SEASON_CONFIG_TEMPLATE", SEASON_CONFIG_TEMPLATE),
    ):
        if "{season}" not in template or "{data_root}" not in template:
            raise RuntimeError(f"{name} must contain {{data_root}} and {{season}} placeholders.")

    if STANDINGS_POLICY not in POLICY_PRESETS:
        raise RuntimeError(
            f"STANDINGS_POLICY must be one of {sorted(POLICY_PRESETS)}, got {STANDINGS_POLICY!r}"
        )

    if SEASON_CACHE_TTL_SECONDS <= 0:
        raise RuntimeError("SEASON_CACHE_TTL_SECONDS must be positive")

    if HTTP_TIMEOUT_SECONDS <= 0:
        raise RuntimeError("HTTP_TIMEOUT_SECONDS must be positive")
