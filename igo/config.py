# config.py
import os

from dotenv import load_dotenv

DEFAULTS = {}
# Load env
DEFAULTS['env_path'] = os.path.join(os.path.dirname(__file__), "igo.env")
if os.path.exists(DEFAULTS['env_path']):
    load_dotenv(DEFAULTS['env_path'], override=False)


# Helpers to read env with defaults
def getf(name: str, default: float) -> float:
    v = os.getenv(name)
    return float(v) if v is not None else float(default)


def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    return int(v) if v is not None else int(default)


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


def getb(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"{name}: expected a boolean, got {v!r}")


# Configurable defaults (from .env)
DEFAULTS['board_size'] = geti("IGO_BOARD_SIZE", 19)
DEFAULTS['komi'] = getf("IGO_KOMI", 6.5)
DEFAULTS['debug'] = getb("IGO_DEBUG", False)
