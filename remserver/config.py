import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _dataset_paths(value, data_dir: Path) -> list[str]:
    """Comma separated list from the environment, else every *.json in data_dir.

    Each file must hold a top-level JSON array; any other JSON value fails init.
    """
    if value:
        return [str(Path(p.strip()).resolve()) for p in value.split(",") if p.strip()]
    return [str(p) for p in sorted(data_dir.glob("*.json"))]


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("REMSERVER_DATA_DIR", BASE_DIR / "data"))
    SESSION_DIR = Path(os.getenv("REMSERVER_SESSION_DIR", BASE_DIR / "sessions"))
    SECRET_KEY = os.getenv("SECRET_KEY", "remserver-dev-secret")
    REMSERVER_DATASETS = _dataset_paths(os.getenv("REMSERVER_DATASETS"), DATA_DIR)
    REMSERVER_SESSION_BACKEND = os.getenv("REMSERVER_SESSION_BACKEND", "cookie").strip().lower()
    REMSERVER_PAGE_LIMIT = int(os.getenv("REMSERVER_PAGE_LIMIT", "25"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevConfig(Config):
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
