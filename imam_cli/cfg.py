import json, os, logging, tempfile
from dataclasses import dataclass
from pathlib import Path

DEFAULTS = {
    "env": {
        "asbhome": "/opt/IBM/InformationServer/ASBNode",
        "auth_file": str(Path.home() / ".imam" / "auth.txt"),
        "engine": "localhost",
    },
    "paths": {
        "logs": "./logs",
        "tmp": tempfile.gettempdir(),
    },
}


def _load():
    here = Path(__file__).resolve().parent
    cfg_path = Path(os.environ.get("IMAM_CLI_CONFIG", here / "config.json"))
    cfg = {k: dict(v) for k, v in DEFAULTS.items()}
    if not cfg_path.exists():
        # Safe defaults if config is missing
        return cfg
    with cfg_path.open() as f:
        loaded = json.load(f)
    for section, values in loaded.items():
        cfg.setdefault(section, {}).update(values or {})
    return cfg


CFG = _load()
ENV_CFG = CFG.get("env", {})
PATHS = CFG.get("paths", {})


@dataclass
class EnvironmentContext:
    asbhome: str
    auth_file: str
    engine: str

    @property
    def imam(self) -> str:
        return str(Path(self.asbhome) / "bin" / "imam.sh")

    @property
    def encrypt(self) -> str:
        return str(Path(self.asbhome) / "bin" / "encrypt.sh")


def load_env(auth_file=None) -> EnvironmentContext:
    """Environment context from config.json, overridden by IMAM_* variables and arguments."""
    return EnvironmentContext(
        asbhome=os.environ.get("IMAM_ASBHOME", ENV_CFG.get("asbhome", "")),
        auth_file=auth_file or os.environ.get("IMAM_AUTH_FILE", ENV_CFG.get("auth_file", "")),
        engine=os.environ.get("IMAM_ENGINE", ENV_CFG.get("engine", "")),
    )


def setup_logging(level=logging.INFO) -> Path:
    log_dir = Path(PATHS.get("logs", "./logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "imam_cli.log"
    logging.basicConfig(
        filename=str(log_path),
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s"
    )
    return log_path
