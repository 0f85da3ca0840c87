"""Constants used in the project."""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    NOT_FOUND = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    REGISTRY_URL_MAVEN_REPO = "https://repo.maven.apache.org/maven2"
    DESCRIPTOR_EXT = "pom"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    USER_AGENT = "releasehunt/1.0"

    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3

    ENV_CONFIG = "RELEASEHUNT_CONFIG"
    ENV_REGISTRY_URL = "RELEASEHUNT_REGISTRY_URL"
    ENV_REQUEST_TIMEOUT = "RELEASEHUNT_REQUEST_TIMEOUT"
    ENV_HTTP_RETRY_MAX = "RELEASEHUNT_HTTP_RETRY_MAX"
    DEFAULT_CONFIG_PATH = os.path.join("~", ".config", "releasehunt", "releasehunt.yml")


# YAML keys mapped onto Constants attributes
_CONFIG_KEYS = {
    "registry_url": ("REGISTRY_URL_MAVEN_REPO", str),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "retry_max": ("HTTP_RETRY_MAX", int),
    "retry_base_delay": ("HTTP_RETRY_BASE_DELAY_SEC", float),
    "user_agent": ("USER_AGENT", str),
}

_ENV_KEYS = {
    Constants.ENV_REGISTRY_URL: ("REGISTRY_URL_MAVEN_REPO", str),
    Constants.ENV_REQUEST_TIMEOUT: ("REQUEST_TIMEOUT", int),
    Constants.ENV_HTTP_RETRY_MAX: ("HTTP_RETRY_MAX", int),
}


def _load_yaml_config(path: str, required: bool = False) -> Dict[str, Any]:
    """Read a YAML config file.

    A missing file yields an empty mapping unless ``required`` is set, in
    which case FileNotFoundError is raised. Unparseable YAML raises ValueError.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    expanded = os.path.expanduser(path)
    if not os.path.isfile(expanded):
        if required:
            raise FileNotFoundError(f"Configuration file not found: {path}")
        return {}
    with open(expanded, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    # Allow settings to be nested under a top-level "releasehunt" key
    section = data.get("releasehunt", data)
    return section if isinstance(section, dict) else {}


def load_config(path: Optional[str] = None) -> None:
    """Apply YAML config and environment overrides to Constants.

    Precedence (lowest to highest): built-in defaults, YAML file, environment.
    CLI flags are applied afterwards by the entrypoint.

    A file named by ``path`` or the config environment variable must exist;
    the default per-user file is optional.

    Raises:
        FileNotFoundError: when an explicitly named file is missing.
        ValueError: when the file is not valid YAML or not a mapping.
    """
    explicit_path = path or os.environ.get(Constants.ENV_CONFIG)
    config_path = explicit_path or Constants.DEFAULT_CONFIG_PATH
    for key, value in _load_yaml_config(config_path, required=bool(explicit_path)).items():
        if key not in _CONFIG_KEYS:
            logging.warning("Ignoring unknown configuration key: %s", key)
            continue
        attr, cast = _CONFIG_KEYS[key]
        setattr(Constants, attr, cast(value))

    for env_name, (attr, cast) in _ENV_KEYS.items():
        raw = os.environ.get(env_name)
        if raw is not None and raw.strip():
            setattr(Constants, attr, cast(raw.strip()))
