"""Mode configuration loader with Pydantic v2 validation.

Loads a ``posix_mode.yaml`` file into a typed :class:`ModeSettings`
object and wraps it in a :class:`Configuration`, which is the key/value
source the umask lookup reads from.  Unknown top-level keys are allowed.

Schema
------
::

    default_mode: "0777"
    default_umask: "0022"
    settings:
      posix_mode.security.authorization.permission.umask: "0027"

Setting values must be YAML strings.  An unquoted ``0027`` is read by
YAML as an integer and is rejected rather than silently reinterpreted.

Example
-------
>>> conf = Configuration.from_yaml(Path("posix_mode.yaml"))
>>> conf.get("posix_mode.security.authorization.permission.umask")
'0027'
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from posix_mode.constants import DEFAULT_FILE_SYSTEM_MODE, DEFAULT_FILE_SYSTEM_UMASK

logger = logging.getLogger(__name__)


class ModeConfigError(ValueError):
    """Raised when a mode config file cannot be parsed.

    Attributes
    ----------
    config_path:
        The path to the config file that caused the error, if known.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        prefix = f"[{config_path}] " if config_path else ""
        super().__init__(f"{prefix}{message}")


class ModeSettings(BaseModel):
    """Top-level mode configuration schema.

    All fields are optional and fall back to the package defaults.
    """

    model_config = {"extra": "allow"}

    default_mode: int = Field(default=DEFAULT_FILE_SYSTEM_MODE, ge=0, le=0o7777)
    default_umask: int = Field(default=DEFAULT_FILE_SYSTEM_UMASK, ge=0, le=0o777)
    settings: dict[str, str] = Field(default_factory=dict)

    @field_validator("default_mode", "default_umask", mode="before")
    @classmethod
    def parse_octal_string(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return int(value, 8)
            except ValueError as exc:
                raise ValueError(
                    f"Expected an octal string such as '0755'; got {value!r}."
                ) from exc
        return value


class Configuration:
    """Mutable key/value view over :class:`ModeSettings`.

    Parameters
    ----------
    settings:
        Validated settings to start from.  Defaults are used when omitted.
    """

    def __init__(self, settings: ModeSettings | None = None) -> None:
        self._settings = settings or ModeSettings()
        self._values: dict[str, str] = dict(self._settings.settings)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Configuration:
        """Build a configuration from a YAML file on disk."""
        return cls(ConfigLoader().load(Path(config_path)))

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or ``None``."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    @property
    def default_mode(self) -> int:
        return self._settings.default_mode

    @property
    def default_umask(self) -> int:
        return self._settings.default_umask


class ConfigLoader:
    """Loads and validates mode YAML configuration.

    Example
    -------
    >>> loader = ConfigLoader()
    >>> settings = loader.load(Path("posix_mode.yaml"))
    """

    def load(self, config_path: Path) -> ModeSettings:
        """Load and validate a mode configuration YAML file.

        Parameters
        ----------
        config_path:
            Path to the YAML file.

        Returns
        -------
        ModeSettings
            Validated configuration object.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ModeConfigError:
            When the file is not valid YAML.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Mode config not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as fh:
                raw: dict[str, object] = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ModeConfigError(f"Failed to parse YAML: {exc}", str(config_path)) from exc

        settings = ModeSettings.model_validate(raw)
        logger.info(
            "Loaded mode config from %s (%d settings)", config_path, len(settings.settings)
        )
        return settings

    def load_string(self, yaml_content: str) -> ModeSettings:
        """Load and validate a YAML string directly.

        Raises
        ------
        ModeConfigError:
            When the text is not valid YAML.
        """
        try:
            raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as exc:
            raise ModeConfigError(f"Failed to parse YAML string: {exc}") from exc
        return ModeSettings.model_validate(raw)

    def defaults(self) -> ModeSettings:
        """Return a configuration with all defaults applied."""
        return ModeSettings()
