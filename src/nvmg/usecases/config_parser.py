"""Config parser use case for nvmg."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from nvmg.domain.exceptions import NvmgConfigError

# Keys accepted in the YAML file, all optional
CONFIG_KEYS = frozenset(["home", "dist_url", "index_url", "timeout_seconds"])


class ConfigParser:
    """Parses nvmg YAML configuration.

    Example document:

        home: /opt/nvmg
        dist_url: https://mirror.example.com/node/
        timeout_seconds: 60
    """

    def parse(self, yaml_str: str) -> dict[str, Any]:
        """Parse a YAML config into validated setting overrides.

        Args:
            yaml_str: YAML string representing nvmg configuration. An empty
                document yields no overrides.

        Returns:
            Mapping of setting name to value, suitable for NvmgSettings(**...).

        Raises:
            NvmgConfigError: If YAML is invalid, not a mapping, has unknown
                keys or values of the wrong type.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise NvmgConfigError(f"Invalid YAML: {e}", original_error=e) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise NvmgConfigError("Config must be a dictionary")

        unknown = sorted(str(key) for key in config if key not in CONFIG_KEYS)
        if unknown:
            raise NvmgConfigError(f"Unknown config keys: {', '.join(unknown)}")

        overrides: dict[str, Any] = {}
        if "home" in config:
            overrides["home"] = Path(self._require_str(config, "home")).expanduser()
        for key in ("dist_url", "index_url"):
            if key in config:
                overrides[key] = self._require_str(config, key)
        if "timeout_seconds" in config:
            timeout = config["timeout_seconds"]
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise NvmgConfigError(
                    f"timeout_seconds must be a number, got: {timeout!r}"
                )
            overrides["timeout_seconds"] = float(timeout)
        return overrides

    def _require_str(self, config: dict[str, Any], key: str) -> str:
        value = config[key]
        if not isinstance(value, str) or not value.strip():
            raise NvmgConfigError(f"{key} must be a non-empty string, got: {value!r}")
        return value
