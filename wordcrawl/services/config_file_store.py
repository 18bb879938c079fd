import os

import yaml

from wordcrawl.exceptions import ConfigError


class ConfigFileStore:
    """Filesystem IO for crawler config files.

    Responsibility: read and parse JSON or YAML files on disk (JSON
    documents are valid YAML, so one loader handles both).
    """

    def load_dict(self, config_path: str) -> dict:
        """Return the parsed mapping stored at `config_path`."""
        if not os.path.isfile(config_path):
            raise ConfigError(config_path, "not found")
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(config_path, f"could not be read: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(config_path, "must contain a mapping at the top level")
        return data
