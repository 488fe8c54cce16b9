# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


import os
from dataclasses import fields
from pathlib import Path

import tomllib
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..exceptions import ConfigurationError

# (source name, values) pairs, highest priority first
Layers = list[tuple[str, dict]]


class ConfigLoader:
    """Builds a config dataclass from layered sources, highest priority first."""

    @staticmethod
    def get_full_config(
        config_model: type,
        input_args: dict,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Resolve every field of config_model from: input args, custom config,
        environment variables, global config.

        Returns:
            (config, names of the sources that set a field, whether any default was used)
        """
        layers: Layers = [("Input Args", input_args)]
        if custom_config_path is not None:
            layers.append(
                ("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )
        layers.append(("Environment Variables", ConfigLoader.load_env(env_app_prefix)))
        layers.append(("Global Config", ConfigLoader.load_toml(global_config_path)))

        return ConfigLoader.merge(config_model, layers)

    @staticmethod
    def merge(config_model: type, layers: Layers):
        values = {}
        used = set()

        for field in fields(config_model):
            for name, layer in layers:
                if field.name in layer:
                    values[field.name] = layer[field.name]
                    used.add(name)
                    logger.debug(f"{field.name} taken from {name}")
                    break

        try:
            config = TypeAdapter(config_model).validate_python(values)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration value", str(e)) from e

        used_sources = [name for name, _ in layers if name in used]
        return config, used_sources, len(values) < len(fields(config_model))

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Table of a TOML file, or {} when the file is missing or unreadable."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Variables starting with app_prefix, keyed by the lowercased remainder."""
        prefix = app_prefix.lower()
        return {
            key[len(prefix) :].lower(): value
            for key, value in os.environ.items()
            if key.lower().startswith(prefix)
        }
