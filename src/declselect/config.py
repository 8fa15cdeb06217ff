"""
Selector configuration for declselect.

This module provides the settings that control how path strings are split and
which ancestor attributes are carried over onto selection outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from declselect.core.types import DEFAULT_SEPARATOR
from declselect.exceptions import SettingsError


@dataclass(frozen=True)
class SelectorSettings:
    """Configuration for path parsing and outcome construction.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults: "::" separator, cfg attributes inherited
        settings = SelectorSettings()

        # Dotted paths
        settings = SelectorSettings(separator=".")

        # From YAML file
        settings = SelectorSettings.from_yaml("declselect.yaml")
    """

    separator: str = DEFAULT_SEPARATOR

    # Attribute names copied from navigated ancestors onto the outcome
    inherited_attributes: frozenset[str] = field(
        default_factory=lambda: frozenset({"cfg"})
    )

    def __post_init__(self):
        if not isinstance(self.separator, str) or not self.separator.strip():
            raise SettingsError("separator must be a non-blank string")
        if any(ch.isalnum() or ch == "_" for ch in self.separator):
            raise SettingsError(
                f"separator {self.separator!r} must not contain identifier characters"
            )
        if isinstance(self.inherited_attributes, str):
            raise SettingsError("inherited_attributes must be a collection of names")
        try:
            names = frozenset(self.inherited_attributes)
        except TypeError as e:
            raise SettingsError(
                "inherited_attributes must be a collection of names"
            ) from e
        if not all(isinstance(name, str) for name in names):
            raise SettingsError("inherited_attributes must only contain strings")
        object.__setattr__(self, "inherited_attributes", names)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> SelectorSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            SelectorSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> SelectorSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            SelectorSettings instance with YAML overrides

        Raises:
            SettingsError: If the file cannot be read or is not a mapping

        Example YAML:
            separator: "."
            inherited_attributes: [cfg, cfg_attr]
        """
        import yaml

        path = Path(yaml_path)
        try:
            with path.open(encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except OSError as e:
            raise SettingsError(f"cannot read {path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise SettingsError(f"{path} is not valid UTF-8: {e.reason}") from e
        except yaml.YAMLError as e:
            raise SettingsError(f"{path} is not valid YAML: {e}") from e

        if not isinstance(config, dict):
            raise SettingsError(f"{path} must contain a mapping at the top level")

        return cls.from_dict(config)


DEFAULT_SETTINGS = SelectorSettings()
