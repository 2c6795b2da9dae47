"""Codec configuration with validation and JSON loading."""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union


DEFAULT_COLLECTION_NOUNS = (
    "data", "media", "children", "people", "history", "education", "experience",
)

DEFAULT_ARRAY_NAME_HINTS = (
    "list", "items", "entries", "values", "elements", "records", "members", "tags",
    "array",
)

DEFAULT_CONTAINER_NAMES = ("list", "items", "array", "collection")

PROFILE_ARRAY_CATALOG = (
    "skills", "languages", "experience", "education", "certifications",
    "projects", "awards", "publications", "interests",
)

PROFILE_REPAIR_PREFIXES = ("skills", "languages", "projects", "certifications")


@dataclass
class CodecConfig:
    """
    Tunable settings shared by the encoder, classifier and decoder.

    The lexical lists feed the array classifier; the catalog and repair
    prefixes are dataset specific and empty unless a preset or a config
    file supplies them.
    """

    separator: str = "."
    max_depth: int = 256
    plural_suffix: str = "s"
    collection_nouns: Tuple[str, ...] = DEFAULT_COLLECTION_NOUNS
    array_name_hints: Tuple[str, ...] = DEFAULT_ARRAY_NAME_HINTS
    container_names: Tuple[str, ...] = DEFAULT_CONTAINER_NAMES
    array_catalog: Tuple[str, ...] = field(default_factory=tuple)
    repair_prefixes: Tuple[str, ...] = field(default_factory=tuple)
    enable_repair: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("collection_nouns", "array_name_hints", "container_names",
                     "array_catalog", "repair_prefixes"):
            setattr(self, name, tuple(getattr(self, name)))
        self._validate()

    def _validate(self) -> None:
        if not self.separator:
            raise ValueError("separator cannot be empty")

        if self.max_depth <= 0:
            raise ValueError("max_depth must be positive")

        for prefix in self.array_catalog + self.repair_prefixes:
            if not prefix:
                raise ValueError("catalog prefixes cannot be empty")

    @classmethod
    def for_profiles(cls, **overrides: Any) -> 'CodecConfig':
        """Preset for biographical-profile documents."""
        settings = {
            "array_catalog": PROFILE_ARRAY_CATALOG,
            "repair_prefixes": PROFILE_REPAIR_PREFIXES,
        }
        settings.update(overrides)
        return cls(**settings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for JSON serialization."""
        return {
            "separator": self.separator,
            "maxDepth": self.max_depth,
            "pluralSuffix": self.plural_suffix,
            "collectionNouns": list(self.collection_nouns),
            "arrayNameHints": list(self.array_name_hints),
            "containerNames": list(self.container_names),
            "arrayCatalog": list(self.array_catalog),
            "repairPrefixes": list(self.repair_prefixes),
            "enableRepair": self.enable_repair,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CodecConfig':
        """Create CodecConfig from dictionary, rejecting unknown keys."""
        key_map = {
            "separator": "separator",
            "maxDepth": "max_depth",
            "pluralSuffix": "plural_suffix",
            "collectionNouns": "collection_nouns",
            "arrayNameHints": "array_name_hints",
            "containerNames": "container_names",
            "arrayCatalog": "array_catalog",
            "repairPrefixes": "repair_prefixes",
            "enableRepair": "enable_repair",
        }
        unknown = sorted(set(data) - set(key_map))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**{key_map[key]: value for key, value in data.items()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'CodecConfig':
        """Load configuration from a JSON file."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid configuration file {path}: {e.msg}")

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a JSON object")

        return cls.from_dict(data)

    def replace(self, **changes: Any) -> 'CodecConfig':
        """Return a copy with the given fields changed."""
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(changes)
        return CodecConfig(**current)
