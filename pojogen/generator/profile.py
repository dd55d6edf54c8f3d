"""
Generation profile handling.

A GenerationProfile carries the formatting options and the auxiliary lines
used by the generator. Profiles are built in memory or loaded from a JSON
file; once created they never change.
"""

import json
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple, Union

from ..errors import InvalidArgumentError, PojoGenError, require_not_none


class ProfileError(PojoGenError):
    """Exception raised when a profile file cannot be loaded."""

    pass


class ProfileOption(Enum):
    """Options recognized by the generator."""

    LINE_PREFIX = "line-prefix"
    LINE_SEPARATOR = "line-separator"
    PACKAGE_NAME = "package-name"
    ACCESSOR_PREFIX = "accessor-prefix"
    GENERATE_SETTERS = "generate-setters"
    GENERATE_COMMENTS = "generate-comments"


OPTION_DEFAULTS: Dict[ProfileOption, str] = {
    ProfileOption.LINE_PREFIX: "",
    ProfileOption.LINE_SEPARATOR: "\n",
    ProfileOption.PACKAGE_NAME: "",
    ProfileOption.ACCESSOR_PREFIX: "get",
    ProfileOption.GENERATE_SETTERS: "false",
    ProfileOption.GENERATE_COMMENTS: "false",
}

TRUE_VALUES = {"true", "yes", "on", "1"}

OptionKey = Union[ProfileOption, str]


def _option_key(key: Any) -> str:
    if isinstance(key, ProfileOption):
        return key.value
    if isinstance(key, str):
        return key
    raise InvalidArgumentError(
        f"option keys must be strings or ProfileOption, got {type(key).__name__}"
    )


class GenerationProfile:
    """Immutable set of generation options and auxiliary lines."""

    __slots__ = ("_auxiliary_lines", "_options")

    def __init__(
        self,
        auxiliary_lines: Iterable[str],
        options: Mapping[OptionKey, str],
    ):
        """
        Initialize a profile.

        Args:
            auxiliary_lines: Lines emitted verbatim before the class, in order
            options: Option values keyed by option name or ProfileOption

        Raises:
            InvalidArgumentError: If either argument is None, or a line,
                option key or option value has the wrong type
        """
        require_not_none(auxiliary_lines, "auxiliary_lines")
        require_not_none(options, "options")

        if isinstance(auxiliary_lines, str):
            raise InvalidArgumentError("auxiliary_lines must be a sequence of strings")

        lines = tuple(auxiliary_lines)
        for index, line in enumerate(lines):
            if not isinstance(line, str):
                raise InvalidArgumentError(
                    f"auxiliary_lines[{index}] must be a string, "
                    f"got {type(line).__name__}"
                )

        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"options must be a mapping, got {type(options).__name__}"
            )

        resolved: Dict[str, str] = {}
        for key, value in options.items():
            name = _option_key(key)
            if not isinstance(value, str):
                raise InvalidArgumentError(
                    f"value of option '{name}' must be a string, "
                    f"got {type(value).__name__}"
                )
            resolved[name] = value

        object.__setattr__(self, "_auxiliary_lines", lines)
        object.__setattr__(self, "_options", MappingProxyType(resolved))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def create(
        cls,
        auxiliary_lines: Iterable[str],
        options: Mapping[OptionKey, str],
    ) -> "GenerationProfile":
        """Create a profile; see __init__ for validation rules."""
        return cls(auxiliary_lines, options)

    @classmethod
    def default(cls) -> "GenerationProfile":
        """Profile without auxiliary lines that uses every default."""
        return cls((), {})

    @property
    def auxiliary_lines(self) -> Iterator[str]:
        """Auxiliary lines in insertion order."""
        return iter(self._auxiliary_lines)

    @property
    def options(self) -> Mapping[str, str]:
        """Read-only view of the options as given, unknown keys included."""
        return self._options

    def get_option(self, key: OptionKey) -> str:
        """
        Resolve a recognized option.

        Args:
            key: ProfileOption or its string name

        Returns:
            The configured value, or the documented default when absent

        Raises:
            InvalidArgumentError: If key is not a recognized option
        """
        option = self._recognized(key)
        return self._options.get(option.value, OPTION_DEFAULTS[option])

    def get_flag(self, key: OptionKey) -> bool:
        """Resolve a recognized option as a boolean."""
        return self.get_option(key).strip().lower() in TRUE_VALUES

    def unknown_options(self) -> Tuple[str, ...]:
        """Keys that were supplied but have no effect on generation."""
        known = {option.value for option in ProfileOption}
        return tuple(key for key in self._options if key not in known)

    @staticmethod
    def _recognized(key: OptionKey) -> ProfileOption:
        if isinstance(key, ProfileOption):
            return key
        try:
            return ProfileOption(_option_key(key))
        except ValueError:
            raise InvalidArgumentError(f"Unknown profile option: {key}") from None

    def __eq__(self, other):
        if not isinstance(other, GenerationProfile):
            return NotImplemented
        return (
            self._auxiliary_lines == other._auxiliary_lines
            and dict(self._options) == dict(other._options)
        )

    def __hash__(self):
        return hash((self._auxiliary_lines, frozenset(self._options.items())))

    def __repr__(self):
        return (
            f"GenerationProfile(auxiliary_lines={list(self._auxiliary_lines)!r}, "
            f"options={dict(self._options)!r})"
        )


def load_profile(config_file: Union[str, Path]) -> GenerationProfile:
    """
    Load a profile from a JSON file.

    The file must contain an object with optional "auxiliary_lines" (list of
    strings) and "options" (object of strings) members.

    Args:
        config_file: Path to the JSON profile

    Returns:
        The loaded profile

    Raises:
        ProfileError: If the file is missing, not JSON or malformed
    """
    path = Path(config_file)

    if not path.exists():
        raise ProfileError(f"Profile file not found: {path}")

    if not path.suffix.lower() == ".json":
        raise ProfileError(f"Profile file must be JSON: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ProfileError(f"Invalid JSON in profile file {path}: {str(e)}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read profile file {path}: {str(e)}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile file must contain a JSON object: {path}")

    auxiliary_lines = data.get("auxiliary_lines", [])
    options = data.get("options", {})

    if not isinstance(auxiliary_lines, list):
        raise ProfileError(f"'auxiliary_lines' must be a list in {path}")
    if not isinstance(options, dict):
        raise ProfileError(f"'options' must be an object in {path}")

    try:
        return GenerationProfile.create(auxiliary_lines, options)
    except InvalidArgumentError as e:
        raise ProfileError(f"Invalid profile in {path}: {str(e)}") from e
