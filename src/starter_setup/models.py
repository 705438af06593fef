"""Pydantic models for the setup wizard answers."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from starter_setup.features.registry import DEFAULT_REGISTRY

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+")


class License(str, Enum):
    """SPDX identifiers offered by the wizard."""

    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    ISC = "ISC"
    GPL_3 = "GPL-3.0-only"
    UNLICENSED = "UNLICENSED"


class AnswerSet(BaseModel):
    """Answers collected by the wizard.

    Pass ``context={"registry": registry}`` to ``model_validate`` to check
    feature keys against a custom registry; the default registry is used
    otherwise.
    """

    model_config = ConfigDict(frozen=True)

    description: str = ""
    version: str = Field(default="0.1.0", description="Initial semantic version")
    author: str = ""
    license: License = License.MIT
    is_private: bool = True
    entrypoint: str = "src/index.ts"
    selected_features: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("version")
    @classmethod
    def _semver(cls, value: str) -> str:
        if not SEMVER_PATTERN.match(value):
            raise ValueError("Must be valid semver (e.g. 0.1.0)")
        return value

    @field_validator("selected_features")
    @classmethod
    def _known_features(cls, value: frozenset[str], info: ValidationInfo) -> frozenset[str]:
        registry = (info.context or {}).get("registry", DEFAULT_REGISTRY)
        unknown = sorted(key for key in value if key not in registry)
        if unknown:
            raise ValueError(f"Unknown features: {', '.join(unknown)}")
        return value


def is_valid_version(value: str) -> bool | str:
    """questionary validator for the version prompt."""
    if SEMVER_PATTERN.match(value.strip()):
        return True
    return "Must be valid semver (e.g. 0.1.0)"
