"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use HUEDOWN_ prefix (e.g., HUEDOWN_HOST_VERSION=1.20.4).

Settings can also be loaded from a .env file in the project root.
"""

import re
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VERSION_PATTERN = re.compile(r'^\d+(\.\d+)*$')


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use HUEDOWN_ prefix.

    Examples:
        HUEDOWN_ALT_COLOR_CHAR=$
        HUEDOWN_HOST_VERSION=1.12.2
        HUEDOWN_EXTENDED_COLORS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="HUEDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Escape configuration
    color_char: str = Field(
        default="§",
        min_length=1,
        max_length=1,
        description="Marker character that starts every client escape code",
    )

    alt_color_char: str = Field(
        default="&",
        min_length=1,
        max_length=1,
        description="Prefix character of legacy color codes in source text (e.g., &c)",
    )

    placeholder_delimiter: str = Field(
        default="%",
        min_length=1,
        max_length=1,
        description="Character surrounding placeholder identifiers (e.g., %entity_name%)",
    )

    # Capability gate
    host_version: str = Field(
        default="1.16.5",
        description="Version of the host the decorated text is sent to",
    )

    gradient_min_version: str = Field(
        default="1.16",
        description="First host version able to display extended (hex/gradient) colors",
    )

    extended_colors: Optional[bool] = Field(
        default=None,
        description="Force gradient support on/off; unset means decide from host_version",
    )

    @field_validator("host_version", "gradient_min_version")
    @classmethod
    def version_check(cls, value: str) -> str:
        """Versions must be dotted integers, e.g. 1.16 or 1.20.4"""
        value = value.strip()
        if not VERSION_PATTERN.match(value):
            raise ValueError(f"Invalid version string: '{value}'")
        return value

    def gradients_supported(self) -> bool:
        """
        Capability gate for the gradient stage.

        Returns:
            True if the host displays extended colors

        Example:
            >>> AppSettings(host_version="1.12.2").gradients_supported()
            False
            >>> AppSettings(host_version="1.16").gradients_supported()
            True
        """
        if self.extended_colors is not None:
            return self.extended_colors
        return version_parse(self.host_version) >= version_parse(self.gradient_min_version)


def version_parse(version: str) -> Tuple[int, ...]:
    """
    Split a dotted version into a comparable tuple.

    Trailing zero components are dropped so that "1.16" and "1.16.0"
    compare equal.
    """
    parts = [int(part) for part in version.split('.')]
    while len(parts) > 1 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


# Singleton instance - import this in your code
appsettings = AppSettings()
