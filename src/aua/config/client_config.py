"""Client configuration with Pydantic validation.

This module provides the connection settings for an AUA server: where it
lives, how to authenticate and how long to wait for it. Settings can be
loaded from and saved to YAML.
"""

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aua import __version__

DEFAULT_USER_AGENT = f"aua-python/{__version__}"


class ClientConfig(BaseModel):
    """Connection settings for an Arcaea Unlimited API server.

    The configuration can be:
    - Instantiated directly: `ClientConfig(base_url="https://aua.example/v5")`
    - Loaded from YAML: `ClientConfig.from_yaml("aua.yaml")`
    - Saved to YAML: `config.to_yaml("aua.yaml")`
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        ...,
        min_length=1,
        description="Base URL of the AUA server, including the API version path",
    )
    token: str | None = Field(
        None,
        description="Bearer token sent in the Authorization header",
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header value",
    )
    timeout: float = Field(
        30.0,
        gt=0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value

    def headers(self) -> dict[str, str]:
        """Default request headers for this configuration."""
        headers = {"User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated ClientConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, token={token!r}, "
            f"user_agent={self.user_agent!r}, timeout={self.timeout!r})"
        )
