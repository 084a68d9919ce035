"""Configuration module for the VISM ACME client."""
# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html

import os
import logging
from typing import ClassVar

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from lib.config import VismConfig
from lib.util import is_http_url

acme_client_logger = logging.getLogger("vism_acme_client")

REPLAY_NONCE_HEADER = "Replay-Nonce"
JOSE_CONTENT_TYPE = "application/jose+json"


@dataclass
class AcmeClientConfig(VismConfig):
    """Configuration for the ACME request signing client."""

    __path__: ClassVar[str] = "vism_acme_client"
    __config_dir__: ClassVar[str] = os.getenv("CONFIG_DIR", os.getcwd()).rstrip("/")
    __config_file__: ClassVar[str] = f"{__config_dir__}/vism_acme_client.yaml"

    directory_url: str = None
    timeout_seconds: int = 10
    user_agent: str = "vism-acme-client"

    @field_validator("timeout_seconds")
    @classmethod
    def timeout_must_be_positive(cls, v):
        """Validate request timeout."""
        if v <= 0:
            raise ValueError("Timeout must be greater than 0 seconds")
        return v

    def __post_init__(self):
        self.validate_config()

    def validate_config(self):
        """Validate the ACME client configuration."""
        acme_client_logger.info("Validating ACME client config")
        if not self.directory_url:
            raise ValueError("No directory_url found in config.")

        if not is_http_url(self.directory_url):
            raise ValueError(
                f"directory_url '{self.directory_url}' is not an http(s) URL."
            )
