# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Shared configuration classes for VISM components."""

import logging
from abc import ABCMeta
from dataclasses import field
from typing import ClassVar, Any, Self

import yaml
from cachetools import TTLCache
from pydantic.dataclasses import dataclass

from lib.logs import LoggingConfig

shared_logger = logging.getLogger("vism_shared")


@dataclass
class Config(metaclass=ABCMeta):
    """Abstract VISM configuration."""

    __path__: ClassVar[str] = ""
    __config_dir__: ClassVar[str] = ""
    __config_file__: ClassVar[str] = ""
    __ttl_cache__: ClassVar[TTLCache] = TTLCache(maxsize=5, ttl=10)

    @classmethod
    def load(cls) -> 'Self':
        return cls(**cls.read_config().get(cls.__path__, {}))

    @classmethod
    def read_config(cls) -> dict[str, Any]:
        if not cls.__ttl_cache__.get(cls.__config_file__):
            shared_logger.debug("Reading config file %s", cls.__config_file__)
            with open(cls.__config_file__, 'r') as config_file:
                cls.__ttl_cache__[cls.__config_file__] = yaml.safe_load(config_file) or {}

        return cls.__ttl_cache__[cls.__config_file__]


@dataclass
class VismConfig(Config):
    """Base configuration class for VISM components."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
