"""Global configuration for mongodock."""

import os
from dataclasses import dataclass

# Application Info
APP_NAME = "mongodock"
APP_VERSION = "1.0.0"
APP_TAGLINE = "MongoDB Docker Manager"
APP_DESCRIPTION = "Run and administer a local MongoDB container"

# Paths - Application
USER_DATA_DIR = os.path.expanduser("~/.mongodock")
LOG_DIR = os.path.join(USER_DATA_DIR, "logs")

# Databases hidden from listings
SYSTEM_DATABASES = ("local", "config")


@dataclass(frozen=True)
class Settings:
    """Identity of the managed container, fixed for the life of the process."""

    container_name: str = "my-mongodb"
    image: str = "mongo:latest"
    host_port: int = 27017
    container_port: int = 27017
    host: str = "localhost"
    docker_bin: str = "docker"
    shell_bin: str = "mongosh"

    @property
    def port_mapping(self) -> str:
        return f"{self.host_port}:{self.container_port}"
