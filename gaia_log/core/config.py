import os
from pydantic import BaseModel, Field
from typing import Optional


class RedisConfig(BaseModel):
    host: str = Field(default=os.getenv("GAIA_LOG_HOST", "127.0.0.1"))
    port: int = Field(default=int(os.getenv("GAIA_LOG_PORT", 6379)))
    db: int = 0
    password: Optional[str] = Field(default=os.getenv("GAIA_LOG_PASSWORD"))
    socket_connect_timeout: float = 2.0
    socket_timeout: float = 5.0


class RecorderConfig(BaseModel):
    # Where a client writes its fallback log file
    directory: str = Field(default=os.getenv("GAIA_LOG_DIR", "./"))


class ServiceConfig(BaseModel):
    directory: str = Field(default=os.getenv("GAIA_LOG_SERVICE_DIR", "./Logs"))
    restart_delay: float = 1.0
    poll_timeout: float = 1.0


class LoggingConfig(BaseModel):
    level: str = Field(default=os.getenv("GAIA_LOG_LEVEL", "INFO"))
    syslog: bool = Field(default=(os.getenv("GAIA_LOG_SYSLOG", "0") == "1"))


class AppConfig(BaseModel):
    redis: RedisConfig = RedisConfig()
    recorder: RecorderConfig = RecorderConfig()
    service: ServiceConfig = ServiceConfig()
    logging: LoggingConfig = LoggingConfig()


CONFIG = AppConfig()
