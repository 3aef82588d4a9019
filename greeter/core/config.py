from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Greeter API"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got: {v}")
        return v_upper

    class Config:
        env_file = ".env"
        env_prefix = "GREETER_"


settings = Settings()
