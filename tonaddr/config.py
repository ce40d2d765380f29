from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    log_level: str = Field(default="INFO")

    demo_address: str = Field(
        default="0:2cf55953e92efbeadab7ba725c3f93a0b23f842cbba72d7b8e6f510a70e422e3"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
