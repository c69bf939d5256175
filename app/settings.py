from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    debug: bool = False
    app_name: str = "blog-api"
    aws_region: str = Field(default="eu-central-1", alias="AWS_DEFAULT_REGION")
    database_url: str | None = None
    stage: str = "dev"

    @property
    def posts_table_name(self) -> str:
        return f"{self.stage}-posts"
