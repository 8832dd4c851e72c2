from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Scheduler settings loaded from environment."""

    # Service
    service_name: str = "fitbit-scheduler"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None  # For LocalStack

    # DynamoDB table holding scheduler configs, keyed by schedulerName
    config_table_name: str = "fitbit-scheduler-config"

    @property
    def client_kwargs(self) -> dict[str, str]:
        kwargs = {"region_name": self.aws_region}
        if self.aws_endpoint_url:
            kwargs["endpoint_url"] = self.aws_endpoint_url
        return kwargs

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
