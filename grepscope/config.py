"""Configuration for the grepscope service."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .models import ContextOptions


class Settings(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: list[str] = Field(default=["http://localhost:5173", "http://localhost:3000"])
    max_file_size_kb: int = Field(default=500)

    # Defaults applied when a request carries no options of its own
    line_number: bool = Field(default=True)
    color: bool = Field(default=False)
    header_max: int = Field(default=10, ge=1)
    margin: int = Field(default=3, ge=0)
    loi_pad: int = Field(default=1, ge=0)

    model_config = {"env_prefix": "GREPSCOPE_"}

    def context_options(self) -> ContextOptions:
        return ContextOptions(
            line_number=self.line_number,
            color=self.color,
            header_max=self.header_max,
            margin=self.margin,
            loi_pad=self.loi_pad,
        )


settings = Settings()
