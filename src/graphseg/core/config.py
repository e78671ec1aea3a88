from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Observability & UI
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "INFO"  # DEBUG|INFO|WARNING|ERROR
    NO_COLOR: bool = False  # Disable colored output

    # Segmentation CLI
    OUTPUT_FORMAT: str = "plain"  # plain|json|table
    INPUT_ENCODING: str = "utf-8"  # Encoding of text read from stdin
    STREAM_CHUNK_SIZE: int = Field(default=4096, gt=0)  # Bytes per read in `stream`

    # Conformance fixtures (output of `ucd gen-tests`)
    FIXTURES_PATH: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="GRAPHSEG_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        config_path: Optional[Path]
        if config_file:
            config_path = Path(config_file)
        else:
            # Auto-discover .graphseg.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".graphseg.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        # Load config file if found
        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # File values are defaults; environment variables override them
        env_data = cls().model_dump(exclude_unset=True)
        return cls(**{**{k.upper(): v for k, v in config_data.items()}, **env_data})


# Default settings - will be replaced by load_config() during CLI startup
SETTINGS = Settings()
