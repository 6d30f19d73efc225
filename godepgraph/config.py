from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GODEPGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Repository Access Configuration
    ssh_key_path: Path = Field(default_factory=lambda: Path.home() / ".ssh" / "id_rsa")
    ssh_user: str = Field(default="git")
    branches: List[str] = Field(default_factory=lambda: ["master", "main"])
    clone_depth: int = Field(default=1)

    # Source Scanning Configuration
    module_file_name: str = Field(default="go.mod")
    source_extension: str = Field(default=".go")
    ignored_dirs: List[str] = Field(default_factory=lambda: [".git"])

    # Rendering Configuration
    layout_engine: str = Field(default="dot")
    output_format: str = Field(default="pdf")
    graph_file: str = Field(default="graph.dot")
    diagram_file: str = Field(default="graph.pdf")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    @field_validator("branches")
    @classmethod
    def ensure_branches(cls, v):
        branches = [branch.strip() for branch in v if branch.strip()]
        if not branches:
            raise ValueError("at least one branch name is required")
        return branches

    @property
    def log_dir(self) -> Optional[Path]:
        """Get log directory path."""
        if not self.log_file:
            return None
        return Path(self.log_file).parent

    def ensure_directories(self):
        """Ensure necessary directories exist."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)


settings = Settings()
settings.ensure_directories()
