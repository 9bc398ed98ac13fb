import json
from pathlib import Path

from pydantic import BaseModel, Field


class ModelHostConfig(BaseModel):
    """Configuration for the Ollama model host.

    Attributes:
        binary: Name or path of the host executable.
        host: Host of the control endpoint.
        port: Port of the control endpoint.
        probe_timeout: Timeout for the liveness probe in seconds.
        warmup_delay: Delay after spawning the server before returning, in seconds.
        request_timeout: Timeout for inventory requests in seconds.
        download_url: Page opened to hand off installation of the host.
        required_model: Model the setup flow requires before it reports ready.
    """

    binary: str = Field("ollama", min_length=1, description="Name or path of the host executable")
    host: str = Field("localhost", description="Host of the control endpoint")
    port: int = Field(11434, ge=1, le=65535, description="Port of the control endpoint")
    probe_timeout: float = Field(2.0, gt=0, description="Timeout for the liveness probe in seconds")
    warmup_delay: float = Field(2.0, ge=0, description="Delay after spawning the server before returning, in seconds")
    request_timeout: float = Field(30.0, gt=0, description="Timeout for inventory requests in seconds")
    download_url: str = Field("https://ollama.ai/download", description="Page opened to hand off installation of the host")
    required_model: str = Field("llama3.2", min_length=1, description="Model the setup flow requires before it reports ready")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


class ServerConfig(BaseModel):
    """Configuration for the supervisor's own API server.

    Attributes:
        host: Host for the API server.
        port: Port for the API server.
    """

    host: str = Field("127.0.0.1", description="Host for the API server")
    port: int = Field(8765, ge=1, le=65535, description="Port for the API server")


class Config(BaseModel):
    """Main configuration class.

    Attributes:
        ollama: Configuration for the model host.
        server: Configuration for the API server.
    """

    ollama: ModelHostConfig = Field(default_factory=ModelHostConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def load(cls, config_path: str = "config.json") -> "Config":
        """Load and validate configuration from JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path) as f:
            data = json.load(f)

        return cls(**data)
