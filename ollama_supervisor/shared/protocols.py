import subprocess
from typing import Optional, Protocol, TypedDict, TYPE_CHECKING

if TYPE_CHECKING:
    from ollama_supervisor.entities.model_record import ModelRecord
    from ollama_supervisor.shared.process_runner import ProcessResult


class ModelTagDTO(TypedDict, total=False):
    """One element of the `models` array returned by GET /api/tags."""
    name: str
    size: Optional[int]
    modified_at: Optional[str]


class ProcessRunnerProtocol(Protocol):
    async def run(self, cmd: list[str]) -> 'ProcessResult': ...

    def spawn_detached(self, cmd: list[str]) -> subprocess.Popen: ...


class ProcessProbeProtocol(Protocol):
    async def is_installed(self) -> bool: ...


class ServerProbeProtocol(Protocol):
    async def is_running(self) -> bool: ...


class ModelInventoryProtocol(Protocol):
    async def list_models(self) -> list[str]: ...

    async def list_model_records(self) -> list['ModelRecord']: ...

    async def has_model(self, name: str) -> bool: ...
