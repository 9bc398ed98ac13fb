from typing import Sequence

from ollama_supervisor.entities.readiness import Readiness, SetupStep
from ollama_supervisor.entities.status_snapshot import StatusSnapshot
from ollama_supervisor.use_cases.get_status import GetStatus


class GetReadiness:
    """
    Works out the next setup step (install, start, pull, ready) and the model to use
    from a single status snapshot.
    """

    def __init__(self, get_status_use_case: GetStatus, required_model: str):
        self.get_status_use_case = get_status_use_case
        self.required_model = required_model

    async def execute(self) -> Readiness:
        status = await self.get_status_use_case.execute()
        return Readiness(
            step=self.next_step(status, self.required_model),
            required_model=self.required_model,
            selected_model=self.select_model(status.models, self.required_model),
            status=status,
        )

    @staticmethod
    def next_step(status: StatusSnapshot, required_model: str) -> SetupStep:
        if not status.installed:
            return "install"
        if not status.running:
            return "start"
        # Same prefix semantics as ModelInventory.has_model, over the snapshot's list
        if not any(model.startswith(required_model) for model in status.models):
            return "pull"
        return "ready"

    @staticmethod
    def select_model(models: Sequence[str], preferred: str) -> str:
        """Exact preferred name if installed, else the first installed model, else the preferred name."""
        if preferred in models:
            return preferred
        if models:
            return models[0]
        return preferred
