from fastapi import Depends, FastAPI

from ollama_supervisor.interface_adapters.host_controller import ModelHostController


class API:
    def __init__(self, host_controller: ModelHostController):
        self.host_controller = host_controller
        self.app = FastAPI(title="Ollama Supervisor", version="0.1.0")

        self.get_host_controller = lambda: self.host_controller

        self._register_routes()

    def _register_routes(self):
        async def installed_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.check_installed()

        async def running_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.check_running()

        async def start_server_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.start_server()

        async def list_models_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.list_models()

        async def model_details_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.list_model_records()

        async def has_model_handler(name: str, controller=Depends(self.get_host_controller)) -> dict:
            return await controller.has_model(name)

        async def pull_model_handler(request: dict, controller=Depends(self.get_host_controller)) -> dict:
            return await controller.pull_model(request.get("model"))

        async def status_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.get_status()

        async def readiness_handler(controller=Depends(self.get_host_controller)) -> dict:
            return await controller.get_readiness()

        def download_page_handler(controller=Depends(self.get_host_controller)) -> dict:
            return controller.open_download_page()

        self.app.get("/installed")(installed_handler)
        self.app.get("/running")(running_handler)
        self.app.post("/server/start")(start_server_handler)
        self.app.get("/models")(list_models_handler)
        self.app.get("/models/details")(model_details_handler)
        self.app.get("/models/{name:path}/available")(has_model_handler)
        self.app.post("/models/pull")(pull_model_handler)
        self.app.get("/status")(status_handler)
        self.app.get("/readiness")(readiness_handler)
        self.app.post("/download-page")(download_page_handler)
