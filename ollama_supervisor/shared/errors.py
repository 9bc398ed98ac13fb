class ModelHostError(Exception):
    """Base class for failures that are surfaced to the caller as error responses."""

    error_type = "model_host_error"


class InventoryError(ModelHostError):
    """The control endpoint could not be reached or returned an unparseable body."""

    error_type = "unavailable_or_malformed"


class ServerStartError(ModelHostError):
    error_type = "server_start_error"


class ModelPullError(ModelHostError):
    error_type = "model_pull_error"


class BrowserOpenError(ModelHostError):
    error_type = "browser_open_error"
