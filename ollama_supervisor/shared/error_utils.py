from ollama_supervisor.shared.errors import ModelHostError


class ErrorUtils:
    @staticmethod
    def format_error_response(message: str, error_type: str) -> dict:
        """
        Formats a consistent error response dictionary.

        Args:
            message: The error message to include in the response.
            error_type: The type of error (e.g., "unavailable_or_malformed", "model_pull_error").

        Returns:
            A dictionary with the error details.
        """
        return {
            "error": {
                "message": message,
                "type": error_type
            }
        }

    @staticmethod
    def from_host_error(error: ModelHostError) -> dict:
        """Error response for a surfaced model host failure, keeping its message verbatim."""
        return ErrorUtils.format_error_response(str(error), error.error_type)
