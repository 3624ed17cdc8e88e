class CookImportError(RuntimeError):
    pass


class FetchError(CookImportError):
    """Raised when a recipe cannot be fetched or extracted from a URL."""


class MissingCredentialError(CookImportError):
    """Raised when a required API key is not configured."""


class TransportError(CookImportError):
    """Raised when a request to a provider fails at the network level."""


class ApiStatusError(CookImportError):
    """Raised when a provider answers with a non-success status."""

    def __init__(self, provider: str, status: int, body: str):
        self.provider = provider
        self.status = status
        self.body = body
        super().__init__(f"{provider} API failed with status {status}: {body}")


class MalformedResponseError(CookImportError):
    """Raised when a provider response lacks the generated text."""


class ImportStepError(CookImportError):
    """Wraps the first failure of an import run with the step it happened in."""

    def __init__(self, step: str, cause: CookImportError):
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to {step}: {cause}")
