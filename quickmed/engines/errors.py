class AnalysisError(Exception):
    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

class CredentialMissingError(AnalysisError):
    def __init__(self, kind: str):
        super().__init__(kind, "API Key missing")

class AnalysisProviderError(AnalysisError):
    """Network failure, empty reply or a reply that does not match the kind's schema."""
