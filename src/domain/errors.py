# src/domain/errors.py


class InvalidRecord(ValueError):
    """
    A classification record is missing required fields
    (code / title) or carries a malformed code.
    """
    pass


class RenderFailure(RuntimeError):
    def __init__(self, code: str | None, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Render failed for {code or '<unknown>'}: {reason}")


class WikidataQueryError(RuntimeError):
    pass
