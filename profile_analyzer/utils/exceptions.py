"""Exceptions raised by the external collaborators (scraper, LLM)."""


class ScrapeError(ConnectionError):
    """Raised when the LinkedIn profile could not be fetched."""

    pass


class AnalysisError(RuntimeError):
    """Raised when the LLM analysis call fails."""

    pass
