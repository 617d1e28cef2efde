class ReportInputError(ValueError):
    """Raised when a results file, failure record or config cannot be used."""
