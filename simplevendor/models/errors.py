class VendorError(Exception):
    """
        Base class for every error raised while vendoring
    """


class NoSourcesError(VendorError):
    """
        Raised when a directory holds no buildable Go source files.
        Discovery skips such directories instead of failing
    """

    def __init__(self, location: str, message: str = ""):
        self.location = location
        super().__init__(message or f"no Go files in {location}")


class ResolutionError(VendorError):
    """
        Raised when an import path (or a directory) cannot be resolved to a package
    """

    def __init__(self, import_path: str, message: str):
        self.import_path = import_path
        super().__init__(f"{import_path}: {message}")
