"""List WBFS game folders, read disc game IDs and fetch cover art."""

__version__ = "0.1.0"