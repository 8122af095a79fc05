

class CovidBrowserError(Exception):
    """Base exception for all covid_browser errors"""
    pass

class ConfigError(CovidBrowserError):
    """Invalid or inconsistent global.json or dataset config"""
    pass

class DatasetConfigError(ConfigError):
    """
    Dataset config cannot be loaded as written:
    missing source file, unknown column names, unknown layout, etc
    """
    pass

class DatasetSchemaError(CovidBrowserError):
    """
    Loaded table doesn't match what Dataset expects
    missing columns, nulls, negative counts, etc
    """
    pass

class InvalidRangeError(CovidBrowserError, ValueError):
    """Range filter whose lower bound exceeds its upper bound (or has unusable bounds)"""
    pass
