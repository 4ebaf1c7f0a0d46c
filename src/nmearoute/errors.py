class NmeaRouteError(Exception):
    """Base class for all nmearoute exceptions"""
    pass


class FileError(NmeaRouteError):
    """Custom exception class for unreadable NMEA log files"""
    pass


class ConfigError(NmeaRouteError):
    """Custom exception class for invalid configuration values"""
    pass
