# src/home_control/utils/exceptions.py

class HomeControlError(Exception):
    """Base exception class for Home Control"""
    pass

class ValidationError(HomeControlError, ValueError):
    """Raised when a device setting is out of range or unsupported"""
    pass

class UnknownDeviceType(HomeControlError, ValueError):
    """Raised when the factory is asked for a type it does not know"""
    pass

class ConfigurationError(HomeControlError):
    """Raised when there are issues with configuration"""
    pass

class GroupOperationError(HomeControlError):
    """Raised after a group cascade in which one or more members failed"""
    def __init__(self, group_name: str, failures):
        self.group_name = group_name
        self.failures = list(failures)
        names = ", ".join(name for name, _ in self.failures)
        super().__init__(f"{len(self.failures)} member(s) of {group_name} failed: {names}")
