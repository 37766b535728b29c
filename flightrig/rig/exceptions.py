# flightrig/rig/exceptions.py

class RigError(Exception):
    """Base exception for all flight rig errors"""
    pass

class ConfigurationError(RigError):
    """A tuning coefficient is outside its valid range"""
    def __init__(self, config_name, value=None, message="Invalid tuning value"):
        self.config_name = config_name
        self.value = value
        super().__init__(f"{message}: {config_name}={value!r}")
