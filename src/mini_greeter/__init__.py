"""mini-greeter -- configuration core for a minimal single-user LightDM greeter."""

__version__ = '0.6.0'
