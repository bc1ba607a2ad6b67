"""routectl: edge route derivation for multi-environment worker deployments."""

__version__ = "0.1.0"
