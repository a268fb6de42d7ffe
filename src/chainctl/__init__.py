"""chainctl: drive a MultiChain node through its command-line binaries."""

__version__ = "0.1.0"
