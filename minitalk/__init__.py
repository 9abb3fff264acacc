"""Pass text between processes over SIGUSR1/SIGUSR2, with the helpers it is built on."""

__version__ = "0.1.0"