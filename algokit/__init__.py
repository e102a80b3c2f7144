"""Classic contest algorithms: graphs, number theory, strings, searching, bit tricks and stress testing."""

__version__ = "0.1.0"