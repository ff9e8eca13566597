"""chessgrid — chess board model with pseudo-legal move generation and a Qt board."""

__version__ = "0.1.0"
