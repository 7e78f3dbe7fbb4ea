"""chessref — pseudo-legal move referee and check reporter."""

__version__ = "0.1.0"
