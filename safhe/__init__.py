"""BFV homomorphic encryption and polynomial ring arithmetic."""

__version__ = "0.1.0"