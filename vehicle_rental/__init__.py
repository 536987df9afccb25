"""In-memory model of a vehicle rental office: clients, vehicles, rentals and repositories."""

__version__ = "0.1.0"
__all__ = ["__version__"]