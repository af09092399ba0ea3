"""Install, track and update framework guidance documents in a workspace."""

__version__ = "0.3.0"
