"""Client subpackage: proxy client, load state machine and command line."""

from .loader import BackendClient, HistoryLoader, LoadState

__all__ = ["BackendClient", "HistoryLoader", "LoadState"]
