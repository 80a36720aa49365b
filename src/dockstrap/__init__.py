"""dockstrap - Docker configuration bootstrapper for Node.js/Express projects."""

__version__ = "0.1.0"
