"""Small tools, helpers and web apps: reversal, a greeter, sums, a hello server, a release watcher, an album service and a wiki."""

__version__ = "0.1.0"