"""
Built-in plugins for indexlog.

Plan sessions live in indexlog.plugins.plans and are registered by
indexlog.core.registry.discover_plugins.
"""
