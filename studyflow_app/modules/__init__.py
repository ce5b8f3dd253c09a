"""Feature modules. Each package exposes a blueprint registered in core/module_registry.py."""
