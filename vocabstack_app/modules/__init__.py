"""Feature modules, each mounted through ``core.module_registry``."""
