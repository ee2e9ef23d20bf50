"""A small entity-component-system: entity handles, pooled component storage and signature-driven systems."""

__version__ = "0.1.0"

__all__ = ["component_array", "component_manager", "ecs", "system", "types"]