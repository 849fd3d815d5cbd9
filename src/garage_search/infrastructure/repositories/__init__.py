from .in_memory_directory import InMemorySpotDirectory, InMemoryVehicleDirectory

__all__ = ["InMemorySpotDirectory", "InMemoryVehicleDirectory"]
