"""Operating-system algorithms: paging, scheduling, memory fragmentation, producer/consumer and a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "memory", "paging", "producer_consumer", "scheduling"]