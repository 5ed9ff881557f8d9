"""Hand-built containers and value types with explicit, predictable behaviour."""

__version__ = "0.1.0"

__all__ = [
    "any_value",
    "block_deque",
    "circular_buffer",
    "dynamic_string",
    "linked_list",
    "lru_cache",
    "rational",
    "smart_pointers",
    "vector",
]