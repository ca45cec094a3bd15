"""Domain layer - search ranking, quota gate and sound libraries."""
