"""Integer and string helpers, a student register, and a French word-guessing game."""

__version__ = "0.1.0"
__all__ = ["basics", "students", "wordguess"]