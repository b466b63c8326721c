from .config import GameConfig

__all__ = ["GameConfig"]
