from .display import display_width, fragments_text, fragments_width

__all__ = ["display_width", "fragments_text", "fragments_width"]
