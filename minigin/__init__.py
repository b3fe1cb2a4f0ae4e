"""A minimal 2D game engine on pygame: scenes, game objects, text and a 60 FPS loop."""

__version__ = "0.1.0"
__all__ = [
    "engine",
    "font",
    "fps_display",
    "game_object",
    "input_manager",
    "main",
    "renderer",
    "resource_manager",
    "scene",
    "scene_manager",
    "singleton",
    "text_object",
    "texture",
    "timer",
    "transform",
]