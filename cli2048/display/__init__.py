from cli2048.display.screen import clear_screen, format_grid, format_screen, render

__all__ = ["clear_screen", "format_grid", "format_screen", "render"]
