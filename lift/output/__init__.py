"""llms.txt and llms-full.txt rendering."""

from .generator import GeneratedOutputs, OutputGenerator, format_size, render_full, render_index

__all__ = [
    "GeneratedOutputs",
    "OutputGenerator",
    "format_size",
    "render_full",
    "render_index",
]
