"""Barrel regeneration and rendering."""

from .barrel import BarrelSynthesizer, SynthesisResult, SynthesisWarning
from .render import render_barrel, render_export_listing, render_module_block, render_wildcard

__all__ = [
    "BarrelSynthesizer",
    "SynthesisResult",
    "SynthesisWarning",
    "render_barrel",
    "render_export_listing",
    "render_module_block",
    "render_wildcard",
]
