"""Core animation primitives for asciifly.

Modules:
- params: wing geometry, palette and the aesthetic constants
- shapes: density field for wings, body and antennae
- animator: bob, flap rotation, foreshortening, breathing and texture
- raster: grid sizing, cell mapping and glyph output
- loop: cancellable frame loop
"""
