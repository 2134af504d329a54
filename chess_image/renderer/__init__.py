"""Rendering subpackage.

Turns an immutable ``PositionModel`` plus annotations into a Pillow image.
The renderer focuses on:

* Fixed layering: background, dark squares, highlights, sprites, arrows.
* Pluggable sprite lookup keyed by (style, piece, size), with a cached
  filesystem loader as the default.
* Off-loop sprite decoding so rendering can be awaited.

See :mod:`chess_image.renderer.board` for the compositing routine and
:mod:`chess_image.renderer.sprites` for the style registry.
"""
