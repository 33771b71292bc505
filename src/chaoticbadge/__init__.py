"""chaoticbadge - Render two-segment status badges as SVG.

chaoticbadge draws small "label | status" badges like the ones shown in
project READMEs. Two styles are available: a flat style with solid blocks and
a shatter style that fills each block with a mosaic of shaded triangles
computed by Delaunay triangulation.

Example:
    $ chaoticbadge render build passing --style shatter --font-file Verdana.ttf

This will create build.svg with a shattered label block and a green status block.
"""

__version__ = "0.1.0"
__author__ = "chaoticbadge contributors"

__all__ = ["__author__", "__version__"]
