"""cellcolor: color computation for text-rendering surfaces.

Subpackages:
    design  -- packed/hex representation, compositing, WCAG contrast and
               contrast enforcement helpers.
"""

__version__ = "0.3.0"
