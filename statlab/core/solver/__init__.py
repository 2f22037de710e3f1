"""Root finding used to invert distribution functions."""

from .root_finding import expand_bracket, invert

__all__ = ["expand_bracket", "invert"]
