"""Rendering subpackage.

Turns :class:`totemology.totem.Totem` rows into bit-plane images: each entry
becomes one pixel column holding its binary digits, least significant bit at
the bottom, and the columns are laid out left to right in row order.

See :mod:`totemology.renderer.bitplane` for the grid construction and the
Pillow based image output.
"""
