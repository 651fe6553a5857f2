"""Small teaching programs: ray casting, triangles, sequences, shapes, phones, products and bookstores."""

__version__ = "0.1.0"