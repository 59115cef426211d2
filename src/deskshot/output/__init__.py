"""Encoding and delivery of captured images."""

from .compression import CompressionLevel, zlib_level
from .png_writer import default_filename, encode_bytes, encode_to, write_to_file
from .viewer import open_in_viewer

__all__ = [
    "CompressionLevel",
    "default_filename",
    "encode_bytes",
    "encode_to",
    "open_in_viewer",
    "write_to_file",
    "zlib_level",
]
