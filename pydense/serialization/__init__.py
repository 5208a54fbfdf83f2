"""
Byte-exact serialization of vectors, matrices and tensors.

Public API:
    encode_vector / encode_matrix / encode_tensor -> bytes
    decode_vector / decode_matrix / decode_tensor (bytes, dtype=None)
    write_vector / write_matrix / write_tensor (stream, value)
    read_vector / read_matrix / read_tensor (stream, dtype=None)

Example:
    >>> payload = encode_matrix(Matrix.identity(2))
    >>> len(payload)
    40
    >>> decode_matrix(payload) == Matrix.identity(2)
    True
"""

from pydense.serialization.codec import (
    encode_vector,
    encode_matrix,
    encode_tensor,
    decode_vector,
    decode_matrix,
    decode_tensor,
    write_vector,
    write_matrix,
    write_tensor,
    read_vector,
    read_matrix,
    read_tensor,
)

__all__ = [
    # Bytes
    "encode_vector",
    "encode_matrix",
    "encode_tensor",
    "decode_vector",
    "decode_matrix",
    "decode_tensor",
    # Streams
    "write_vector",
    "write_matrix",
    "write_tensor",
    "read_vector",
    "read_matrix",
    "read_tensor",
]
