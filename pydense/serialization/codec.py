"""
Binary encoding of vectors, matrices and tensors.

Layout (native byte order, standard field sizes):

    vector  u32 size, size numbers
    matrix  u32 rows, u32 cols, rows * cols numbers (row-major)
    tensor  u32 dimensions, u64 dimension_size,
            dimensions matrices, one vector

Numbers are IEEE-754 float64, or float32 when both ends agree on the
'fp32' precision. Nothing in the stream records which one was used, and
there is no byte-order negotiation.

encode_* / decode_* work on bytes; write_* / read_* work on any binary
stream with read()/write() (files, io.BytesIO, socket.makefile('rwb')).
"""

import io
import struct
from typing import Any, BinaryIO
import numpy as np
from numpy.typing import DTypeLike

from pydense.core.compute.precision import resolve_dtype, struct_code
from pydense.core.exceptions import ValidationError
from pydense.matrix.matrix import Matrix
from pydense.tensor.tensor import Tensor
from pydense.vector.vector import Vector

_U32 = struct.Struct('=I')
_U64 = struct.Struct('=Q')
_SHAPE = struct.Struct('=II')


def _native(dtype: np.dtype) -> np.dtype:
    """Native-order wire dtype for a supported precision ('=d' or '=f')."""
    return np.dtype('=' + struct_code(dtype))


def _read_exact(stream: BinaryIO, n: int, what: str) -> bytes:
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise ValidationError(
                f"{what}: stream ended after {n - remaining} of {n} bytes"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


def _read_numbers(stream: BinaryIO, count: int, dtype: np.dtype, what: str) -> Any:
    raw = _read_exact(stream, count * dtype.itemsize, what)
    return np.frombuffer(raw, dtype=_native(dtype)).copy()


# ═══════════════════════════════════════════════════════════════════════
# Stream API
# ═══════════════════════════════════════════════════════════════════════

def write_vector(stream: BinaryIO, vector: Vector) -> None:
    stream.write(_U32.pack(vector.size))
    stream.write(vector.data.astype(_native(vector.dtype), copy=False).tobytes())


def write_matrix(stream: BinaryIO, matrix: Matrix) -> None:
    stream.write(_SHAPE.pack(matrix.rows, matrix.cols))
    stream.write(matrix.data.astype(_native(matrix.dtype), copy=False).tobytes(order='C'))


def write_tensor(stream: BinaryIO, tensor: Tensor) -> None:
    stream.write(_U32.pack(tensor.dimensions))
    stream.write(_U64.pack(tensor.dimension_size))
    for layer in tensor:
        write_matrix(stream, layer)
    write_vector(stream, tensor.data)


def read_vector(stream: BinaryIO, dtype: DTypeLike | str | None = None) -> Vector:
    """
    Read one vector.

    Raises:
        ValidationError: If the stream ends early
    """
    dtype = resolve_dtype(dtype)
    (size,) = _U32.unpack(_read_exact(stream, _U32.size, 'vector header'))
    values = _read_numbers(stream, size, dtype, 'vector data')
    return Vector._wrap(values.astype(dtype, copy=False))


def read_matrix(stream: BinaryIO, dtype: DTypeLike | str | None = None) -> Matrix:
    """
    Read one matrix.

    Raises:
        ValidationError: If the stream ends early
    """
    dtype = resolve_dtype(dtype)
    rows, cols = _SHAPE.unpack(_read_exact(stream, _SHAPE.size, 'matrix header'))
    values = _read_numbers(stream, rows * cols, dtype, 'matrix data')
    return Matrix._wrap(values.astype(dtype, copy=False).reshape(rows, cols))


def read_tensor(stream: BinaryIO, dtype: DTypeLike | str | None = None) -> Tensor:
    """
    Read one tensor.

    Raises:
        ValidationError: If the stream ends early, declares no layers or
            carries a data vector whose size contradicts the header
    """
    dtype = resolve_dtype(dtype)
    (dimensions,) = _U32.unpack(_read_exact(stream, _U32.size, 'tensor header'))
    (dimension_size,) = _U64.unpack(_read_exact(stream, _U64.size, 'tensor header'))
    if dimensions == 0 or dimension_size == 0:
        raise ValidationError(
            f"tensor header: dimensions ({dimensions}) and dimension_size "
            f"({dimension_size}) must be positive"
        )

    layers = [read_matrix(stream, dtype) for _ in range(dimensions)]
    data = read_vector(stream, dtype)
    if data.size != dimension_size:
        raise ValidationError(
            f"tensor: header declares dimension_size {dimension_size}, "
            f"data vector holds {data.size}"
        )
    return Tensor(dimension_size, tuple(layers), data)


# ═══════════════════════════════════════════════════════════════════════
# Bytes API
# ═══════════════════════════════════════════════════════════════════════

def _encode(writer, value) -> bytes:
    buffer = io.BytesIO()
    writer(buffer, value)
    return buffer.getvalue()


def _decode(reader, payload: bytes, dtype, what: str):
    buffer = io.BytesIO(payload)
    value = reader(buffer, dtype)
    trailing = len(payload) - buffer.tell()
    if trailing:
        raise ValidationError(f"{what}: {trailing} trailing bytes after payload")
    return value


def encode_vector(vector: Vector) -> bytes:
    return _encode(write_vector, vector)


def encode_matrix(matrix: Matrix) -> bytes:
    return _encode(write_matrix, matrix)


def encode_tensor(tensor: Tensor) -> bytes:
    return _encode(write_tensor, tensor)


def decode_vector(payload: bytes, dtype: DTypeLike | str | None = None) -> Vector:
    """Inverse of encode_vector(). The payload must hold exactly one vector."""
    return _decode(read_vector, payload, dtype, 'vector')


def decode_matrix(payload: bytes, dtype: DTypeLike | str | None = None) -> Matrix:
    """Inverse of encode_matrix(). The payload must hold exactly one matrix."""
    return _decode(read_matrix, payload, dtype, 'matrix')


def decode_tensor(payload: bytes, dtype: DTypeLike | str | None = None) -> Tensor:
    """Inverse of encode_tensor(). The payload must hold exactly one tensor."""
    return _decode(read_tensor, payload, dtype, 'tensor')
