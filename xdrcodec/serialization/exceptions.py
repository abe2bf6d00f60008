# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
All failures raised by the codec derive from `SerializationError`, there are three families:

- `XdrIOError`: the underlying sink or source failed, the original exception is kept as `__cause__`;
- `DomainViolationError`: the bytes or the value break an XDR rule (bad boolean, unknown enum ordinal, ...);
- `UnsupportedShapeError`: the requested shape exists in XDR but is not implemented by this engine.

None of these are recoverable mid-value, a failed encode or decode must be discarded as a whole.
"""


class SerializationError(Exception):
    """Base class for all (de)serialization errors."""


class XdrIOError(SerializationError):
    """The byte sink or source raised an error, it is passed through without interpretation."""


class OutOfDataError(XdrIOError):
    """The byte source ended before the requested amount of bytes could be read."""


class TooLongError(SerializationError):
    """A length or count is above the allowed maximum."""


class DomainViolationError(SerializationError, ValueError):
    """The data does not respect the domain of the type being (de)serialized."""


class InvalidBoolError(DomainViolationError):
    """A boolean byte that is neither 0 nor 1."""


class UnknownVariantError(DomainViolationError):
    """An enum ordinal that is not declared by the enum type."""


class BadUnionIndexError(DomainViolationError):
    """A union selector that does not match any declared arm, or an inconsistent discriminant table.

    This always points to a mismatch between the declared union and whoever produced the bytes (or to a broken
    declaration), retrying with the same declaration will never succeed.
    """


class InvalidPaddingError(DomainViolationError):
    """Padding bytes that are not zero."""


class ValueRangeError(DomainViolationError):
    """A value that does not fit in the wire width of its type."""


class TextEncodingError(DomainViolationError):
    """Text that cannot be represented in the configured text encoding."""


class UnsupportedShapeError(SerializationError, TypeError):
    """The shape is valid XDR but this engine does not implement it (optionals, opaque data, maps, ...)."""
