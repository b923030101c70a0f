"""
The purpose of this module is to provide BitBuffer, a bounds-checked bit level view over a caller owned byte buffer.

Bits are addressed MSB first: bit offset 0 is the most significant bit of byte 0, bit offset 8 is the most significant bit of byte 1, and so on.
BitBuffer never grows or reallocates the underlying buffer. Every write is checked against the capacity before anything is modified.
"""

from .bit_utils import ones_block, rmask_uint
from .errors import CapacityError

class BitBuffer(object):
    """
    Wraps a bytearray (or writable memoryview) and a capacity in bytes.

    write_bits() is the only way bits get into the buffer. Bits outside of the written span are left untouched.

    >>> b = BitBuffer(bytearray(2))
    >>> b.write_bits(6,0b1011,4)
    >>> bytes(b)
    b'\\x02\\xc0'
    >>> len(b)
    16
    >>> b.write_bits(14,0b111,3)
    Traceback (most recent call last):
        ...
    binstr.errors.CapacityError: Writing 3 bits at bit offset 14 exceeds buffer capacity of 16 bits
    """
    def __init__(self,buf=None,capacity=None):
        """
        buf is the destination buffer. If it is None, a zeroed bytearray of capacity bytes is created.
        capacity is the number of bytes of buf that may be written. It defaults to len(buf) and may not exceed it.
        """
        if buf is None:
            buf = bytearray(capacity or 0)
        elif isinstance(buf,memoryview):
            if buf.readonly:
                raise TypeError('BitBuffer requires a writable buffer, memoryview is read-only')
            buf = buf.cast('B')
        elif not isinstance(buf,bytearray):
            raise TypeError('BitBuffer requires a bytearray or writable memoryview, not %s' % repr(type(buf)))
        if capacity is None:
            capacity = len(buf)
        if capacity < 0 or capacity > len(buf):
            raise ValueError('capacity must be between 0 and %d bytes: %d' % (len(buf),capacity))
        self.buf = buf
        self.capacity = capacity

    @property
    def capacity_bits(self):
        return self.capacity*8

    def __len__(self):
        """
        Returns the capacity in bits.
        """
        return self.capacity_bits

    def __bytes__(self):
        return bytes(self.buf[:self.capacity])

    def check(self,offset,length):
        """
        Raises CapacityError if length bits starting at bit offset do not fit within the capacity.
        """
        if offset < 0:
            raise ValueError('bit offset must be non-negative: %d' % offset)
        if offset + length > self.capacity_bits:
            raise CapacityError('Writing %d bits at bit offset %d exceeds buffer capacity of %d bits' % (length,offset,self.capacity_bits))

    def write_bits(self,offset,value,length):
        """
        Writes the length LSBs of value at bit offset, most significant bit first.
        length must be between 0 and 8 inclusive. A span that crosses a byte boundary is split in two: the high part goes to the earlier byte.
        """
        if length < 0 or length > 8:
            raise ValueError('write_bits() writes between 0 and 8 bits at a time: %d' % length)
        if length == 0:
            return
        self.check(offset,length)
        value = rmask_uint(length,value)
        byte_pos,bit_pos = divmod(offset,8)
        lshift = 8 - length - bit_pos
        if lshift >= 0:
            self._merge(byte_pos,value << lshift,ones_block(length,lshift))
        else:
            #span straddles two bytes
            rshift = -lshift
            self._merge(byte_pos,value >> rshift,ones_block(length-rshift))
            self._merge(byte_pos+1,value << (8-rshift),ones_block(rshift,8-rshift))

    def _merge(self,byte_pos,bits,mask):
        self.buf[byte_pos] = (self.buf[byte_pos] & ~mask & 0xff) | (bits & mask)

    def pad(self,offset):
        """
        Zeros the bits from offset up to the next byte boundary. Does nothing if offset is already on a byte boundary.
        Returns the number of padding bits written.

        >>> b = BitBuffer(bytearray(b'\\xff'))
        >>> b.pad(3)
        5
        >>> bytes(b)
        b'\\xe0'
        >>> b.pad(8)
        0
        """
        num_bits = (8 - offset % 8) % 8
        self.write_bits(offset,0,num_bits)
        return num_bits
