"""
This module provides utility functions for working with bits in the (unsigned integer value, number of bits) representation.

Chunks are always produced most significant first, which is the order in which binstr packs bits into bytes.
"""

def ones_block(length,lshift=0):
    """
    Returns an unsigned integer with length consecutive 1 bits, shifted left by lshift.

    >>> ones_block(3)
    7
    >>> bin(ones_block(2,6))
    '0b11000000'
    >>> ones_block(0)
    0
    """
    return ((1<<length)-1)<<lshift

def rmask_uint(num_mask_bits,value):
    """
    This function applies a right-justified mask of a specified number of bits to an unsigned integer i.e. keeps only the num_mask_bits LSBs.

    >>> rmask_uint(3,0xff)
    7
    >>> hex(rmask_uint(17,0x2ffff))
    '0xffff'
    """
    return ones_block(num_mask_bits) & value

def uint_chunks(value,num_bits,chunk_bits=8):
    """
    Slices the num_bits LSBs of an unsigned integer into (value, length) chunks of at most chunk_bits bits, starting from the most significant end.
    Only the last chunk may be shorter than chunk_bits.

    >>> list(uint_chunks(0x12345678,31))
    [(36, 8), (104, 8), (172, 8), (120, 7)]
    >>> list(uint_chunks(0b101,3))
    [(5, 3)]
    >>> list(uint_chunks(0xffff,0))
    []
    """
    remaining = num_bits
    while remaining > 0:
        n = min(remaining,chunk_bits)
        remaining -= n
        yield ((value >> remaining) & ones_block(n), n)
