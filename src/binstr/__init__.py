"""
Key Ideas:
    (1) binstr is a small language to define binary strings (bit sequences) as text, using a combination of hexadecimal, octal, binary and decimal numerals.
    (2) A document is a sequence of lines. Lines are trimmed, blank lines are ignored, and any indentation is allowed.
    (3) An item is a whitespace delimited token within a line. Items are packed back to back into one bit stream, MSB first.
    (4) A comment is any item starting with "#". It and everything after it on the same line are ignored.
    (5) The bit cursor is the number of bits packed so far. It is not necessarily a multiple of 8.
    (6) When a document is finished, the bits after the cursor in the last byte are set to zero.

Item grammar:
    item    = [*<repeat>*][{<length>}]<numeral>
    numeral = 0x<hex digits>      4 bits per digit
            | 0b<binary digits>   1 bit per digit
            | 0<octal digits>     3 bits per digit
            | <decimal digits>    requires {<length>}, at most 64 bits

    *<repeat>* = Write the numeral <repeat> times. Zero or a negative count writes nothing.
    {<length>} = Write exactly <length> bits. Longer than the numeral: zeros are prepended. Shorter: the most significant bits are dropped.

    Hex, binary and octal numerals may be arbitrarily long. Decimal numerals are parsed as unsigned 64 bit integers.

For example, an IPv4 header can be written as follows:

>>> IP_HEADER = '''
...     # version header_length service_type total_length
...     {4}0x4 {4}5 0x00 {16}1500
...     # identification evil dnf mf offset
...     {16}0xcafe 0b0 0b0 0b0 {13}0
...     # ttl protocol checksum
...     {8}255 {8}17 {16}0
...     # source addr
...     {32}0x12345678
...     # dst addr
...     {32}0x9abcdef0
... '''
>>> buf = bytearray(1024)
>>> parse(IP_HEADER,buf)
160
>>> bytes(buf[:20]).hex()
'450005dccafe0000ff110000123456789abcdef0'

API:
    parse(text,buf,capacity=None)
        Packs text into buf (a bytearray or writable memoryview). capacity is the number of writable bytes, len(buf) by default.
        Returns the number of bits written, or -1 if the document could not be packed.
        Bits written before a failure are left in the buffer.

    parse_formatted(format_text,buf,capacity=None,args=())
        Renders format_text % args first (at most FORMAT_BUFFER_SIZE characters), then behaves like parse().

    pack_into(text,buf,capacity=None) / pack_formatted_into(...)
        Same as above but failures raise a BinstrError subclass (CapacityError, DigitError, DecimalLengthError, FormatError, FormatOverflowError).

    pack(text,capacity=DEFAULT_CAPACITY) / pack_formatted(format_text,args=(),...)
        Packs into a private buffer and returns (bytes_data, num_bits).

    Packer(buf=None,capacity=None)
        Incremental packing: packer(text) can be called repeatedly and continues at the same bit cursor. packer.finalize() pads and returns the bit count.

Logging:
    Each module logs its progress at debug level through logarhythm. To see it:
        import logarhythm
        logarhythm.set_auto_debug(True)
"""
from .errors import BinstrError, CapacityError, DigitError, DecimalLengthError, FormatError, FormatOverflowError
from .bit_buffer import BitBuffer
from .numerals import Base, DECIMAL_MAX_BITS, numeral_base, natural_length, decode_numeral, write_numeral
from .pattern import DEFAULT_CAPACITY, Packer, item_parse, pattern_parse, pack_into, parse, pack
from .formatted import FORMAT_BUFFER_SIZE, render, pack_formatted_into, parse_formatted, pack_formatted

__version__ = '0.0.1'
