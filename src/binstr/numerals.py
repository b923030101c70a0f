"""
The purpose of this module is to turn a single numeral token into the bits it stands for.

The base of a numeral is determined from its prefix:
    0x<hex digits>   = hexadecimal, 4 bits per digit
    0b<bin digits>   = binary, 1 bit per digit
    0<octal digits>  = octal, 3 bits per digit (the digits start right after the leading 0)
    anything else    = decimal, parsed as an unsigned 64 bit integer

Hex, binary and octal numerals have a natural length (number of digits times bits per digit) and no upper limit on their size.
Decimal numerals have no natural length, so they always need an explicit length of at most 64 bits.

An explicit length longer than the natural length prepends zero bits.
An explicit length shorter than the natural length drops bits from the most significant end, which may cut a digit in half.
Either way the result is the low-order bits of the numeral's value.

>>> list(decode_numeral('0x2ffff',17))
[(0, 1), (15, 4), (15, 4), (15, 4), (15, 4)]
>>> list(decode_numeral('0b111',8))
[(0, 5), (1, 1), (1, 1), (1, 1)]
>>> list(decode_numeral('305419896',12))
[(103, 8), (8, 4)]
"""
import re, string
from enum import Enum
import logarhythm
from .bit_utils import uint_chunks, rmask_uint
from .errors import DigitError, DecimalLengthError

DECIMAL_MAX_BITS = 64
UINT64_MAX = (1<<64)-1

logger = logarhythm.getLogger('binstr.numerals')
logger.format = logarhythm.build_format(time=None,level=False)

class Base(Enum):
    """
    This enumeration defines the numeral bases understood by binstr
    """
    HEX = 1
    OCT = 2
    BIN = 3
    DEC = 4

DIGIT_BITS = {
        Base.HEX:4,
        Base.OCT:3,
        Base.BIN:1,
        }
DIGIT_SETS = {
        Base.HEX:frozenset(string.hexdigits),
        Base.OCT:frozenset(string.octdigits),
        Base.BIN:frozenset('01'),
        }
decimal_parse = re.compile('([+-]?)([0-9]+)')

def numeral_base(numeral):
    """
    Returns (base, start_index) where start_index is the position of the first digit within the numeral.

    >>> numeral_base('0xcafe')
    (<Base.HEX: 1>, 2)
    >>> numeral_base('07070')
    (<Base.OCT: 2>, 1)
    >>> numeral_base('0b10')
    (<Base.BIN: 3>, 2)
    >>> numeral_base('0')
    (<Base.DEC: 4>, 0)
    >>> numeral_base('08')
    (<Base.DEC: 4>, 0)
    """
    if len(numeral) > 1 and numeral[0] == '0':
        if numeral[1] == 'x':
            return Base.HEX,2
        elif numeral[1] == 'b':
            return Base.BIN,2
        elif numeral[1] in string.octdigits:
            return Base.OCT,1
    return Base.DEC,0

def natural_length(numeral):
    """
    Returns the number of bits a numeral occupies when no explicit length is given, or None for decimal numerals.

    >>> natural_length('0x012345678')
    36
    >>> natural_length('077777777')
    24
    >>> natural_length('1500') is None
    True
    """
    base,start = numeral_base(numeral)
    if base == Base.DEC:
        return None
    return (len(numeral)-start)*DIGIT_BITS[base]

def parse_uint64(numeral):
    """
    Parses a decimal numeral the way C's strtoull does: values above 2**64-1 saturate and a leading minus sign wraps modulo 2**64.

    >>> parse_uint64('18446744073709551615') == UINT64_MAX
    True
    >>> parse_uint64('36893488147419103231') == UINT64_MAX
    True
    >>> hex(parse_uint64('-1'))
    '0xffffffffffffffff'
    >>> parse_uint64('12ab')
    Traceback (most recent call last):
        ...
    binstr.errors.DigitError: Invalid decimal numeral: '12ab'
    """
    m = decimal_parse.fullmatch(numeral)
    if m is None:
        raise DigitError('Invalid decimal numeral: %s' % repr(numeral))
    sign,digits = m.groups()
    value = int(digits)
    if value > UINT64_MAX:
        return UINT64_MAX
    if sign == '-':
        value = -value & UINT64_MAX
    return value

def decode_numeral(numeral,bitlen=-1):
    """
    Yields the (value, length) chunks, at most 8 bits each, that make up the numeral reconciled to bitlen bits.
    bitlen = -1 means use the natural length.

    Errors are raised lazily, when the offending digit is reached, so chunks before it have already been yielded.
    """
    base,start = numeral_base(numeral)
    if base == Base.DEC:
        if bitlen == -1:
            raise DecimalLengthError('Decimal numerals require an explicit length: %s' % repr(numeral))
        if bitlen < 0 or bitlen > DECIMAL_MAX_BITS:
            raise DecimalLengthError('Decimal numerals must be between 0 and %d bits long: {%d}%s' % (DECIMAL_MAX_BITS,bitlen,numeral))
        value = parse_uint64(numeral)
        yield from uint_chunks(value,bitlen)
        return

    digit_bits = DIGIT_BITS[base]
    valid_digits = DIGIT_SETS[base]
    digits = numeral[start:]
    actual_bitlen = len(digits)*digit_bits
    if bitlen == -1:
        bitlen = actual_bitlen
    elif bitlen > actual_bitlen:
        yield from uint_chunks(0,bitlen-actual_bitlen)
    drop_bits = max(actual_bitlen-bitlen,0)
    for digit in digits:
        if digit not in valid_digits:
            raise DigitError('Invalid %s digit %s in %s' % (base.name.lower(),repr(digit),repr(numeral)))
        num_bits = digit_bits
        if drop_bits > 0:
            #drop part or all of the digit
            dropped = min(digit_bits,drop_bits)
            num_bits -= dropped
            drop_bits -= dropped
        if num_bits > 0:
            yield (rmask_uint(num_bits,int(digit,16)),num_bits)

def write_numeral(bit_buffer,offset,numeral,bitlen=-1):
    """
    Writes the numeral into bit_buffer starting at bit offset and returns the number of bits written.
    """
    pos = offset
    for value,num_bits in decode_numeral(numeral,bitlen):
        bit_buffer.write_bits(pos,value,num_bits)
        pos += num_bits
    logger.debug('%s {%d} -> %d bits at offset %d' % (numeral,bitlen,pos-offset,offset))
    return pos - offset
