"""
The purpose of this module is to interpret binstr documents and pack them into a byte buffer.

A document is a sequence of lines. Each line is trimmed and split on single spaces into items.
An item starting with "#" turns the rest of its line into a comment.
Every other item has the form:

    [*<repeat>*][{<length>}]<numeral>

The repeat prefix writes the numeral that many times (a count of zero or less writes nothing).
The length prefix forces the numeral to exactly that many bits (see binstr.numerals).

All items are packed back to back, MSB first, into one bit stream. When the document is finished the last partial byte is zero padded.

>>> buf = bytearray(4)
>>> parse('{7}0b10101 {9}07070',buf)
16
>>> bytes(buf[:2])
b'*8'
>>> parse('{65}36893488147419103231',buf)
-1
"""
import re
import logarhythm
from .bit_buffer import BitBuffer
from .errors import BinstrError
from .numerals import write_numeral

DEFAULT_CAPACITY = 1024
BLANKS = ' \t\r\n'

logger = logarhythm.getLogger('binstr.pattern')
logger.format = logarhythm.build_format(time=None,level=False)

#sscanf style "%d": optional blanks, optional sign, digits
repeat_parse = re.compile('\\*[ \\t\\r\\n\\v\\f]*([+-]?[0-9]+)(\\*?)')
length_parse = re.compile('\\{[ \\t\\r\\n\\v\\f]*([+-]?[0-9]+)(\\}?)')

def item_parse(tok):
    """
    Splits an item into (repeat, bitlen, numeral). bitlen is -1 when no length prefix is present.

    A prefix whose number is missing counts as absent. A prefix whose number is present but whose closing character is missing
    still sets the repeat/length, but is not removed from the numeral.

    >>> item_parse('*8*{7}0x7f')
    (8, 7, '0x7f')
    >>> item_parse('0x33')
    (1, -1, '0x33')
    >>> item_parse('*-1*0xff')
    (-1, -1, '0xff')
    >>> item_parse('*x*0xff')
    (1, -1, '*x*0xff')
    >>> item_parse('{6}%d')
    (1, 6, '%d')
    >>> item_parse('*0')
    (0, -1, '*0')
    """
    pos = 0
    repeat = 1
    m = repeat_parse.match(tok)
    if m is not None:
        repeat = int(m.group(1))
        if m.group(2):
            pos = m.end(0)
    bitlen = -1
    m = length_parse.match(tok,pos)
    if m is not None:
        bitlen = int(m.group(1))
        if m.group(2):
            pos = m.end(0)
    return repeat,bitlen,tok[pos:]

def pattern_parse(text):
    """
    Interprets a binstr document into a sequence of items.

    Yields tuples of (line_number, tok, repeat, bitlen, numeral). Line numbers start at 1.

    >>> list(pattern_parse('''
    ...     # comment line
    ...     0b1 {6}0x55 0b1  # trailing comment 0xff
    ... '''))
    [(3, '0b1', 1, -1, '0b1'), (3, '{6}0x55', 1, 6, '0x55'), (3, '0b1', 1, -1, '0b1')]
    """
    if isinstance(text,(bytes,bytearray)):
        text = text.decode('latin-1')
    logger.debug('document started')
    for line_number,line in enumerate(text.split('\n'),1):
        line = line.strip(BLANKS)
        if not line:
            continue
        items = line.split(' ')
        for i,tok in enumerate(items):
            if not tok:
                continue
            if tok[0] == '#':
                logger.debug('Comment: %s' % ' '.join(items[i:]))
                break
            repeat,bitlen,numeral = item_parse(tok)
            logger.debug('yield line %d %s: repeat=%d bitlen=%d numeral=%s' % (line_number,tok,repeat,bitlen,numeral))
            yield (line_number,tok,repeat,bitlen,numeral)
    logger.debug('document completed')

class Packer(object):
    """
    Packs binstr documents into a BitBuffer.

    buf may be a bytearray, a writable memoryview or a BitBuffer. A BitBuffer already carries its capacity, so capacity must be left out then.
    The packer keeps its bit cursor between calls, so a document can be fed in pieces.
    finalize() zero pads the last partial byte and returns the total number of bits written.

    >>> packer = Packer(bytearray(4))
    >>> packer('0x4 0x4')
    8
    >>> packer('0b1111 # nibble')
    4
    >>> packer.tell()
    12
    >>> packer.finalize()
    12
    >>> bytes(packer)
    b'D\\xf0'
    """
    def __init__(self,buf=None,capacity=None):
        if isinstance(buf,BitBuffer):
            if capacity is not None:
                raise ValueError('capacity cannot be given with a BitBuffer, its capacity is already set')
            self.bit_buffer = buf
        else:
            self.bit_buffer = BitBuffer(buf,capacity)
        self.pos = 0
        self.tok = None
        self.logger = logarhythm.getLogger('Packer')
        self.logger.format = logarhythm.build_format(time=None,level=False)

    def __call__(self,text):
        """
        Packs a document at the current bit cursor and returns the number of bits it added.
        Failures raise a BinstrError tagged with the offending token and line number. Bits written before the failure are left in place.
        """
        start = self.pos
        for line_number,tok,repeat,bitlen,numeral in pattern_parse(text):
            self.tok = tok
            try:
                self.handle_value(repeat,bitlen,numeral)
            except BinstrError as e:
                if e.line_number is None:
                    e.tok = tok
                    e.line_number = line_number
                raise
        return self.pos - start

    def handle_value(self,repeat,bitlen,numeral):
        for _ in range(repeat):
            num_bits = write_numeral(self.bit_buffer,self.pos,numeral,bitlen)
            if num_bits == 0:
                #the remaining repetitions would write nothing as well
                break
            self.pos += num_bits
        self.logger.debug('%s -> bit cursor %d' % (self.tok,self.pos))

    def tell(self):
        """
        Returns the bit cursor i.e. the number of bits packed so far
        """
        return self.pos

    def finalize(self):
        self.bit_buffer.pad(self.pos)
        return self.pos

    def __bytes__(self):
        """
        Returns the bytes holding the packed bits so far
        """
        return bytes(self.bit_buffer)[:(self.pos+7)//8]

def pack_into(text,buf,capacity=None):
    """
    Packs a document into buf and returns the number of bits written. Raises BinstrError on failure.
    capacity is the number of bytes of buf that may be written. It defaults to len(buf).
    """
    packer = Packer(buf,capacity)
    packer(text)
    return packer.finalize()

def parse(text,buf,capacity=None):
    """
    Same as pack_into() except that any failure of the document returns -1 instead of raising.
    """
    try:
        return pack_into(text,buf,capacity)
    except BinstrError as e:
        logger.debug('parse failed: %s' % e)
        return -1

def pack(text,capacity=DEFAULT_CAPACITY):
    """
    Packs a document into a private buffer of capacity bytes.
    Returns (bytes_data, num_bits) where bytes_data holds exactly the bytes touched by the num_bits bits.

    >>> pack('{4}0x4 {4}5 0x00 {16}1500')
    (b'E\\x00\\x05\\xdc', 32)
    >>> pack('0b10')
    (b'\\x80', 2)
    """
    packer = Packer(None,capacity)
    packer(text)
    num_bits = packer.finalize()
    return bytes(packer),num_bits
