"""
Printf style preprocessing of binstr documents.

The document is first rendered with the % operator and then packed. This makes it possible to keep a static template and inject values into it:

>>> pack_formatted('0b1 {6}%d 0b1',(0x15,))
(b'\\xab', 8)
>>> buf = bytearray(1)
>>> parse_formatted('0b1 {6}%d 0b1',buf,args=(0x3f,))
8
>>> buf
bytearray(b'\\xff')
>>> parse_formatted('0b1 {6}%d 0b1',buf,args=())
-1
"""
import logarhythm
from .errors import BinstrError, FormatError, FormatOverflowError
from .pattern import DEFAULT_CAPACITY, pack, pack_into

FORMAT_BUFFER_SIZE = 2048

logger = logarhythm.getLogger('binstr.formatted')
logger.format = logarhythm.build_format(time=None,level=False)

def render(format_text,args=(),buffer_size=FORMAT_BUFFER_SIZE):
    """
    Renders format_text % args. args may be a tuple, a single value or a mapping (for %(name)d style conversions).
    Raises FormatError if the conversion fails and FormatOverflowError if the result is longer than buffer_size characters.

    >>> render('{%d}%d',(13,0))
    '{13}0'
    >>> render('{8}%(ttl)d',{'ttl':255})
    '{8}255'
    >>> render('*%d*0x00',(4000,),buffer_size=8)
    Traceback (most recent call last):
        ...
    binstr.errors.FormatOverflowError: Rendered text is 10 characters long, format buffer holds 8
    """
    try:
        text = format_text % args
    except (TypeError,ValueError,KeyError,OverflowError) as e:
        raise FormatError('Unable to render %s: %s' % (repr(format_text),e))
    if len(text) > buffer_size:
        raise FormatOverflowError('Rendered text is %d characters long, format buffer holds %d' % (len(text),buffer_size))
    logger.debug('rendered: %s' % text)
    return text

def pack_formatted_into(format_text,buf,capacity=None,args=(),buffer_size=FORMAT_BUFFER_SIZE):
    """
    Renders the document and packs it into buf. Returns the number of bits written, raises BinstrError on failure.
    """
    return pack_into(render(format_text,args,buffer_size),buf,capacity)

def parse_formatted(format_text,buf,capacity=None,args=(),buffer_size=FORMAT_BUFFER_SIZE):
    """
    Same as pack_formatted_into() except that any failure, rendering included, returns -1 instead of raising.
    """
    try:
        return pack_formatted_into(format_text,buf,capacity,args,buffer_size)
    except BinstrError as e:
        logger.debug('parse_formatted failed: %s' % e)
        return -1

def pack_formatted(format_text,args=(),capacity=DEFAULT_CAPACITY,buffer_size=FORMAT_BUFFER_SIZE):
    """
    Renders the document and packs it into a private buffer. Returns (bytes_data, num_bits) like binstr.pattern.pack().
    """
    return pack(render(format_text,args,buffer_size),capacity)
