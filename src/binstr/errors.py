"""
Exceptions raised while packing a binstr document.

Every failure derives from BinstrError so that the sentinel entry points (parse, parse_formatted) can catch a single type.
The driver fills in tok and line_number as the exception travels up from the numeral decoder.
"""

class BinstrError(Exception):
    def __init__(self,msg,tok=None,line_number=None):
        super().__init__(msg)
        self.msg = msg
        self.tok = tok
        self.line_number = line_number
    def __str__(self):
        if self.line_number is None:
            return self.msg
        return 'line %d: %s: %s' % (self.line_number,repr(self.tok),self.msg)

class CapacityError(BinstrError):pass
class DigitError(BinstrError):pass
class DecimalLengthError(BinstrError):pass
class FormatError(BinstrError):pass
class FormatOverflowError(FormatError):pass
