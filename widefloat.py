#
# Floating point numbers with the precision of a double and an almost unbounded exponent
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import math
import re
import sys
import threading
from collections import namedtuple
from enum import IntEnum

import attr

__all__ = ('Context', 'DefaultContext', 'get_context', 'set_context', 'local_context',
           'DefaultDecFormat', 'Dec_g_Format', 'TextFormat', 'Compare',
           'WideFloat', 'WideTuple', 'fix',
           'from_float', 'from_int', 'from_string', 'from_tuple', 'from_value',
           'ZERO', 'ONE', 'ZERO_EXPONENT', 'MAX_EXPONENT', 'SIGNIFICAND_BITS',
           'ADD_CUTOFF', 'PROPORTION_CUTOFF')


# Bits of precision after the point of a significand; that of an IEEE double
SIGNIFICAND_BITS = 52

# Every zero is stored with this exponent.  It lies below any supported exponent so that
# zero compares less than all positive values without special-casing.
ZERO_EXPONENT = -(1 << 63)
MAX_EXPONENT = 1 << 62

# When exponents differ by at least this much the smaller addend is lost entirely
ADD_CUTOFF = 64
# When exponents differ by at least this much proportion() returns 0 or 1
PROPORTION_CUTOFF = 60


# Three-way result of the compare() operation.  There are no NaNs so nothing is unordered.
class Compare(IntEnum):
    LESS_THAN = 0
    EQUAL = 1
    GREATER_THAN = 2


WideTuple = namedtuple('WideTuple', 'exponent significand')


@attr.s(slots=True, kw_only=True, eq=False)
class TextFormat:
    '''Controls the output of conversion to decimal strings.'''

    # The minimum number of digits to output in the exponent.  Defaults to 1.  0 suppresses
    # the exponent by adding leading or trailing zeroes to the significand as needed (as
    # for the printf 'f' format specifier in the C programming language).  If negative,
    # apply the rule for the printf 'g' format specifier to decide whether to display an
    # exponent or not, in which case the minimum number of digits in the exponent is the
    # absolute value.  Beware that suppressing the exponent of a huge number gives a huge
    # string.
    exp_digits = attr.ib(default=1)
    # If True positive exponents display a '+'.
    force_exp_sign = attr.ib(default=False)
    # If True, non-negative numbers are preceded with a '+'.
    force_leading_sign = attr.ib(default=False)
    # If True, display a decimal point followed by a zero even though none is needed.  For
    # example, "5" and "1e2" would display as "5.0" and "1.0e2".
    force_point = attr.ib(default=False)
    # If True, the exponent character is in upper case.
    upper_case = attr.ib(default=False)
    # If True, trailing insignificant zeroes are stripped
    rstrip_zeroes = attr.ib(default=False)

    def exponent_str(self, exponent):
        '''Return the formatted exponent.'''
        sign = '-' if exponent < 0 else '+' if self.force_exp_sign else ''
        main = str(abs(exponent))
        zeroes = '0' * (abs(self.exp_digits) - len(main))
        return f'{sign}{zeroes}{main}'

    def format_decimal(self, sign, exponent, digits, precision=None):
        '''sign is True if the number is negative.  digits is a string of significant digits of
        a number converted to decimal.  exponent is the exponent of the leading digit, i.e.
        the decimal point appears exponent digits after the leading digit.
        '''
        precision = precision or len(digits)
        assert precision > 0

        if self.rstrip_zeroes:
            digits = digits.rstrip('0') or '0'

        parts = []
        if sign:
            parts.append('-')
        elif self.force_leading_sign:
            parts.append('+')

        exp_digits = self.exp_digits
        if exp_digits < 0:
            # Apply the fprintf 'g' format specifier rule
            if precision > exponent >= -4:
                exp_digits = 0

        if exp_digits:
            if len(digits) > 1:
                parts.extend((digits[0], '.', digits[1:]))
            elif self.force_point:
                parts.extend((digits, '.0'))
            else:
                parts.append(digits)
            parts.append('e')
            parts.append(self.exponent_str(exponent))
        else:
            point = exponent + 1
            if point <= 0:
                parts.extend(('0.', '0' * -point, digits))
            else:
                if point > len(digits):
                    digits += (point - len(digits)) * '0'
                if point < len(digits):
                    parts.extend((digits[:point], '.', digits[point:]))
                elif self.force_point:
                    parts.extend((digits, '.0'))
                else:
                    parts.append(digits)

        result = ''.join(parts)
        if self.upper_case:
            result = result.upper()

        return result


# Default format for decimal output, e.g. 1.5000000e100
DefaultDecFormat = TextFormat()

# This instance is intended to match the output of Python's **g** format specifier when
# the specified precisions are the same.
Dec_g_Format = TextFormat(exp_digits=-2, force_exp_sign=True, rstrip_zeroes=True)


class Context:
    '''The execution context for operations.  Carries the number of significant digits and
    the text format used when converting to decimal strings.'''

    __slots__ = ('digits', 'text_format')

    def __init__(self, *, digits=8, text_format=None):
        '''digits is the default number of significant digits output by to_string().
        text_format is a TextFormat instance; if None DefaultDecFormat is used.
        '''
        self.digits = digits
        self.text_format = text_format or DefaultDecFormat

    def copy(self):
        '''Return a copy of the context.'''
        return Context(digits=self.digits, text_format=self.text_format)

    def __repr__(self):
        return f'<Context digits={self.digits} text_format={self.text_format!r}>'


#
# Normalization
#

# (bits, threshold, scale) triples.  Each step of the cascade halves the range of exponents
# the magnitude can lie in, so ten steps cover every finite double.
_SHRINK_STEPS = tuple((bits, 2.0 ** bits, 2.0 ** -bits)
                      for bits in (512, 256, 128, 64, 32, 16, 8, 4, 2, 1))
_GROW_STEPS = tuple((bits, 2.0 ** -bits, 2.0 ** bits)
                    for bits in (512, 256, 128, 64, 32, 16, 8, 4, 2, 1))
# (bit, scale) pairs to scale down by 2^-de for de < ADD_CUTOFF
_SCALE_DOWN_STEPS = tuple((bit, 2.0 ** -bit) for bit in (32, 16, 8, 4, 2, 1))
_TWO_POW_512 = 2.0 ** 512
_TWO_POW_M1024 = 2.0 ** -1024
LOG10_2 = math.log10(2)


def fix(exponent, significand):
    '''Return the canonical WideFloat equal to significand * 2^exponent.  significand can be
    any finite float.

    Rather than calling log2, the magnitude is brought into [1, 2) by a cascade of
    comparisons against 2^512, 2^256, ..., 2^1 (or their reciprocals), multiplying by the
    reciprocal of each threshold crossed.  Every multiplication is by a power of two and so
    exact, and there are never more than eleven of them.
    '''
    if not significand:
        return ZERO

    magnitude = abs(significand)
    if magnitude >= 2.0:
        for bits, threshold, scale in _SHRINK_STEPS:
            if magnitude >= threshold:
                magnitude *= scale
                exponent += bits
    elif magnitude < 1.0:
        if magnitude < _TWO_POW_M1024:
            # A deep subnormal.  2^1024 is not a finite double so scale in two steps.
            magnitude = magnitude * _TWO_POW_512 * _TWO_POW_512
            exponent -= 1024
        for bits, threshold, scale in _GROW_STEPS:
            if magnitude < threshold:
                magnitude *= scale
                exponent -= bits
        # The cascade leaves the magnitude in [0.5, 1)
        magnitude += magnitude
        exponent -= 1

    if significand < 0:
        magnitude = -magnitude
    return WideFloat._make((exponent, magnitude))


class WideFloat(namedtuple('WideFloat', 'exponent significand')):
    '''Internal Representation
       -----------------------

    A value is a pair of a Python integer exponent and a float significand, and represents

            significand * 2^exponent.

    The pair is always canonical: either the significand lies in [1, 2) in magnitude, or
    the value is zero and is stored as (ZERO_EXPONENT, 0.0).  Every value therefore has
    exactly one representation, and there is no negative zero.

    Precision is that of a double; the exponent is limited only by MAX_EXPONENT.  NaNs and
    infinities are not supported and behaviour with them is undefined.

    Both fields are read-only.  All construction from outside goes through fix(); the
    operations below that can prove their result canonical build it with _make().
    '''

    __slots__ = ()

    def __new__(cls, exponent, significand):
        '''Create the canonical value significand * 2^exponent.  The significand need not be
        normalized.
        '''
        if not isinstance(exponent, int):
            raise TypeError('exponent must be an integer')
        if isinstance(significand, int):
            return from_int(significand).scaleb(exponent)
        if not isinstance(significand, float):
            raise TypeError('significand must be a float or an integer')
        return fix(exponent, significand)

    def _replace(self, **kwargs):
        '''Return a copy with the given fields replaced, normalized.'''
        return from_tuple(super()._replace(**kwargs))

    ##
    ## Non-computational operations
    ##

    def as_tuple(self):
        '''Returns a WideTuple: (exponent, significand).'''
        return WideTuple(self.exponent, self.significand)

    def is_zero(self):
        '''Return True if the value is zero.'''
        return not self.significand

    def is_negative(self):
        '''Return True if the value is less than zero.'''
        return self.significand < 0

    def as_integer_ratio(self):
        '''Return a pair (n, d) of integers that represent the value as a fraction in lowest
        terms and with a positive denominator.  The integers can be enormous.'''
        if not self.significand:
            return (0, 1)
        # d is a power of two and n is odd unless d is 1
        n, d = self.significand.as_integer_ratio()
        shift = self.exponent - (d.bit_length() - 1)
        if shift >= 0:
            return n << shift, 1
        return n, 1 << -shift

    def log2(self):
        '''Return the base-2 logarithm of a positive value as a float.'''
        if self.significand <= 0:
            raise ValueError('math domain error')
        return self.exponent + math.log2(self.significand)

    def log10(self):
        '''Return the base-10 logarithm of a positive value as a float.'''
        if self.significand <= 0:
            raise ValueError('math domain error')
        return self.exponent * LOG10_2 + math.log10(self.significand)

    ##
    ## Quiet computational operations
    ##

    def copy_abs(self):
        '''Return this value with a non-negative significand.'''
        if self.significand < 0:
            return WideFloat._make((self.exponent, -self.significand))
        return self

    def copy_negate(self):
        '''Return this value with the opposite sign.  Zero is its own negation.'''
        if not self.significand:
            return self
        return WideFloat._make((self.exponent, -self.significand))

    def scaleb(self, N):
        '''Return x * 2^N for integral values N.  This is exact.'''
        if not isinstance(N, int):
            raise TypeError('scaleb requires an integer')
        if not self.significand:
            return self
        return WideFloat._make((self.exponent + N, self.significand))

    ##
    ## Arithmetic
    ##

    def add(self, rhs):
        '''Return the sum of this value and RHS.'''
        if not rhs.significand:
            return self
        if not self.significand:
            return rhs

        if self.exponent >= rhs.exponent:
            large, small = self, rhs
        else:
            large, small = rhs, self
        exponent_diff = large.exponent - small.exponent

        if exponent_diff == 0:
            # Like-signed significands sum to a magnitude in [2, 4); halving is exact
            if (large.significand < 0) == (small.significand < 0):
                return WideFloat._make((large.exponent + 1,
                                        (small.significand + large.significand) * 0.5))
        elif exponent_diff >= ADD_CUTOFF:
            return large

        # Align the smaller significand with the larger one.  Each step is exact.
        significand = small.significand
        for bit, scale in _SCALE_DOWN_STEPS:
            if exponent_diff & bit:
                significand *= scale

        return fix(large.exponent, large.significand + significand)

    def subtract(self, rhs):
        '''Return the difference of this value less RHS.'''
        return self.add(rhs.copy_negate())

    def difference_from(self, minuend):
        '''Return MINUEND less this value, so that x.difference_from(y) is y - x.'''
        return minuend.add(self.copy_negate())

    def multiply(self, rhs):
        '''Return the product of this value and RHS.'''
        significand = self.significand * rhs.significand
        if not significand:
            return ZERO
        exponent = self.exponent + rhs.exponent
        # Both significands lie in [1, 2) so their product lies in [1, 4)
        if significand >= 2.0 or significand <= -2.0:
            return WideFloat._make((exponent + 1, significand * 0.5))
        return WideFloat._make((exponent, significand))

    def multiply_float(self, scalar):
        '''Return the product of this value and the float SCALAR, which can have any finite
        magnitude.'''
        if not isinstance(scalar, float):
            raise TypeError('multiply_float requires a float')
        exponent = self.exponent
        # Keep the product of the significands inside the range of a double
        if abs(scalar) > 1.0:
            scalar *= 0.5
            exponent += 1
        return fix(exponent, self.significand * scalar)

    def divide(self, rhs):
        '''Return the quotient of this value divided by RHS.  Division by zero raises the
        ZeroDivisionError of the underlying float division.'''
        # The quotient of the significands lies in (0.5, 2)
        return fix(self.exponent - rhs.exponent, self.significand / rhs.significand)

    divided_by = divide

    def power(self, N):
        '''Return this value raised to the integer power N.'''
        if not isinstance(N, int):
            raise TypeError('power requires an integer exponent')
        result, base = ONE, self
        count = abs(N)
        while count:
            if count & 1:
                result = result.multiply(base)
            count >>= 1
            if count:
                base = base.multiply(base)
        if N < 0:
            return ONE.divide(result)
        return result

    def proportion(self, rhs):
        '''Return this value's share of its sum with RHS, self / (self + rhs), as a float.

        The sum itself is never formed, so this works when neither value nor the sum is
        representable as a float.  If one value is PROPORTION_CUTOFF or more binades
        smaller than the other its contribution cannot be seen in the result, which is then
        exactly 0.0 or 1.0.  Both values zero raises ZeroDivisionError.
        '''
        exponent_diff = self.exponent - rhs.exponent
        lhs_sig, rhs_sig = self.significand, rhs.significand
        if exponent_diff > 0:
            if exponent_diff >= PROPORTION_CUTOFF:
                return 1.0
            rhs_sig = math.ldexp(rhs_sig, -exponent_diff)
        elif exponent_diff < 0:
            if exponent_diff <= -PROPORTION_CUTOFF:
                return 0.0
            lhs_sig = math.ldexp(lhs_sig, exponent_diff)
        return lhs_sig / (lhs_sig + rhs_sig)

    ##
    ## Comparisons
    ##

    def compare(self, rhs):
        '''Return LHS vs RHS as one of the three comparison constants.'''
        lhs_negative = self.significand < 0
        if lhs_negative != (rhs.significand < 0):
            return Compare.LESS_THAN if lhs_negative else Compare.GREATER_THAN

        # Same signs.  Zero has the smallest exponent of all so falls out naturally.
        if self.exponent != rhs.exponent:
            if (self.exponent > rhs.exponent) ^ lhs_negative:
                return Compare.GREATER_THAN
            return Compare.LESS_THAN

        if self.significand == rhs.significand:
            return Compare.EQUAL
        if self.significand > rhs.significand:
            return Compare.GREATER_THAN
        return Compare.LESS_THAN

    def compare_eq(self, rhs):
        return self.compare(rhs) == Compare.EQUAL

    def compare_ne(self, rhs):
        return self.compare(rhs) != Compare.EQUAL

    def compare_gt(self, rhs):
        return self.compare(rhs) == Compare.GREATER_THAN

    def compare_ge(self, rhs):
        return self.compare(rhs) != Compare.LESS_THAN

    def compare_lt(self, rhs):
        return self.compare(rhs) == Compare.LESS_THAN

    def compare_le(self, rhs):
        return self.compare(rhs) != Compare.GREATER_THAN

    is_larger_than = compare_gt
    is_smaller_than = compare_lt
    is_equal_to = compare_eq

    ##
    ## Conversion to text
    ##

    def __repr__(self):
        return f'WideFloat({self.exponent}, {self.significand!r})'

    def __str__(self):
        return self.to_string()

    def to_string(self, digits=None, text_format=None):
        '''Return the value in decimal with DIGITS significant digits, rounded.  If DIGITS or
        TEXT_FORMAT is None the current context's is used.

        The decimal exponent is found with ordinary floating point logarithms, so for
        values with very large exponents the trailing digits are less precise than the
        arithmetic operations.
        '''
        context = get_context()
        if digits is None:
            digits = context.digits
        text_format = text_format or context.text_format
        if not isinstance(digits, int):
            raise TypeError('digits must be an integer')
        if digits < 1:
            raise ValueError('digits must be at least 1')

        if not self.significand:
            return text_format.format_decimal(False, 0, '0' * digits)
        exponent, sig_digits = self._to_decimal_parts(digits)
        return text_format.format_decimal(self.significand < 0, exponent, sig_digits)

    def _to_decimal_parts(self, digits):
        '''Returns a pair (exponent, digits) for non-zero values.'''
        log10 = self.copy_abs().log10()
        exponent = math.floor(log10)
        leading = 10.0 ** (log10 - exponent)
        scaled = round(leading * 10 ** (digits - 1))
        # Rounding can carry into a new leading digit
        if scaled >= 10 ** digits:
            scaled //= 10
            exponent += 1
        return exponent, str(scaled)

    ##
    ## Python support - make it feel like a Python numeric data type.
    ##

    def __abs__(self):
        return self.copy_abs()

    def __neg__(self):
        return self.copy_negate()

    def __pos__(self):
        return self

    def __eq__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.EQUAL

    def __ne__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare != Compare.EQUAL

    def __lt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.LESS_THAN

    def __le__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.LESS_THAN)

    def __ge__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.GREATER_THAN)

    def __gt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.GREATER_THAN

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        '''Raises OverflowError if the value is too large for a float.'''
        return math.ldexp(self.significand, self.exponent)

    def __int__(self):
        '''Truncates towards zero.'''
        n, d = self.as_integer_ratio()
        if n < 0:
            return -(-n // d)
        return n // d

    def __add__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, float):
            return self.multiply_float(other)
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other, modulo=None):
        if modulo is not None or not isinstance(other, int):
            return NotImplemented
        return self.power(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rtruediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __hash__(self):
        '''Python hash.  Must hash equally to other types with the same value.

        Python hashes a rational n / d to n * d^-1 modulo a prime P = 2^k - 1.  Here d is a
        power of two, and 2^k = 1 modulo P, so the exponent can be reduced modulo k and no
        huge integer is ever formed.
        '''
        if not self.significand:
            return 0
        n, d = self.significand.as_integer_ratio()
        exponent = self.exponent - (d.bit_length() - 1)
        result = abs(n) % _HASH_MODULUS * pow(2, exponent % _HASH_BITS, _HASH_MODULUS)
        result %= _HASH_MODULUS
        if n < 0:
            result = -result
        return -2 if result == -1 else result


#
# Conversions into WideFloat
#

def from_float(value):
    '''Return the float value as a WideFloat.  This is exact.'''
    if not isinstance(value, float):
        raise TypeError('from_float requires a float')
    return fix(0, value)


def from_int(value):
    '''Return the integer value as a WideFloat, rounding to nearest if it has more significant
    bits than a double.'''
    if not isinstance(value, int):
        raise TypeError('from_int requires an integer')
    if not value:
        return ZERO
    magnitude = abs(value)
    shift = magnitude.bit_length() - 64
    if shift > 0:
        # Keep 64 bits plus a sticky bit so that conversion to float rounds correctly
        magnitude = (magnitude >> shift) | bool(magnitude & ((1 << shift) - 1))
    else:
        shift = 0
    significand = float(magnitude)
    return fix(shift, -significand if value < 0 else significand)


def from_string(string):
    '''Convert a decimal string to a WideFloat.  The decimal exponent is unbounded.  Values
    with more significant digits than a double holds, or with large exponents, are
    rounded.'''
    if not isinstance(string, str):
        raise TypeError('from_string requires a string')
    match = DEC_FLOAT_REGEX.match(string)
    if match is None:
        raise SyntaxError(f'invalid decimal float: {string}')

    groups = match.groups()
    exponent = int(groups[5]) if groups[4] else 0

    # If a fraction was specified, the integer and fraction parts are in groups[1],
    # groups[2].  If no fraction was specified the integer is in groups[3].
    if groups[1] is None:
        significand = int(groups[3])
    else:
        fraction = groups[2].rstrip('0')
        significand = int((groups[1] + fraction) or '0')
        exponent -= len(fraction)

    if string[0] == '-':
        significand = -significand
    value = from_int(significand)
    if exponent >= 0:
        return value.multiply(_power_of_ten(exponent))
    return value.divide(_power_of_ten(-exponent))


def from_tuple(pair):
    '''Return the canonical WideFloat of an (exponent, significand) pair.'''
    exponent, significand = pair
    return WideFloat(exponent, significand)


def from_value(value):
    '''Return a WideFloat derived from value.  Values of type int, float and string are passed
    on to from_int, from_float and from_string respectively.'''
    if isinstance(value, WideFloat):
        return value
    converter = _converters.get(type(value))
    if not converter:
        raise TypeError(f'from_value cannot convert values of type {type(value)}')
    return converter(value)


def _power_of_ten(n):
    '''Return 10^n for n >= 0.  Correctly rounded unless n is large.'''
    if n <= 350:
        return from_int(10 ** n)
    return _TEN.power(n)


def convert_for_arith(value):
    '''Return value as a WideFloat if it is a WideFloat, float or int, otherwise None.'''
    if isinstance(value, WideFloat):
        return value
    if isinstance(value, float):
        return from_float(value)
    if isinstance(value, int):
        return from_int(value)
    return None


def compare_any(value, other):
    '''LHS is a WideFloat.  RHS is any type.  Returns None for unsupported types.'''
    if isinstance(other, WideFloat):
        return value.compare(other)
    if isinstance(other, float):
        return value.compare(from_float(other))
    if isinstance(other, int):
        rounded = from_int(other)
        result = value.compare(rounded)
        # The integer may have been rounded.  If so value is an integer too and they can
        # be compared exactly.
        if result == Compare.EQUAL and rounded.exponent > SIGNIFICAND_BITS:
            n, _ = value.as_integer_ratio()
            result = Compare((n > other) - (n < other) + 1)
        return result
    return None


#
# Exported functions
#

DefaultContext = Context()
tls = threading.local()


def get_context():
    try:
        return tls.context
    except AttributeError:
        tls.context = DefaultContext.copy()
        return tls.context


def set_context(context):
    '''Sets the current thread's context to context (not a copy of it).'''
    tls.context = context


class LocalContext:
    '''A context manager that will set the current context for the active thread to a copy of
    context on entry to the with-statement and restore the previous context on exit.  If
    no context is specified a copy of the current context is taken instead.
    '''

    def __init__(self, context=None):
        self.saved_context = None
        self.context_to_set = context

    def __enter__(self):
        self.saved_context = get_context()
        context = (self.context_to_set or self.saved_context).copy()
        set_context(context)
        return context

    def __exit__(self, etype, value, traceback):
        set_context(self.saved_context)


local_context = LocalContext

#
# Constants
#

ZERO = WideFloat._make((ZERO_EXPONENT, 0.0))
ONE = WideFloat._make((0, 1.0))
_TEN = WideFloat._make((3, 1.25))

_HASH_MODULUS = sys.hash_info.modulus
_HASH_BITS = _HASH_MODULUS.bit_length()

_converters = {
    int: from_int,
    float: from_float,
    str: from_string,
}

DEC_FLOAT_REGEX = re.compile(
    # sign[opt]
    '[-+]?'
    # (dec-integer[opt].fraction or dec-integer.[opt])
    '(([0-9]*)\\.([0-9]+)|([0-9]+)\\.?)'
    # e sign[opt]dec-exponent   [opt]
    '(e([-+]?[0-9]+))?$',
    re.ASCII | re.IGNORECASE
)
