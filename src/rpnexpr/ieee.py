'''
Floating point functions with IEEE 754 results instead of exceptions.

Python's math module raises ValueError, ZeroDivisionError or OverflowError
where the hardware would hand back nan or an infinity. A calculator wants
the latter: 1 ÷ 0 is inf, √-1 is nan, and it is up to whoever draws the
result to skip it.
'''

from functools import wraps
import math


def total(f):
    '''
    Make f total: domain errors become nan, overflows become inf.
    '''
    @wraps(f)
    def wrapped(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapped


def number(n):
    '''
    Convert n to float; ints too big for one become ±inf.
    '''
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def _isoddintegral(n):
    return math.isfinite(n) and n == math.floor(n) and math.fmod(n, 2) != 0


def divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    except OverflowError:
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def power(base, exponent):
    '''
    base ** exponent, the C pow() way.
    '''
    try:
        return math.pow(base, exponent)
    except (ValueError, ZeroDivisionError):
        if base == 0:
            # pow(±0, negative)
            if math.copysign(1.0, base) < 0 and _isoddintegral(exponent):
                return -math.inf
            return math.inf
        # Negative base, non-integral exponent
        return math.nan
    except OverflowError:
        if base < 0 and _isoddintegral(exponent):
            return -math.inf
        return math.inf


def exp10(n):
    return power(10.0, n)


@total
def log(n):
    if n == 0:
        return -math.inf
    return math.log(n)


@total
def log10(n):
    if n == 0:
        return -math.inf
    return math.log10(n)


exp = total(math.exp)
sqrt = total(math.sqrt)

sin = total(math.sin)
cos = total(math.cos)
tan = total(math.tan)
asin = total(math.asin)
acos = total(math.acos)
atan = total(math.atan)
