'''
Sample a calculator's program as a function of one variable, for plotting.
'''

from itertools import count
import math


def sample(calculator, start, stop, step, variable='x', variables=None):
    '''
    Yield (x, y) for x from start up to, not including, stop.

    y is None where the program can't be evaluated, or isn't finite there.
    Nothing is yielded for an empty program. variables are bound alongside
    x on every evaluation.
    '''
    if not (math.isfinite(start) and math.isfinite(stop)):
        raise ValueError('Range must be finite, not {} to {}'
                         .format(start, stop))
    if not step > 0:
        raise ValueError('Step must be positive, not {}'.format(step))
    return _sample(calculator, start, stop, step, variable, variables or {})


def _sample(calculator, start, stop, step, variable, variables):
    if not calculator.has_program:
        return
    # Multiply rather than accumulate, so the steps don't drift.
    for i in count():
        x = start + i * step
        if x >= stop:
            return
        y = calculator.evaluate_for_variable_values(dict(variables,
                                                         **{variable: x}))
        if y is not None and not math.isfinite(y):
            y = None
        yield x, y


def trace(calculator, start, stop, step, variable='x', variables=None):
    '''
    Return the plottable parts of the program as lists of (x, y) points.

    A new segment starts after every point that had to be skipped, so
    asymptotes and holes aren't drawn across.
    '''
    segments = []
    segment = []
    for x, y in sample(calculator, start, stop, step, variable, variables):
        if y is None:
            if segment:
                segments.append(segment)
                segment = []
            continue
        segment.append((x, y))
    if segment:
        segments.append(segment)
    return segments
