from functools import wraps


class RPNError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator converting unexpected exceptions into RPNErrors.

    The message is fmt formatted with the call's arguments; the original
    exception rides along as the second argument. RPNErrors pass through.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
