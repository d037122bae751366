import inspect


def get_caller_from_stack(depth: int = 1) -> str | None:
    """Return the source file of the frame ``depth`` levels above the caller of this function.

    Walks live frame objects rather than a formatted traceback. ``depth=1``
    is whoever called the function that called us. Returns ``None`` when the
    interpreter does not expose frames or the stack is not deep enough.
    """
    frame = inspect.currentframe()
    if frame is None:
        return None
    try:
        target = frame.f_back
        for _ in range(depth):
            if target is None:
                return None
            target = target.f_back
        if target is None:
            return None
        return target.f_code.co_filename
    finally:
        del frame
