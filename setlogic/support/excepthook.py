"""Interactive shells report instances of :class:`NoTraceException` by their
message only. Importing this module installs the hooks for the plain Python
shell and, when running inside IPython, for the IPython shell.
"""
import sys
from typing import Any, Optional
from types import TracebackType

import IPython


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. Syntax errors in formulas typed at the prompt are the typical
    case: they are a normal situation during interactive use, and the message
    together with the unparsed rest of the input tells the user everything.
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(str(exc), file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython

def ipy_custom_exc(ipy: Any, exc_type: type[NoTraceException],
                   exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    handler(exc, tb)


ipy = IPython.get_ipython()
if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exc)
