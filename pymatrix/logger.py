"""module for logging pymatrix progress
"""
from datetime import datetime
import threading
import warnings
from .pymatrix_warnings import PymatrixWarning
from .exceptions import MatrixError


class Logger(object):
    """a basic class for logging events during matrix calculations.
        if filename is passed, then a file handle is opened.

    Args:
        filename (`str`): Filename to write logged events to. If `True`, no file
            is created and logged events are echoed to standard out.  If `False`,
            nothing is written anywhere.
        echo (`bool`):  Flag to cause logged events to be echoed to the screen.

    Example::

        logger = pymatrix.Logger("matrix.log")
        a = pymatrix.Matrix(100, 100, logger=logger)
        b = a * a   # "starting"/"finished" lines with elapsed time in matrix.log
        logger.close()

    """

    def __init__(self, filename, echo=False):
        self.items = {}
        self.echo = bool(echo)
        self.f = None
        self._lock = threading.Lock()
        if filename is True:
            self.echo = True
            self.filename = None
        elif filename:
            self.filename = filename
            self.f = open(filename, "w")
            self.statement("opening " + str(filename) + " for logging")
        else:
            self.filename = None

    def _write(self, s):
        with self._lock:
            if self.echo:
                print(s, end="")
            if self.f is not None and not self.f.closed:
                self.f.write(s)
                self.f.flush()

    def statement(self, phrase):
        """log a one-time statement

        Arg:
            phrase (`str`): statement to log

        """
        self._write(str(datetime.now()) + " " + str(phrase) + "\n")

    def log(self, phrase):
        """log something that happened.

        Arg:
            phrase (`str`): statement to log

        Notes:
            The first time phrase is passed the start time is saved.
                The second time the phrase is logged, the elapsed time is written.
                Start times are kept per thread, and nothing is kept when the
                logger is not `active`
        """
        if not self.active:
            return
        key = (phrase, threading.get_ident())
        t = datetime.now()
        with self._lock:
            start = self.items.pop(key, None)
            if start is None:
                self.items[key] = t
        if start is not None:
            s = (
                str(t)
                + " finished: "
                + str(phrase)
                + " took: "
                + str(t - start)
                + "\n"
            )
        else:
            s = str(t) + " starting: " + str(phrase) + "\n"
        self._write(s)

    @property
    def active(self):
        """`bool`: True if logged events go to the screen or an open file"""
        return self.echo or (self.f is not None and not self.f.closed)

    def warn(self, message):
        """write a warning to the log file.

        Arg:
            message (`str`): warning statement to log

        """
        self._write(str(datetime.now()) + " WARNING: " + message + "\n")
        warnings.warn(message, PymatrixWarning)

    def lraise(self, message, error=MatrixError):
        """log an exception, then raise it

        Arg:
            message (`str`): exception statement to log
            error (`type` or `Exception`): exception class to raise with `message`,
                or an already-built exception instance.  Default is `MatrixError`

        """
        self._write(str(datetime.now()) + " ERROR: " + message + "\n")
        if isinstance(error, BaseException):
            raise error
        raise error(message)

    def close(self):
        """close the log file, if one is open"""
        if self.f is not None and not self.f.closed:
            self.f.close()
