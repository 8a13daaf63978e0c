from collections.abc import Callable
import pyray as rl


Trace = Callable[[str], None]


def info(text: str):
    # trace_log takes a printf-style format
    rl.trace_log(rl.TraceLogLevel.LOG_INFO, text.replace("%", "%%"))
