import sys
import time
from typing import List, Dict, Any, Callable, Optional, Type

# registered tests, in definition order; cleared after each run
_registry: List[Dict[str, Any]] = []

_COLORS = {'ok': '\033[92m', 'fail': '\033[91m', 'info': '\033[94m', 'grey': '\033[90m', 'reset': '\033[0m'}


def _paint(color: str, text: str) -> str:
    return f"{_COLORS[color]}{text}{_COLORS['reset']}"


class SuiteAssertionError(AssertionError):
    """a failed check, as opposed to an error raised by the code under test."""


def test(description: str) -> Callable:
    """register the decorated function under description; the function itself is returned unchanged."""
    def register(func: Callable) -> Callable:
        _registry.append({'func': func, 'description': description})
        return func
    return register


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(expected: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise expected; returns the exception for further checks."""
    try:
        func(*args, **kwargs)
    except expected as e:
        return e
    raise SuiteAssertionError(f"{getattr(func, '__name__', func)} did not raise {expected.__name__}")


def _outcome(func: Callable) -> Optional[str]:
    """None on success, otherwise a one-line reason."""
    try:
        func()
    except SuiteAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run") -> bool:
    """run and report every registered test; True when none failed."""
    print(_paint('info', f"\n--- {title} ---"))
    started = time.perf_counter()
    failures = 0

    for entry in _registry:
        reason = _outcome(entry['func'])
        if reason is None:
            print(f"  {_paint('ok', 'pass')}  {entry['description']}")
        else:
            failures += 1
            print(f"  {_paint('fail', 'FAIL')}  {entry['description']}")
            print(_paint('grey', f"    -> {reason}"))

    total = len(_registry)
    elapsed_ms = (time.perf_counter() - started) * 1000
    summary = f"{total - failures}/{total} passed in {elapsed_ms:.2f}ms"
    print("\n" + _paint('ok' if failures == 0 else 'fail', summary) + "\n")

    _registry.clear()
    return failures == 0


def main(title: str) -> None:
    """run the registered tests and exit non-zero on failure."""
    sys.exit(0 if run(title=title) else 1)
