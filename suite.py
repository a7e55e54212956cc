import time
import traceback
from functools import wraps
from typing import Any, Callable, List, NamedTuple, Optional, Type

_GREEN, _RED, _YELLOW, _BLUE, _GREY, _RESET = (
    '\033[92m', '\033[91m', '\033[93m', '\033[94m', '\033[90m', '\033[0m'
)


class _Case(NamedTuple):
    description: str
    func: Callable[[], Any]


class _Outcome(NamedTuple):
    description: str
    error: Optional[str]

    @property
    def passed(self) -> bool:
        return self.error is None


_registered: List[_Case] = []


class TestAssertionError(AssertionError):
    """failed assert_that / assert_raises, reported apart from unexpected errors."""
    __test__ = False


def test(description: str) -> Callable:
    """register the decorated function under a readable description."""

    def decorator(func: Callable) -> Callable:
        _registered.append(_Case(description, func))

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and return the error_type it raised, failing if it raised nothing."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def _execute(case: _Case, verbose_errors: bool) -> _Outcome:
    try:
        case.func()
    except TestAssertionError as e:
        return _Outcome(case.description, f"assertion failed: {e}")
    except Exception as e:
        if verbose_errors:
            traceback.print_exc()
        return _Outcome(case.description, f"{type(e).__name__}: {e}")
    return _Outcome(case.description, None)


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every registered case in registration order; True when all pass."""
    print(f"\n{_BLUE}== {title} =={_RESET}")
    started = time.perf_counter()

    outcomes = []
    for case in _registered:
        outcome = _execute(case, verbose_errors)
        outcomes.append(outcome)
        if outcome.passed:
            print(f"  {_GREEN}ok  {_RESET} {outcome.description}")
        else:
            print(f"  {_RED}FAIL{_RESET} {outcome.description}")
            print(f"       {_GREY}{outcome.error}{_RESET}")

    # a script may register and run several batches
    _registered.clear()

    elapsed_ms = (time.perf_counter() - started) * 1000
    failed = sum(1 for o in outcomes if not o.passed)
    colour = _GREEN if failed == 0 else _RED
    print(f"\n{colour}{len(outcomes) - failed}/{len(outcomes)} passed{_RESET}"
          f" in {_YELLOW}{elapsed_ms:.2f}ms{_RESET}\n")
    return failed == 0
