import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that so failed checks can be told apart from crashes."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable on its own (and by pytest)."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and check that it raises error_type; returns the caught error for further checks."""
    try:
        func()
    except error_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run", only: Optional[str] = None) -> int:
    """
    runs every registered test whose description contains `only` (all when None),
    prints a report and returns the number of failures.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    selected = [t for t in _suite_state['tests'] if only is None or only in t['description']]
    _suite_state['results'] = []

    for entry in selected:
        error = None
        try:
            entry['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        passed = error is None
        _suite_state['results'].append({'passed': passed, 'description': entry['description'], 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {entry['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {entry['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failures = _print_summary(start_time)

    # clear registrations so several suites can run from one script
    _suite_state['tests'] = []
    return failures


def main(title: str) -> None:
    """footer for test modules run as scripts; an optional argv filter narrows the run, failures set the exit code."""
    only = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(1 if run(title, only) else 0)


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
