# app.py
import sys
from absl import logging as absl_logging
from prototype.cache import ShapeCache, ShapeNotFoundError
from prototype.shape import CloneFailureError
from drawing.adapter import ShapeDrawerAdapter, UnsupportedShapeError
from notifier.subject import Subject, ReentrantNotificationError
from notifier.console import ConsoleObserver

LOG_VERBOSITY = "warning"
PROTOTYPE_IDS = ("1", "2")
ADAPTER_KINDS = ("circle", "square")
DEMO_STATES = ("State 1", "State 2")

FATAL_ERRORS = (ShapeNotFoundError, CloneFailureError, UnsupportedShapeError, ReentrantNotificationError)


def run_prototype(cache: ShapeCache) -> None:
    cache.load()
    for shape_id in PROTOTYPE_IDS:
        shape = cache.get_shape(shape_id)
        print(f"Shape: {shape.kind.label}")
        shape.draw()


def run_adapter() -> None:
    for kind in ADAPTER_KINDS:
        ShapeDrawerAdapter(kind).draw(kind)


def run_observer() -> Subject:
    subject = Subject()
    ConsoleObserver(subject)
    for state in DEMO_STATES:
        subject.set_state(state)
    return subject


def main() -> int:
    absl_logging.set_verbosity(LOG_VERBOSITY)

    # Cache is owned here and dropped when main returns.
    cache = ShapeCache()
    try:
        run_prototype(cache)
        run_adapter()
        run_observer()
    except FATAL_ERRORS as e:
        absl_logging.error("Demo aborted: %s", e)
        print(f"[APP] Failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
